"""Load bundled scaffold files from the templates package."""

import importlib.resources

_FILES_DIR = "files"


def load_template(template_name: str, *, package: str = "create_ers_web.templates") -> str:
    """Return the text of a bundled scaffold file, unchanged.

    Args:
        template_name: Path relative to the ``files`` directory
            (e.g. "src/graphql/schema.graphql").
        package: Package holding the ``files`` directory.

    Returns:
        The file contents exactly as shipped.

    Raises:
        FileNotFoundError: If no such template is bundled.
    """
    resource = importlib.resources.files(package).joinpath(_FILES_DIR)
    for part in template_name.split("/"):
        resource = resource.joinpath(part)
    if not resource.is_file():
        raise FileNotFoundError(f"Template not found: {template_name}")
    return resource.read_text(encoding="utf-8")
