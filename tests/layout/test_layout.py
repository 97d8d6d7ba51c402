import pytest

from create_ers_web import layout
from create_ers_web.templates.template_loader import load_template


@pytest.mark.unit
class TestLayout:

    def test_directories(self):
        assert layout.DIRECTORIES == [
            "config",
            "src/graphql",
            "src/restful",
            "src/websocket",
            "src/web/pages",
        ]

    def test_every_file_has_a_bundled_template(self):
        for scaffold_file in layout.FILES:
            load_template(scaffold_file.template)

    def test_every_file_lives_in_a_scaffold_directory_or_root(self):
        parents = {"", "src/web"} | set(layout.DIRECTORIES)
        for scaffold_file in layout.FILES:
            parent = scaffold_file.path.rpartition("/")[0]
            assert parent in parents, scaffold_file.path

    def test_dependencies_are_unique(self):
        assert len(layout.DEPENDENCIES) == len(set(layout.DEPENDENCIES))
        assert len(layout.DEV_DEPENDENCIES) == len(set(layout.DEV_DEPENDENCIES))


@pytest.mark.unit
class TestCommandBuilders:

    def test_init_command(self):
        assert layout.init_command("bun") == ["bun", "init", "-y"]

    def test_add_command(self):
        assert layout.add_command("bun", ["react", "daisyui"]) == ["bun", "add", "react", "daisyui"]

    def test_add_dev_command(self):
        assert layout.add_command("bun", ["@types/node"], dev=True) == ["bun", "add", "-D", "@types/node"]
