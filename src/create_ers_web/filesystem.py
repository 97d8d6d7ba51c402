"""Idempotent filesystem helpers: create what is missing, never overwrite."""

import os

import click


def ensure_directory(root: str, rel_path: str) -> bool:
    """Create *rel_path* under *root* with any missing parents.

    Does nothing if anything already exists at that path.

    Returns:
        True if the directory was created.
    """
    full_path = os.path.join(root, rel_path)
    if os.path.lexists(full_path):
        return False
    os.makedirs(full_path, exist_ok=True)
    click.echo(f"created {rel_path}")
    return True


def write_file_if_absent(root: str, rel_path: str, content: str) -> bool:
    """Write *content* to *rel_path* under *root* unless something is already there.

    Returns:
        True if the file was written.
    """
    full_path = os.path.join(root, rel_path)
    if os.path.lexists(full_path):
        return False
    with open(full_path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    click.echo(f"created {rel_path}")
    return True


def remove_file_if_present(root: str, rel_path: str) -> bool:
    full_path = os.path.join(root, rel_path)
    if not os.path.isfile(full_path):
        return False
    os.remove(full_path)
    click.echo(f"removed {rel_path}")
    return True
