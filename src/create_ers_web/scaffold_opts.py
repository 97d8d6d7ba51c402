"""Options dataclass for the init command."""

from dataclasses import dataclass


@dataclass
class ScaffoldOpts:
    """All options for the init command."""

    directory: str = "."
    bun: str = "bun"
    skip_install: bool = False
    dry_run: bool = False
    ignore_command_errors: bool = False
