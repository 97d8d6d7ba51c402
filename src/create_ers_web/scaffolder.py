"""Scaffolder: lays down an ERS web project and hands off to bun."""

import os
import sys
from dataclasses import dataclass, field
from typing import List

import click

from create_ers_web import layout
from create_ers_web.command_runner import CommandFailedError
from create_ers_web.filesystem import (
    ensure_directory,
    remove_file_if_present,
    write_file_if_absent,
)
from create_ers_web.manifest_patch import patch_manifests
from create_ers_web.templates.template_loader import load_template


@dataclass
class ScaffoldResult:
    """What a single scaffold run did."""
    created: List[str] = field(default_factory=list)
    skipped: bool = False
    failed_commands: List[List[str]] = field(default_factory=list)


class Scaffolder:
    """Creates the scaffold under *root* using the injected command runner.

    Every step runs to completion before the next one starts. Files and
    directories that already exist are left alone. The run is guarded by
    package.json: once it exists, the scaffolder does nothing.
    """

    def __init__(self, root, command_runner, opts):
        self._root = os.path.abspath(root)
        self._command_runner = command_runner
        self._opts = opts

    def guard_file_exists(self) -> bool:
        return os.path.exists(os.path.join(self._root, layout.GUARD_FILE))

    def commands(self) -> List[List[str]]:
        """Toolchain commands in the order they run."""
        bun = self._opts.bun
        cmds = [layout.init_command(bun)]
        if not self._opts.skip_install:
            cmds.append(layout.add_command(bun, layout.DEPENDENCIES))
            cmds.append(layout.add_command(bun, layout.DEV_DEPENDENCIES, dev=True))
        return cmds

    def plan(self) -> List[str]:
        """Describe what run() would do, without touching disk."""
        if self.guard_file_exists():
            return []

        actions = []
        for rel_path in layout.DIRECTORIES:
            if not os.path.lexists(os.path.join(self._root, rel_path)):
                actions.append(f"mkdir {rel_path}")
        for scaffold_file in layout.FILES:
            if not os.path.lexists(os.path.join(self._root, scaffold_file.path)):
                actions.append(f"write {scaffold_file.path}")

        init_cmd, *install_cmds = self.commands()
        actions.append(f"run {' '.join(init_cmd)}")
        actions.append(f"patch {layout.GUARD_FILE}")
        actions.append(f"patch {layout.TSCONFIG_FILE}")
        for cmd in install_cmds:
            actions.append(f"run {' '.join(cmd)}")
        return actions

    def run(self) -> ScaffoldResult:
        result = ScaffoldResult()
        click.echo(self._root)

        if self.guard_file_exists():
            click.echo(f"{layout.GUARD_FILE} already existed, skip creating")
            result.skipped = True
            return result

        for rel_path in layout.DIRECTORIES:
            if ensure_directory(self._root, rel_path):
                result.created.append(rel_path)

        for scaffold_file in layout.FILES:
            content = load_template(scaffold_file.template)
            if write_file_if_absent(self._root, scaffold_file.path, content):
                result.created.append(scaffold_file.path)

        init_cmd, *install_cmds = self.commands()
        self._run_command(init_cmd, result)
        remove_file_if_present(self._root, layout.GENERATED_METADATA_FILE)
        patch_manifests(self._root, layout.GUARD_FILE, layout.TSCONFIG_FILE)

        if install_cmds:
            click.echo("please wait")
        for cmd in install_cmds:
            self._run_command(cmd, result)

        return result

    def _run_command(self, cmd, result):
        try:
            self._command_runner.run(cmd, cwd=self._root)
        except CommandFailedError as e:
            if not self._opts.ignore_command_errors:
                raise
            print(f"Warning: {e}", file=sys.stderr)
            result.failed_commands.append(cmd)
