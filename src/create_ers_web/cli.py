"""Top-level Click group for the create-ers-web CLI."""

import os
import sys

import click

from create_ers_web import layout
from create_ers_web.command_runner import CommandFailedError, CommandRunner
from create_ers_web.scaffold_opts import ScaffoldOpts
from create_ers_web.scaffolder import Scaffolder


@click.group()
def main():
    """create-ers-web - scaffold a Bun + React + GraphQL web project."""


def scaffold(opts: ScaffoldOpts, command_runner) -> int:
    """Run (or dry-run) the scaffold for *opts* and return the exit status."""
    if opts.dry_run:
        scaffolder = Scaffolder(opts.directory, command_runner, opts)
        actions = scaffolder.plan()
        if not actions:
            click.echo(f"{layout.GUARD_FILE} already existed, nothing to do")
        for action in actions:
            click.echo(action)
        return 0

    os.makedirs(opts.directory, exist_ok=True)
    scaffolder = Scaffolder(opts.directory, command_runner, opts)

    try:
        result = scaffolder.run()
    except CommandFailedError as e:
        print(f"Error: {e}", file=sys.stderr)
        return e.returncode if e.returncode > 0 else 1

    if result.failed_commands:
        print(
            f"Warning: {len(result.failed_commands)} command(s) failed; "
            "the scaffold may be incomplete",
            file=sys.stderr,
        )
    return 0


@main.command("init")
@click.argument("directory", default=".")
@click.option("--bun", default="bun", metavar="PATH",
              help="bun executable to invoke (default: bun)")
@click.option("--skip-install", is_flag=True,
              help="Skip installing dependencies after bun init")
@click.option("--dry-run", is_flag=True,
              help="Print what would be created and run, then exit")
@click.option("--ignore-command-errors", is_flag=True,
              help="Keep going when a bun command fails")
def init_cmd(**kwargs):
    """Scaffold a new project in DIRECTORY unless package.json already exists."""
    opts = ScaffoldOpts(**kwargs)
    sys.exit(scaffold(opts, CommandRunner()))


@main.command("layout")
def layout_cmd():
    """List the directories and files a scaffold creates."""
    for rel_path in layout.DIRECTORIES:
        click.echo(f"{rel_path}/")
    for scaffold_file in layout.FILES:
        click.echo(scaffold_file.path)
