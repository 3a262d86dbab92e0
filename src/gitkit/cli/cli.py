import logging
from pathlib import Path

import click

from gitkit.cli.commands import (
    checkout_cmd,
    clone_cmd,
    commit_cmd,
    init_cmd,
    log_cmd,
    raw_cmd,
    status_cmd,
)
from gitkit.cli.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitkit")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "-C",
    "--path",
    default=None,
    help="Working directory to run git in (created for init and clone)",
)
@click.option("-v", "--verbose", is_flag=True, help="Print each git command line before running it")
@click.option("--dry-run", is_flag=True, help="Print git command lines instead of running them")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory containing gitkit.toml",
)
@click.pass_context
def cli(
    ctx: click.Context,
    debug: bool,
    path: str | None,
    verbose: bool,
    dry_run: bool,
    config_dir: Path,
) -> None:
    """Run git through typed command aliases."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(path=path, config_dir=config_dir, verbose=verbose, dry_run=dry_run)


cli.add_command(checkout_cmd)
cli.add_command(clone_cmd)
cli.add_command(commit_cmd)
cli.add_command(init_cmd)
cli.add_command(log_cmd)
cli.add_command(raw_cmd)
cli.add_command(status_cmd)


def main() -> None:
    """CLI entry point used by the `gitkit` console script."""
    cli()
