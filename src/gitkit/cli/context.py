"""Context object shared by gitkit CLI commands."""

from dataclasses import dataclass
from pathlib import Path

from gitkit.config import load_config
from gitkit.git import Git


@dataclass(frozen=True)
class CliContext:
    """Dependencies for CLI commands.

    Attributes:
        git: Façade used to build and run commands
        dry_run: Print built command lines instead of running them
    """

    git: Git
    dry_run: bool


def create_context(
    *,
    path: str | None,
    config_dir: Path,
    verbose: bool,
    dry_run: bool,
) -> CliContext:
    """Create the production context from gitkit.toml and CLI flags.

    The --verbose flag can only turn verbosity on; it never overrides a
    config file that enables it.
    """
    config = load_config(config_dir)
    git = Git.from_config(config, path)
    git.verbose = git.verbose or verbose
    return CliContext(git=git, dry_run=dry_run)
