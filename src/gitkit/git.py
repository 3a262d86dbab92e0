"""Git command façade.

Builds git command lines from aliases, rooted at an optional working
directory, and runs them through a Shell.
"""

from __future__ import annotations

import logging
from concurrent.futures import Future
from typing import TYPE_CHECKING

from gitkit.alias import Alias
from gitkit.command import DIRECTORY_CREATING_COMMANDS
from gitkit.output import user_output
from gitkit.shell.abc import Completion, Shell
from gitkit.shell.real import DEFAULT_SHELL_TYPE, RealShell

if TYPE_CHECKING:
    from gitkit.config import GitkitConfig

logger = logging.getLogger(__name__)

GIT_EXECUTABLE = "git"

_DIRECTORY_CREATING_TOKENS = frozenset(c.value for c in DIRECTORY_CREATING_COMMANDS)


class Git:
    """Runs git aliases in a child process.

    Attributes:
        path: Working directory. When set, every command changes into it
            first; init and clone also create it. When None, commands run in
            the current directory (or touch global configuration only).
        verbose: Echo each built command line to stderr before it runs.

    Neither attribute is synchronized; mutate them only while no runs are in
    flight.

    Usage:
        git = Git(path="/tmp/repo")
        git.run(Cmd(Command.INITIALIZE))
        git.run(Commit(message="initial", allow_empty=True))
        head = git.run(RevParse("HEAD", abbrev_ref=True))
    """

    def __init__(
        self,
        path: str | None = None,
        shell_type: str = DEFAULT_SHELL_TYPE,
        env: dict[str, str] | None = None,
        *,
        shell: Shell | None = None,
    ) -> None:
        """Create a Git façade.

        Args:
            path: Working directory for every command
            shell_type: Shell executable, ignored when `shell` is given
            env: Extra environment variables, ignored when `shell` is given
            shell: Shell implementation to run commands with. Defaults to a
                RealShell built from shell_type and env.
        """
        self.path = path
        self.verbose = False
        self._shell = shell if shell is not None else RealShell(shell_type, env)

    @classmethod
    def from_config(
        cls, config: GitkitConfig, path: str | None = None, *, shell: Shell | None = None
    ) -> Git:
        """Create a Git façade from loaded configuration."""
        git = cls(path, config.shell_type, config.env, shell=shell)
        git.verbose = config.verbose
        return git

    @property
    def shell(self) -> Shell:
        return self._shell

    def build(self, alias: Alias) -> str:
        """Assemble the full command line for an alias.

        Layout: `[mkdir -p <path> &&] [cd <path> &&] git <alias tokens>`.
        The mkdir segment is only added for init and clone.
        """
        params = alias.command_params()
        cmd: list[str] = []
        if self.path is not None:
            if _first_token(params) in _DIRECTORY_CREATING_TOKENS:
                cmd += ["mkdir", "-p", self.path, "&&"]
            cmd += ["cd", self.path, "&&"]
        cmd += [GIT_EXECUTABLE, *params]

        command = " ".join(cmd)
        logger.debug("Built git command: %s", command)
        if self.verbose:
            try:
                user_output(command)
            except OSError:
                logger.debug("Could not echo command line: %s", command)
        return command

    def run(self, target: Alias | str) -> str:
        """Run an alias, or a raw command line, and wait for it.

        A string is handed to the shell verbatim: no `git` prefix and no
        working directory handling.

        Returns:
            Standard output without trailing newlines

        Raises:
            EmptyOutputError: If the command succeeded with no output
            ProcessError: If the command exited with a non-zero status
        """
        return self._shell.run(self._command_line(target))

    def run_async(self, target: Alias | str, completion: Completion) -> Future[None]:
        """Run an alias, or a raw command line, without blocking.

        `completion(output, error)` is called exactly once after the process
        exits, on a worker thread. Exactly one of its arguments is set.

        Returns:
            Future resolved once the completion has returned
        """
        return self._shell.run_async(self._command_line(target), completion)

    def _command_line(self, target: Alias | str) -> str:
        if isinstance(target, Alias):
            return self.build(target)
        return target


def _first_token(params: list[str]) -> str:
    # Raw aliases may pack several tokens into one string
    if not params:
        return ""
    return params[0].split(" ", 1)[0]
