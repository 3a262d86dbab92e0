"""Production shell implementation using subprocess."""

import logging
import os
import subprocess
from concurrent.futures import Future, ThreadPoolExecutor

from gitkit.errors import EmptyOutputError, ProcessError
from gitkit.shell.abc import Completion, Shell, run_and_complete

logger = logging.getLogger(__name__)

DEFAULT_SHELL_TYPE = "/bin/sh"


class RealShell(Shell):
    """Production implementation that spawns `<shell_type> -c <command_line>`.

    No timeout is applied. A hung process blocks the caller (sync) or a
    worker thread (async).
    """

    def __init__(
        self, shell_type: str = DEFAULT_SHELL_TYPE, env: dict[str, str] | None = None
    ) -> None:
        """Create a RealShell.

        Args:
            shell_type: Shell executable used to interpret command lines
            env: Extra environment variables, layered over os.environ
        """
        self.shell_type = shell_type
        self.env = dict(env) if env is not None else {}
        self._executor: ThreadPoolExecutor | None = None

    def run(self, command_line: str) -> str:
        """Run a command line and return its trimmed stdout.

        Bytes that are not valid UTF-8 are decoded as U+FFFD.
        """
        logger.debug("Executing with %s: %s", self.shell_type, command_line)
        result = subprocess.run(
            [self.shell_type, "-c", command_line],
            capture_output=True,
            text=True,
            errors="replace",
            env={**os.environ, **self.env},
            check=False,
        )
        logger.debug("Exit status %d: %s", result.returncode, command_line)

        if result.returncode != 0:
            raise ProcessError(result.returncode, result.stderr, command_line)

        output = result.stdout.rstrip("\r\n")
        if not output:
            raise EmptyOutputError(command_line)
        return output

    def run_async(self, command_line: str, completion: Completion) -> Future[None]:
        """Submit a command line to this shell's worker pool."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(thread_name_prefix="gitkit-shell")
        return self._executor.submit(run_and_complete, self, command_line, completion)

    def shutdown(self, *, wait: bool = True) -> None:
        """Release the worker pool. Pending runs still complete."""
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None
