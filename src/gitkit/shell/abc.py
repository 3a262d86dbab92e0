"""Shell execution abstraction.

This module provides an ABC for running command lines in a child process so
that command building can be tested without spawning processes.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from concurrent.futures import Future

Completion = Callable[[str | None, Exception | None], None]


class Shell(ABC):
    """Abstract shell operations for dependency injection.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def run(self, command_line: str) -> str:
        """Run a command line and block until the process exits.

        Args:
            command_line: Full command line, interpreted by the shell

        Returns:
            Standard output with trailing newlines removed

        Raises:
            EmptyOutputError: If the process succeeded but wrote nothing to stdout
            ProcessError: If the process exited with a non-zero status
        """
        ...

    @abstractmethod
    def run_async(self, command_line: str, completion: Completion) -> Future[None]:
        """Run a command line on a worker thread.

        The completion is called exactly once, after the process exits, with
        either the output or the error. It may be called on any thread.

        Args:
            command_line: Full command line, interpreted by the shell
            completion: Callback receiving (output, error)

        Returns:
            Future that resolves once the completion has returned
        """
        ...


def run_and_complete(shell: Shell, command_line: str, completion: Completion) -> None:
    """Run a command synchronously and hand the outcome to a completion.

    Meant to be submitted to a worker. Any exception raised by the run, spawn
    failures and invalid command lines included, is delivered to the
    completion instead of being left on the future.
    """
    try:
        output = shell.run(command_line)
    except Exception as e:
        completion(None, e)
        return
    completion(output, None)
