"""Fake Shell implementation for testing.

FakeShell is an in-memory implementation that returns canned results keyed by
command line, enabling fast and deterministic tests.
"""

from concurrent.futures import Future, ThreadPoolExecutor

from gitkit.errors import EmptyOutputError, ShellError
from gitkit.shell.abc import Completion, Shell, run_and_complete


class FakeShell(Shell):
    """In-memory fake implementation that returns configured results.

    Constructor Injection: canned outputs and errors passed via constructor.
    Mutation Tracking: records every command line it was asked to run.

    A command line with no configured output behaves like a process that
    printed nothing.
    """

    def __init__(
        self,
        *,
        outputs: dict[str, str] | None = None,
        errors: dict[str, ShellError] | None = None,
    ) -> None:
        """Create FakeShell with pre-configured results.

        Args:
            outputs: Mapping of command line -> stdout
            errors: Mapping of command line -> error to raise
        """
        self._outputs = outputs if outputs is not None else {}
        self._errors = errors if errors is not None else {}
        self._executed_commands: list[str] = []
        self._executor: ThreadPoolExecutor | None = None

    def run(self, command_line: str) -> str:
        self._executed_commands.append(command_line)
        if command_line in self._errors:
            raise self._errors[command_line]
        output = self._outputs.get(command_line, "").rstrip("\r\n")
        if not output:
            raise EmptyOutputError(command_line)
        return output

    def run_async(self, command_line: str, completion: Completion) -> Future[None]:
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="fake-shell")
        return self._executor.submit(run_and_complete, self, command_line, completion)

    def shutdown(self, *, wait: bool = True) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=wait)
            self._executor = None

    @property
    def executed_commands(self) -> list[str]:
        """Read-only access to executed command lines for test assertions."""
        return list(self._executed_commands)
