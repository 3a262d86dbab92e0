"""Failures surfaced by shell execution.

Errors carry what the process reported, unmodified. Nothing here interprets
git's own error messages.
"""


class ShellError(Exception):
    """Base class for command execution failures."""


class EmptyOutputError(ShellError):
    """Raised when a command exits successfully but writes nothing to stdout."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Command produced no output: {command}")


class ProcessError(ShellError):
    """Raised when a command exits with a non-zero status.

    Attributes:
        exit_code: The process exit status
        stderr: Captured error stream, verbatim
        command: The command line that was executed
    """

    def __init__(self, exit_code: int, stderr: str, command: str) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        self.command = command
        message = f"Command failed with exit code {exit_code}: {command}"
        if stderr.strip():
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message)
