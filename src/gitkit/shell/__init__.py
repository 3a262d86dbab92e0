"""Command line execution in a child process."""

from gitkit.shell.abc import Completion as Completion
from gitkit.shell.abc import Shell as Shell
from gitkit.shell.fake import FakeShell as FakeShell
from gitkit.shell.real import DEFAULT_SHELL_TYPE as DEFAULT_SHELL_TYPE
from gitkit.shell.real import RealShell as RealShell
