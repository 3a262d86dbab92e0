"""Typed builder and runner for git command lines.

This package provides parameterized git aliases that expand to command
tokens, and a façade that runs them in a child process.
"""

from gitkit.alias import (
    AddAll,
    AddRemote,
    Alias,
    Checkout,
    Clone,
    Cmd,
    Commit,
    Config,
    Create,
    Delete,
    Fetch,
    Log,
    LsRemote,
    Merge,
    Pull,
    Push,
    Raw,
    ReadConfig,
    RenameRemote,
    RevList,
    RevParse,
    Status,
    SubmoduleForeach,
    SubmoduleUpdate,
    Tag,
    WriteConfig,
)
from gitkit.command import Command
from gitkit.errors import EmptyOutputError, ProcessError, ShellError
from gitkit.git import Git

__all__ = [
    "Alias",
    "AddAll",
    "AddRemote",
    "Checkout",
    "Clone",
    "Cmd",
    "Command",
    "Commit",
    "Config",
    "Create",
    "Delete",
    "EmptyOutputError",
    "Fetch",
    "Git",
    "Log",
    "LsRemote",
    "Merge",
    "ProcessError",
    "Pull",
    "Push",
    "Raw",
    "ReadConfig",
    "RenameRemote",
    "RevList",
    "RevParse",
    "ShellError",
    "Status",
    "SubmoduleForeach",
    "SubmoduleUpdate",
    "Tag",
    "WriteConfig",
]
