"""Parameterized git operations and their expansion into command tokens.

Architecture:
- Alias: Abstract base class; each subclass is one closed variant
- Variants: Frozen dataclasses carrying the parameters of one operation
- command_params(): Pure expansion of a variant into ordered tokens

Expansion never validates its inputs. Branch names, messages and URLs are
passed through as-is and any rejection happens inside git itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from gitkit.command import Command


class Alias(ABC):
    """A named, parameterized git operation.

    Subclasses are frozen dataclasses, so expansion depends on nothing but
    their fields.
    """

    @abstractmethod
    def command_params(self) -> list[str]:
        """Expand this alias into the tokens following `git`.

        Returns:
            The subcommand followed by its flags and arguments, in the order
            git's parser expects them
        """
        ...

    @property
    def raw_value(self) -> str:
        """Tokens joined with single spaces, e.g. "checkout -b feature"."""
        return " ".join(self.command_params())


# ============================================================================
# Generic Variants
# ============================================================================


@dataclass(frozen=True)
class Cmd(Alias):
    """A bare primitive command with an optional pre-formed argument string."""

    command: Command
    args: str | None = None

    def command_params(self) -> list[str]:
        params = [self.command.value]
        if self.args is not None:
            params.append(self.args)
        return params


@dataclass(frozen=True)
class Raw(Alias):
    """Escape hatch: the text is used verbatim after `git`."""

    text: str

    def command_params(self) -> list[str]:
        return [self.text]


# ============================================================================
# Working Tree Variants
# ============================================================================


@dataclass(frozen=True)
class AddAll(Alias):
    """Stage every change in the working tree."""

    def command_params(self) -> list[str]:
        return [Command.ADD.value, "."]


@dataclass(frozen=True)
class Status(Alias):
    short: bool = False

    def command_params(self) -> list[str]:
        params = [Command.STATUS.value]
        if self.short:
            params.append("--short")
        return params


@dataclass(frozen=True)
class Commit(Alias):
    """Record a commit with the given message.

    Attributes:
        message: Commit message, wrapped in double quotes on expansion
        allow_empty: Add --allow-empty
        gpg_signed: True adds --gpg-sign, False adds --no-gpg-sign,
            None leaves signing to git's configuration
    """

    message: str
    allow_empty: bool = False
    gpg_signed: bool | None = None

    def command_params(self) -> list[str]:
        params = [Command.COMMIT.value, "-m", f'"{self.message}"']
        if self.allow_empty:
            params.append("--allow-empty")
        if self.gpg_signed is True:
            params.append("--gpg-sign")
        elif self.gpg_signed is False:
            params.append("--no-gpg-sign")
        return params


@dataclass(frozen=True)
class Clone(Alias):
    url: str
    dir_name: str | None = None

    def command_params(self) -> list[str]:
        params = [Command.CLONE.value, self.url]
        if self.dir_name is not None:
            params.append(self.dir_name)
        return params


# ============================================================================
# Branch Variants
# ============================================================================


@dataclass(frozen=True)
class Checkout(Alias):
    """Check out a branch.

    Attributes:
        branch: Name of the branch to check out
        create: Create the branch instead of checking out an existing one
        tracking: When creating, the remote branch the new branch should track
    """

    branch: str
    create: bool = False
    tracking: str | None = None

    def command_params(self) -> list[str]:
        params = [Command.CHECKOUT.value]
        if self.create:
            params.append("-b")
        params.append(self.branch)
        if self.tracking is not None:
            params.append(self.tracking)
        return params


@dataclass(frozen=True)
class Create(Alias):
    branch: str

    def command_params(self) -> list[str]:
        return [Command.CHECKOUT.value, "-b", self.branch]


@dataclass(frozen=True)
class Delete(Alias):
    """Force-delete a local branch."""

    branch: str

    def command_params(self) -> list[str]:
        return [Command.BRANCH.value, "-D", self.branch]


@dataclass(frozen=True)
class Merge(Alias):
    branch: str

    def command_params(self) -> list[str]:
        return [Command.MERGE.value, self.branch]


@dataclass(frozen=True)
class Tag(Alias):
    name: str

    def command_params(self) -> list[str]:
        return [Command.TAG.value, self.name]


# ============================================================================
# History Variants
# ============================================================================


@dataclass(frozen=True)
class Log(Alias):
    """Show commit logs.

    The `--` separator is always emitted so git never mistakes the revisions
    argument (or a following path) for the other.

    Attributes:
        number_of_commits: Limit output to this many commits (-N)
        options: Raw option tokens, emitted in order (e.g. ["--oneline"])
        revisions: Revision range expression placed after the separator
    """

    number_of_commits: int | None = None
    options: tuple[str, ...] | None = None
    revisions: str | None = None

    def command_params(self) -> list[str]:
        params = [Command.LOG.value]
        if self.number_of_commits is not None:
            params.append(f"-{self.number_of_commits}")
        if self.options is not None:
            params.extend(self.options)
        params.append("--")
        if self.revisions is not None:
            params.append(self.revisions)
        return params


@dataclass(frozen=True)
class RevParse(Alias):
    revision: str
    abbrev_ref: bool = False

    def command_params(self) -> list[str]:
        params = [Command.REV_PARSE.value]
        if self.abbrev_ref:
            params.append("--abbrev-ref")
        params.append(self.revision)
        return params


@dataclass(frozen=True)
class RevList(Alias):
    """List commits reachable from a branch or revision range.

    `revisions` takes precedence over `branch` when both are given.
    """

    branch: str
    count: bool = False
    revisions: str | None = None

    def command_params(self) -> list[str]:
        params = [Command.REV_LIST.value]
        if self.count:
            params.append("--count")
        params.append(self.revisions if self.revisions is not None else self.branch)
        return params


# ============================================================================
# Remote Variants
# ============================================================================


@dataclass(frozen=True)
class Push(Alias):
    remote: str | None = None
    branch: str | None = None

    def command_params(self) -> list[str]:
        params = [Command.PUSH.value]
        if self.remote is not None:
            params.append(self.remote)
        if self.branch is not None:
            params.append(self.branch)
        return params


@dataclass(frozen=True)
class Pull(Alias):
    remote: str | None = None
    branch: str | None = None
    rebase: bool = False

    def command_params(self) -> list[str]:
        params = [Command.PULL.value]
        if self.rebase:
            params.append("--rebase")
        if self.remote is not None:
            params.append(self.remote)
        if self.branch is not None:
            params.append(self.branch)
        return params


@dataclass(frozen=True)
class Fetch(Alias):
    remote: str | None = None
    branch: str | None = None

    def command_params(self) -> list[str]:
        params = [Command.FETCH.value]
        if self.remote is not None:
            params.append(self.remote)
        if self.branch is not None:
            params.append(self.branch)
        return params


@dataclass(frozen=True)
class AddRemote(Alias):
    name: str
    url: str

    def command_params(self) -> list[str]:
        return [Command.REMOTE.value, "add", self.name, self.url]


@dataclass(frozen=True)
class RenameRemote(Alias):
    old_name: str
    new_name: str

    def command_params(self) -> list[str]:
        return [Command.REMOTE.value, "rename", self.old_name, self.new_name]


@dataclass(frozen=True)
class LsRemote(Alias):
    url: str
    limit_to_heads: bool = False

    def command_params(self) -> list[str]:
        params = [Command.LS_REMOTE.value]
        if self.limit_to_heads:
            params.append("--heads")
        params.append(self.url)
        return params


# ============================================================================
# Submodule Variants
# ============================================================================


@dataclass(frozen=True)
class SubmoduleUpdate(Alias):
    init: bool = False
    recursive: bool = False
    rebase: bool = False

    def command_params(self) -> list[str]:
        params = [Command.SUBMODULE.value, "update"]
        if self.init:
            params.append("--init")
        if self.recursive:
            params.append("--recursive")
        if self.rebase:
            params.append("--rebase")
        return params


@dataclass(frozen=True)
class SubmoduleForeach(Alias):
    """Run a shell command in every checked-out submodule."""

    command: str
    recursive: bool = False

    def command_params(self) -> list[str]:
        params = [Command.SUBMODULE.value, "foreach"]
        if self.recursive:
            params.append("--recursive")
        params.append(self.command)
        return params


# ============================================================================
# Configuration Variants
# ============================================================================


@dataclass(frozen=True)
class WriteConfig(Alias):
    """Add a configuration value (git config --add)."""

    name: str
    value: str

    def command_params(self) -> list[str]:
        return [Command.CONFIG.value, "--add", self.name, self.value]


@dataclass(frozen=True)
class ReadConfig(Alias):
    name: str

    def command_params(self) -> list[str]:
        return [Command.CONFIG.value, "--get", self.name]


Config = WriteConfig
