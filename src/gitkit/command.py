"""Primitive git subcommands."""

from enum import Enum


class Command(Enum):
    """Bare subcommand tokens understood by the git CLI.

    The value of each member is the literal token passed to git.
    """

    # start a working area (see also: git help tutorial)
    CONFIG = "config"
    CLEAN = "clean"
    CLONE = "clone"
    INITIALIZE = "init"

    # work on the current change (see also: git help everyday)
    ADD = "add"
    MV = "mv"
    RESET = "reset"
    RM = "rm"

    # examine the history and state (see also: git help revisions)
    BISECT = "bisect"
    GREP = "grep"
    LOG = "log"
    SHOW = "show"
    STATUS = "status"

    # grow, mark and tweak your common history
    BRANCH = "branch"
    CHECKOUT = "checkout"
    COMMIT = "commit"
    DIFF = "diff"
    MERGE = "merge"
    REBASE = "rebase"
    TAG = "tag"

    # collaborate (see also: git help workflows)
    FETCH = "fetch"
    PULL = "pull"
    PUSH = "push"
    SUBMODULE = "submodule"
    REMOTE = "remote"
    REV_PARSE = "rev-parse"
    REV_LIST = "rev-list"
    LS_REMOTE = "ls-remote"


# Commands that may target a directory which does not exist yet
DIRECTORY_CREATING_COMMANDS = frozenset({Command.INITIALIZE, Command.CLONE})
