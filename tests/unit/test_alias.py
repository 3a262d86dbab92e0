"""Tests for alias expansion."""

import pytest

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


@pytest.mark.parametrize(
    ("alias", "expected"),
    [
        (AddAll(), "add ."),
        (Status(), "status"),
        (Commit(message="hi"), 'commit -m "hi"'),
        (Clone(url="https://example.com/repo.git"), "clone https://example.com/repo.git"),
        (Checkout(branch="main"), "checkout main"),
        (Log(), "log --"),
        (Push(), "push"),
        (Pull(), "pull"),
        (Merge(branch="feature"), "merge feature"),
        (Create(branch="feature"), "checkout -b feature"),
        (Delete(branch="feature"), "branch -D feature"),
        (Tag(name="v1.0.0"), "tag v1.0.0"),
        (Fetch(), "fetch"),
        (SubmoduleUpdate(), "submodule update"),
        (SubmoduleForeach(command="pwd"), "submodule foreach pwd"),
        (RenameRemote(old_name="upstream", new_name="fork"), "remote rename upstream fork"),
        (AddRemote(name="origin", url="git@host:r.git"), "remote add origin git@host:r.git"),
        (WriteConfig(name="user.name", value="Test"), "config --add user.name Test"),
        (ReadConfig(name="user.name"), "config --get user.name"),
        (RevParse(revision="HEAD"), "rev-parse HEAD"),
        (RevList(branch="HEAD"), "rev-list HEAD"),
        (LsRemote(url="/tmp/repo"), "ls-remote /tmp/repo"),
        (Cmd(Command.INITIALIZE), "init"),
        (Raw("status --porcelain"), "status --porcelain"),
    ],
)
def test_expansion_without_optional_parameters(alias: Alias, expected: str) -> None:
    """Each alias expands to its fixed tokens when no options are supplied."""
    assert alias.raw_value == expected


def test_absent_optionals_contribute_no_tokens() -> None:
    """Omitted parameters never produce empty-string tokens."""
    assert Push().command_params() == ["push"]
    assert Fetch(remote="origin").command_params() == ["fetch", "origin"]
    assert Cmd(Command.BRANCH).command_params() == ["branch"]


def test_cmd_appends_args() -> None:
    assert Cmd(Command.BRANCH, "-a").raw_value == "branch -a"


def test_raw_is_verbatim() -> None:
    """Raw text is not split or validated."""
    alias = Raw("init && git commit -m 'initial' --allow-empty")

    assert alias.command_params() == ["init && git commit -m 'initial' --allow-empty"]


class TestCommit:
    def test_allow_empty(self) -> None:
        assert Commit(message="hi", allow_empty=True).raw_value == 'commit -m "hi" --allow-empty'

    def test_gpg_signed_true_adds_gpg_sign(self) -> None:
        params = Commit(message="m", allow_empty=True, gpg_signed=True).command_params()

        assert "--gpg-sign" in params
        assert "--no-gpg-sign" not in params

    def test_gpg_signed_false_adds_no_gpg_sign(self) -> None:
        params = Commit(message="m", allow_empty=True, gpg_signed=False).command_params()

        assert "--no-gpg-sign" in params
        assert "--gpg-sign" not in params

    def test_message_is_not_escaped(self) -> None:
        assert Commit(message="fix: it's done").raw_value == 'commit -m "fix: it\'s done"'


class TestCheckout:
    def test_create(self) -> None:
        assert Checkout(branch="x", create=True).raw_value == "checkout -b x"

    def test_create_with_tracking(self) -> None:
        alias = Checkout(branch="x", create=True, tracking="origin/main")

        assert alias.raw_value == "checkout -b x origin/main"

    def test_flag_precedes_branch(self) -> None:
        params = Checkout(branch="x", create=True).command_params()

        assert params.index("-b") < params.index("x")


class TestLog:
    def test_separator_without_revisions(self) -> None:
        assert Log(number_of_commits=1).command_params() == ["log", "-1", "--"]

    def test_separator_precedes_revisions(self) -> None:
        alias = Log(number_of_commits=2, options=("--oneline", "--graph"), revisions="main..HEAD")

        assert alias.command_params() == ["log", "-2", "--oneline", "--graph", "--", "main..HEAD"]

    def test_options_keep_their_order(self) -> None:
        alias = Log(options=("--pretty=format:%s", "--reverse"))

        assert alias.raw_value == "log --pretty=format:%s --reverse --"

    def test_separator_appears_once(self) -> None:
        assert Log(revisions="HEAD~3").command_params().count("--") == 1


class TestPushPullFetch:
    def test_push_remote_and_branch(self) -> None:
        assert Push(remote="origin", branch="main").raw_value == "push origin main"

    def test_pull_rebase_precedes_remote(self) -> None:
        alias = Pull(remote="origin", branch="main", rebase=True)

        assert alias.raw_value == "pull --rebase origin main"

    def test_pull_rebase_only(self) -> None:
        assert Pull(rebase=True).raw_value == "pull --rebase"

    def test_fetch_remote_and_branch(self) -> None:
        assert Fetch(remote="origin", branch="main").raw_value == "fetch origin main"


class TestSubmodules:
    def test_update_all_flags(self) -> None:
        alias = SubmoduleUpdate(init=True, recursive=True, rebase=True)

        assert alias.raw_value == "submodule update --init --recursive --rebase"

    @pytest.mark.parametrize(
        ("alias", "flag"),
        [
            (SubmoduleUpdate(init=True), "--init"),
            (SubmoduleUpdate(recursive=True), "--recursive"),
            (SubmoduleUpdate(rebase=True), "--rebase"),
        ],
    )
    def test_update_single_flag(self, alias: SubmoduleUpdate, flag: str) -> None:
        assert alias.command_params() == ["submodule", "update", flag]

    def test_foreach_recursive(self) -> None:
        alias = SubmoduleForeach(command="git status", recursive=True)

        assert alias.raw_value == "submodule foreach --recursive git status"


class TestRevisions:
    def test_rev_parse_abbrev_ref(self) -> None:
        assert RevParse(revision="HEAD", abbrev_ref=True).raw_value == "rev-parse --abbrev-ref HEAD"

    def test_rev_list_count(self) -> None:
        assert RevList(branch="HEAD", count=True).raw_value == "rev-list --count HEAD"

    def test_rev_list_revisions_replace_branch(self) -> None:
        alias = RevList(branch="HEAD", count=True, revisions="main..feature")

        assert alias.raw_value == "rev-list --count main..feature"

    def test_ls_remote_heads(self) -> None:
        alias = LsRemote(url="/tmp/repo", limit_to_heads=True)

        assert alias.raw_value == "ls-remote --heads /tmp/repo"


def test_config_is_write_config() -> None:
    assert Config(name="init.defaultBranch", value="main") == WriteConfig(
        name="init.defaultBranch", value="main"
    )


def test_expansion_is_deterministic() -> None:
    """Expanding the same alias twice yields identical tokens."""
    alias = Log(number_of_commits=3, options=("--oneline",), revisions="HEAD")

    assert alias.command_params() == alias.command_params()
    same = Log(number_of_commits=3, options=("--oneline",), revisions="HEAD")
    assert alias.raw_value == same.raw_value
