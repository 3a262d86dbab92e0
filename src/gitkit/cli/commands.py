import click

from gitkit.alias import Alias, Checkout, Clone, Cmd, Commit, Log, Raw, Status
from gitkit.cli.context import CliContext
from gitkit.command import Command
from gitkit.errors import EmptyOutputError, ProcessError
from gitkit.output import user_output


def execute_alias(ctx: CliContext, alias: Alias) -> None:
    """Run an alias and print its output, or print the command line in dry-run mode.

    Commands that succeed silently (e.g. checkout, which reports on stderr)
    print nothing.
    """
    if ctx.dry_run:
        click.echo(ctx.git.build(alias))
        return

    try:
        output = ctx.git.run(alias)
    except EmptyOutputError:
        return
    except ProcessError as e:
        user_output(f"Error: {e}")
        raise SystemExit(e.exit_code) from None
    click.echo(output)


@click.command("init")
@click.pass_obj
def init_cmd(ctx: CliContext) -> None:
    """Create an empty repository, creating the directory if needed."""
    execute_alias(ctx, Cmd(Command.INITIALIZE))


@click.command("clone")
@click.argument("url")
@click.argument("dir_name", required=False)
@click.pass_obj
def clone_cmd(ctx: CliContext, url: str, dir_name: str | None) -> None:
    """Clone URL into the working directory."""
    execute_alias(ctx, Clone(url=url, dir_name=dir_name))


@click.command("status")
@click.option("-s", "--short", is_flag=True, help="Give the output in the short format")
@click.pass_obj
def status_cmd(ctx: CliContext, short: bool) -> None:
    """Show the working tree status."""
    execute_alias(ctx, Status(short=short))


@click.command("log")
@click.option("-n", "--number", "number_of_commits", type=int, help="Limit the number of commits")
@click.option(
    "-o",
    "--option",
    "options",
    multiple=True,
    help="Raw option passed to git log (repeatable), e.g. --option=--oneline",
)
@click.argument("revisions", required=False)
@click.pass_obj
def log_cmd(
    ctx: CliContext,
    number_of_commits: int | None,
    options: tuple[str, ...],
    revisions: str | None,
) -> None:
    """Show commit logs."""
    execute_alias(
        ctx,
        Log(
            number_of_commits=number_of_commits,
            options=options if options else None,
            revisions=revisions,
        ),
    )


@click.command("commit")
@click.option("-m", "--message", required=True, help="Commit message")
@click.option("--allow-empty", is_flag=True, help="Allow a commit with no changes")
@click.option(
    "--gpg-sign/--no-gpg-sign",
    "gpg_signed",
    default=None,
    help="Force GPG signing on or off",
)
@click.pass_obj
def commit_cmd(ctx: CliContext, message: str, allow_empty: bool, gpg_signed: bool | None) -> None:
    """Record changes to the repository."""
    execute_alias(ctx, Commit(message=message, allow_empty=allow_empty, gpg_signed=gpg_signed))


@click.command("checkout")
@click.argument("branch")
@click.argument("tracking", required=False)
@click.option("-b", "create", is_flag=True, help="Create the branch")
@click.pass_obj
def checkout_cmd(ctx: CliContext, branch: str, tracking: str | None, create: bool) -> None:
    """Check out BRANCH, optionally creating it to track TRACKING."""
    execute_alias(ctx, Checkout(branch=branch, create=create, tracking=tracking))


@click.command("raw")
@click.argument("text")
@click.pass_obj
def raw_cmd(ctx: CliContext, text: str) -> None:
    """Run `git TEXT` with TEXT passed through unchanged."""
    execute_alias(ctx, Raw(text))
