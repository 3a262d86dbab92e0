"""User-facing diagnostic output."""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a diagnostic message to stderr.

    stdout is reserved for command output so diagnostics never mix with it.
    """
    click.echo(message, nl=nl, err=True)
