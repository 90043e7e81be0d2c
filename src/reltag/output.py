"""Output helpers separating user-facing messages from machine-readable data."""

from typing import Any

import click


def user_output(message: Any = "", *, nl: bool = True) -> None:
    """Print a message for humans to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", *, nl: bool = True) -> None:
    """Print data meant for scripts to stdout."""
    click.echo(message, nl=nl)
