"""Shared helpers for reltag commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import click

from reltag.context import ReltagContext
from reltag.errors import ReltagError
from reltag.repository import RepositoryHandle


def handle_for(ctx: ReltagContext) -> RepositoryHandle:
    """Build the repository handle a command operates on."""
    return RepositoryHandle.from_context(ctx)


@contextmanager
def reltag_errors() -> Iterator[None]:
    """Report ReltagError as a click error (exit code 1)."""
    try:
        yield
    except ReltagError as e:
        raise click.ClickException(str(e)) from e
