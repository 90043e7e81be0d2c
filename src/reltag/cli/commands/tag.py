"""Commands for listing, creating and deleting tags."""

import click

from reltag.cli.core import handle_for, reltag_errors
from reltag.constants import SHORT_ID_LENGTH
from reltag.context import ReltagContext
from reltag.output import machine_output, user_output
from reltag.signing.types import SigningContext


@click.command("tags")
@click.pass_obj
def tags_cmd(ctx: ReltagContext) -> None:
    """List tag names, sorted."""
    with reltag_errors():
        tags = handle_for(ctx).list_tags()

    for tag in tags:
        machine_output(tag.name)


@click.command("tag-exists")
@click.argument("pattern")
@click.pass_obj
def tag_exists_cmd(ctx: ReltagContext, pattern: str) -> None:
    """Exit 0 if a tag name fully matches PATTERN (a regular expression), 1 otherwise."""
    with reltag_errors():
        found = handle_for(ctx).tag_exists(pattern)

    if not found:
        raise SystemExit(1)


@click.command("tag")
@click.argument("name")
@click.option("-f", "--force", is_flag=True, help="Replace the tag if it already exists")
@click.option(
    "-m", "--message", default=None, help="Tag message (defaults to the configured template)"
)
@click.option(
    "--sign/--no-sign",
    default=None,
    help="Sign the tag (defaults to [signing] enabled in .reltag/config.toml)",
)
@click.pass_obj
def tag_cmd(
    ctx: ReltagContext, name: str, force: bool, message: str | None, sign: bool | None
) -> None:
    """Create annotated tag NAME at HEAD."""
    handle = handle_for(ctx)
    signing = handle.signing
    if sign is not None:
        signing = SigningContext(enabled=sign, key_id=signing.key_id, signer=signing.signer)

    with reltag_errors():
        tag = handle.create_tag(name, force=force, signing=signing, message=message)

    if ctx.dry_run:
        return

    user_output(f"Tagged {tag.commit_id[:SHORT_ID_LENGTH]} as {click.style(tag.name, fg='green')}")


@click.command("delete-tag")
@click.argument("name")
@click.pass_obj
def delete_tag_cmd(ctx: ReltagContext, name: str) -> None:
    """Delete tag NAME."""
    with reltag_errors():
        handle_for(ctx).delete_tag(name)

    if ctx.dry_run:
        return

    user_output(f"Deleted tag {click.style(name, fg='red')}")
