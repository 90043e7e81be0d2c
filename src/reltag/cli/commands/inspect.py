"""Read-only commands describing the repository."""

import json

import click

from reltag.cli.core import handle_for, reltag_errors
from reltag.context import ReltagContext
from reltag.output import machine_output


@click.command("origin")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
@click.pass_obj
def origin_cmd(ctx: ReltagContext, as_json: bool) -> None:
    """Show hosting kind, owner/name and URL of the origin remote."""
    with reltag_errors():
        origin = handle_for(ctx).resolve_origin()

    if as_json:
        data = {
            "kind": origin.kind.value,
            "owner": origin.owner,
            "name": origin.name,
            "url": origin.url,
        }
        machine_output(json.dumps(data))
        return

    machine_output(f"{origin.kind.value}\t{origin.full_name}\t{origin.url}")


@click.command("head")
@click.option("--json", "as_json", is_flag=True, help="Print as JSON")
@click.pass_obj
def head_cmd(ctx: ReltagContext, as_json: bool) -> None:
    """Show the commit HEAD points at and its branch.

    The branch is empty when HEAD is detached; --json also reports "detached".
    """
    with reltag_errors():
        head = handle_for(ctx).current_head()

    if as_json:
        data = {
            "short_id": head.short_id,
            "full_id": head.full_id,
            "branch": head.branch,
            "detached": head.is_detached,
        }
        machine_output(json.dumps(data))
        return

    machine_output(f"{head.short_id}\t{head.full_id}\t{head.branch}")
