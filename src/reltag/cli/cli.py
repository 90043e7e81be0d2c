import logging
from pathlib import Path

import click

from reltag.cli.commands.inspect import head_cmd, origin_cmd
from reltag.cli.commands.tag import delete_tag_cmd, tag_cmd, tag_exists_cmd, tags_cmd
from reltag.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="reltag")
@click.option(
    "-C",
    "--basedir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Run as if started in this directory (default: current directory)",
)
@click.option(
    "--root-search/--no-root-search",
    default=None,
    help="Search parent directories for the repository (overrides .reltag/config.toml)",
)
@click.option("--dry-run", is_flag=True, help="Print tag changes instead of making them")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    basedir: Path | None,
    root_search: bool | None,
    dry_run: bool,
    debug: bool,
) -> None:
    """Inspect a git repository and manage its release tags."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(
            basedir=basedir if basedir is not None else Path.cwd(),
            root_search=root_search,
            dry_run=dry_run,
            debug=debug,
        )


cli.add_command(origin_cmd)
cli.add_command(head_cmd)
cli.add_command(tags_cmd)
cli.add_command(tag_exists_cmd)
cli.add_command(tag_cmd)
cli.add_command(delete_tag_cmd)


def main() -> None:
    """CLI entry point used by the `reltag` console script."""
    cli()
