"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

import click

from reltag.config import ReleaseConfig, load_release_config
from reltag.errors import InvalidConfig
from reltag.gateway.git.abc import Git
from reltag.signing.abc import TagSigner


@dataclass(frozen=True)
class ReltagContext:
    """Immutable context holding all dependencies for reltag operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    Attributes:
        git: Git gateway used for every repository operation
        signer: Signature provider used when signing is enabled
        config: Release configuration loaded from basedir
        basedir: Directory repository lookup starts from
        root_search: Search parent directories of basedir for the repository
        dry_run: Print tag mutations instead of executing them
        debug: Debug logging enabled
    """

    git: Git
    signer: TagSigner
    config: ReleaseConfig
    basedir: Path
    root_search: bool
    dry_run: bool
    debug: bool


def create_context(
    *,
    basedir: Path,
    root_search: bool | None,
    dry_run: bool,
    debug: bool,
) -> ReltagContext:
    """Create production context with real implementations.

    Args:
        basedir: Directory to start repository lookup from
        root_search: Overrides `[git] root_search` from the config when not None
        dry_run: If True, tag mutations are printed instead of executed
        debug: If True, debug logging was requested

    Returns:
        ReltagContext with real git and gpg implementations

    Raises:
        click.ClickException: If .reltag/config.toml is invalid
    """
    from reltag.gateway.git.real import RealGit
    from reltag.signing.gpg import GpgTagSigner

    try:
        config = load_release_config(basedir)
    except InvalidConfig as e:
        raise click.ClickException(str(e)) from e
    resolved_root_search = root_search if root_search is not None else config.git.root_search

    return ReltagContext(
        git=RealGit(dry_run=dry_run),
        signer=GpgTagSigner(config.signing.program),
        config=config,
        basedir=basedir,
        root_search=resolved_root_search,
        dry_run=dry_run,
        debug=debug,
    )


def context_for_test(
    git: Git | None = None,
    signer: TagSigner | None = None,
    config: ReleaseConfig | None = None,
    basedir: Path | None = None,
    root_search: bool | None = None,
    dry_run: bool = False,
    debug: bool = False,
) -> ReltagContext:
    """Create test context with optional pre-configured implementations.

    Uses fakes by default to avoid subprocess calls.

    Args:
        git: Optional Git implementation. If None, creates an empty FakeGit.
        signer: Optional TagSigner. If None, creates FakeTagSigner.
        config: Optional ReleaseConfig. If None, uses ReleaseConfig.defaults().
        basedir: Base directory (defaults to Path("/fake/repo"))
        root_search: Defaults to the config's `[git] root_search`
        dry_run: Whether dry-run mode is on (default False)
        debug: Whether debug mode is on (default False)

    Example:
        >>> from reltag.gateway.git.fake import FakeGit
        >>> git = FakeGit.for_repository(Path("/fake/repo"), head_commit="a" * 40)
        >>> ctx = context_for_test(git=git)
    """
    from reltag.gateway.git.fake import FakeGit
    from reltag.signing.fake import FakeTagSigner

    resolved_config = config if config is not None else ReleaseConfig.defaults()
    return ReltagContext(
        git=git if git is not None else FakeGit(),
        signer=signer if signer is not None else FakeTagSigner(),
        config=resolved_config,
        basedir=basedir if basedir is not None else Path("/fake/repo"),
        root_search=root_search if root_search is not None else resolved_config.git.root_search,
        dry_run=dry_run,
        debug=debug,
    )
