"""No-op Git tag operations wrapper for dry-run mode.

This module provides a wrapper that prevents execution of destructive
tag operations while delegating read-only operations to the wrapped implementation.
"""

from pathlib import Path

from reltag.gateway.git.tag_ops.abc import GitTagOps
from reltag.gateway.git.tag_ops.types import TagRefEntry
from reltag.output import user_output
from reltag.refs import tag_ref
from reltag.tag_object import compute_tag_object_id


class DryRunGitTagOps(GitTagOps):
    """No-op wrapper that prevents execution of destructive tag operations.

    This wrapper intercepts destructive git operations (write_tag_object,
    update_tag_ref, delete_tag_ref) and prints what would happen. Read-only
    operations are delegated to the wrapped implementation, so existence
    checks still reflect the real repository.

    Usage:
        real_ops = RealGitTagOps()
        noop_ops = DryRunGitTagOps(real_ops)

        # Query operations work normally
        exists = noop_ops.tag_ref_exists(repo_root, "v1.0.0")

        # Mutation operations print dry-run message
        noop_ops.update_tag_ref(repo_root, "v1.0.0", object_id, force=False)
    """

    def __init__(self, wrapped: GitTagOps) -> None:
        """Create a dry-run wrapper around a GitTagOps implementation.

        Args:
            wrapped: The GitTagOps implementation to wrap (usually RealGitTagOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def list_tag_refs(self, repo_root: Path) -> list[TagRefEntry]:
        return self._wrapped.list_tag_refs(repo_root)

    def tag_ref_exists(self, repo_root: Path, tag_name: str) -> bool:
        return self._wrapped.tag_ref_exists(repo_root, tag_name)

    def is_valid_tag_name(self, repo_root: Path, tag_name: str) -> bool:
        return self._wrapped.is_valid_tag_name(repo_root, tag_name)

    # ============================================================================
    # Mutation Operations (print dry-run message)
    # ============================================================================

    def write_tag_object(self, repo_root: Path, payload: str) -> str:
        """Print dry-run message and return the id the object would get."""
        user_output("[DRY RUN] Would run: git mktag")
        return compute_tag_object_id(payload)

    def update_tag_ref(
        self, repo_root: Path, tag_name: str, object_id: str, *, force: bool
    ) -> None:
        """Print dry-run message instead of updating the ref."""
        old_value = "" if force else " ''"
        command = f"git update-ref {tag_ref(tag_name)} {object_id}{old_value}"
        user_output(f"[DRY RUN] Would run: {command}")

    def delete_tag_ref(self, repo_root: Path, tag_name: str) -> None:
        """Print dry-run message instead of deleting the ref."""
        user_output(f"[DRY RUN] Would run: git update-ref -d {tag_ref(tag_name)}")
