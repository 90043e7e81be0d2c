"""Fake implementation of Git remote operations for testing."""

from __future__ import annotations

from pathlib import Path

from reltag.gateway.git.remote_ops.abc import GitRemoteOps


class FakeGitRemoteOps(GitRemoteOps):
    """In-memory fake implementation of Git remote operations.

    Constructor Injection:
    ---------------------
    - remote_urls: Mapping of (repo_root, remote_name) -> configured URLs.
      A remote mapped to an empty list exists but has no URL.
    - query_raises: Exception raised by every query, simulating a
      broken repository configuration
    """

    def __init__(
        self,
        *,
        remote_urls: dict[tuple[Path, str], list[str]] | None = None,
        query_raises: Exception | None = None,
    ) -> None:
        """Create FakeGitRemoteOps with pre-configured state.

        Args:
            remote_urls: Mapping of (repo_root, remote_name) -> configured URLs
            query_raises: Exception to raise from queries
        """
        self._remote_urls = remote_urls if remote_urls is not None else {}
        self._query_raises = query_raises

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_remote_names(self, repo_root: Path) -> list[str]:
        """List remotes configured for repo_root."""
        if self._query_raises is not None:
            raise self._query_raises
        return [remote for (root, remote) in self._remote_urls if root == repo_root]

    def get_remote_urls(self, repo_root: Path, remote: str) -> list[str]:
        """Get the URLs configured for a remote (empty if unknown)."""
        if self._query_raises is not None:
            raise self._query_raises
        return list(self._remote_urls.get((repo_root, remote), []))
