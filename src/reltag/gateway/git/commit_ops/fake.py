"""Fake implementation of Git commit queries for testing."""

from __future__ import annotations

from pathlib import Path

from reltag.gateway.git.commit_ops.abc import GitCommitOps

DEFAULT_TAGGER_IDENT = "Test User <test@example.com> 1700000000 +0000"


class FakeGitCommitOps(GitCommitOps):
    """In-memory fake implementation of Git commit queries.

    Constructor Injection:
    ---------------------
    - head_commits: Mapping of repo_root -> full commit id of HEAD.
      Repositories missing from the mapping have no commits.
    - head_refs: Mapping of repo_root -> ref HEAD points at.
      Missing or None means detached.
    - tagger_ident: Identity line returned by get_tagger_ident()
    """

    def __init__(
        self,
        *,
        head_commits: dict[Path, str] | None = None,
        head_refs: dict[Path, str | None] | None = None,
        tagger_ident: str = DEFAULT_TAGGER_IDENT,
    ) -> None:
        self._head_commits = head_commits if head_commits is not None else {}
        self._head_refs = head_refs if head_refs is not None else {}
        self._tagger_ident = tagger_ident

    def resolve_head_commit(self, repo_root: Path) -> str | None:
        return self._head_commits.get(repo_root)

    def get_head_symbolic_ref(self, repo_root: Path) -> str | None:
        return self._head_refs.get(repo_root)

    def get_tagger_ident(self, repo_root: Path) -> str:
        return self._tagger_ident

    # ============================================================================
    # Test Setup
    # ============================================================================

    def set_head(self, repo_root: Path, commit_id: str) -> None:
        """Move HEAD of repo_root to another commit (simulates a new commit)."""
        self._head_commits[repo_root] = commit_id
