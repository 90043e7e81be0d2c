"""Fake implementation of git repository location operations for testing."""

from pathlib import Path

from reltag.gateway.git.repo_ops.abc import GitRepoOps


class FakeGitRepoOps(GitRepoOps):
    """In-memory fake implementation for testing.

    Constructor Injection: the set of directories that hold git metadata.
    """

    def __init__(self, *, repository_roots: set[Path] | None = None) -> None:
        """Create FakeGitRepoOps with pre-configured state.

        Args:
            repository_roots: Directories treated as working-tree roots
        """
        self._repository_roots = repository_roots if repository_roots is not None else set()

    def has_git_metadata(self, path: Path) -> bool:
        """Check whether the path is a configured repository root."""
        return path in self._repository_roots
