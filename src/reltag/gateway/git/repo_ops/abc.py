"""Abstract interface for git repository location operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepoOps(ABC):
    """Abstract interface for locating git repositories on disk.

    All implementations (real, fake) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def has_git_metadata(self, path: Path) -> bool:
        """Check whether a directory is the root of a git working tree.

        Only the given directory is inspected; parents are not searched.

        Args:
            path: Directory to inspect

        Returns:
            True if the directory holds a `.git` directory or a `.git` worktree file
        """
        ...
