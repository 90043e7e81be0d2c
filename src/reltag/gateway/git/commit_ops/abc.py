"""Abstract base class for Git HEAD and commit queries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitCommitOps(ABC):
    """Abstract interface for reading HEAD and commit identity.

    All implementations (real, fake) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def resolve_head_commit(self, repo_root: Path) -> str | None:
        """Resolve HEAD to the full id of the commit it points at.

        Args:
            repo_root: Path to the repository root

        Returns:
            Full hex commit id, or None if HEAD does not resolve to a commit
            (no commits yet, or a corrupt object)
        """
        ...

    @abstractmethod
    def get_head_symbolic_ref(self, repo_root: Path) -> str | None:
        """Get the ref HEAD points at symbolically.

        Args:
            repo_root: Path to the repository root

        Returns:
            Full ref name (e.g., "refs/heads/main"), or None when HEAD is detached

        Raises:
            subprocess.CalledProcessError: If the git command fails
        """
        ...

    @abstractmethod
    def get_tagger_ident(self, repo_root: Path) -> str:
        """Get the identity line used for the tagger of new tags.

        Args:
            repo_root: Path to the repository root

        Returns:
            Identity as "Name <email> <unix-timestamp> <tz-offset>"

        Raises:
            RuntimeError: If no identity is configured
        """
        ...
