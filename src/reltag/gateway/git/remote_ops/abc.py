"""Abstract base class for Git remote operations.

This sub-gateway only reads remote configuration; it never contacts a remote.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class GitRemoteOps(ABC):
    """Abstract interface for Git remote configuration queries.

    All implementations (real, fake) must implement this interface.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_remote_names(self, repo_root: Path) -> list[str]:
        """List the names of all configured remotes.

        Args:
            repo_root: Path to the repository root

        Returns:
            Remote names in configuration order (e.g., ["origin", "upstream"])

        Raises:
            RuntimeError: If the git command fails
        """
        ...

    @abstractmethod
    def get_remote_urls(self, repo_root: Path, remote: str) -> list[str]:
        """Get every URL configured for a remote.

        Args:
            repo_root: Path to the repository root
            remote: Remote name (e.g., "origin")

        Returns:
            URLs in configuration order; empty if the remote has none

        Raises:
            subprocess.CalledProcessError: If the git command fails
        """
        ...
