"""Abstract base class for Git tag operations.

Tags are written with plumbing commands: the tag object is stored first, then
the ref is pointed at it in a single atomic update.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from reltag.gateway.git.tag_ops.types import TagRefEntry


class GitTagOps(ABC):
    """Abstract interface for Git tag operations.

    This interface contains both query and mutation operations for tags.
    All implementations (real, fake, dry-run) must implement this interface.
    Tag names are passed without the 'refs/tags/' prefix.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def list_tag_refs(self, repo_root: Path) -> list[TagRefEntry]:
        """List every ref under refs/tags/.

        Args:
            repo_root: Path to the repository root

        Returns:
            Tag refs in the order git reports them

        Raises:
            RuntimeError: If the git command fails
        """
        ...

    @abstractmethod
    def tag_ref_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check whether refs/tags/<tag_name> exists (exact name, no patterns).

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name to check (e.g., 'v1.0.0')
        """
        ...

    @abstractmethod
    def is_valid_tag_name(self, repo_root: Path, tag_name: str) -> bool:
        """Check whether refs/tags/<tag_name> is a well-formed ref name."""
        ...

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def write_tag_object(self, repo_root: Path, payload: str) -> str:
        """Store an annotated tag object in the object database.

        Args:
            repo_root: Path to the repository root
            payload: Complete tag object content, including any signature

        Returns:
            Object id of the stored tag

        Raises:
            RuntimeError: If git rejects the payload
        """
        ...

    @abstractmethod
    def update_tag_ref(
        self, repo_root: Path, tag_name: str, object_id: str, *, force: bool
    ) -> None:
        """Point refs/tags/<tag_name> at an object.

        Args:
            repo_root: Path to the repository root
            tag_name: Tag name (e.g., 'v1.0.0')
            object_id: Tag object id to point at
            force: If False, the update fails when the ref already exists

        Raises:
            RuntimeError: If the ref cannot be updated
        """
        ...

    @abstractmethod
    def delete_tag_ref(self, repo_root: Path, tag_name: str) -> None:
        """Delete refs/tags/<tag_name>.

        Raises:
            RuntimeError: If the ref cannot be deleted
        """
        ...
