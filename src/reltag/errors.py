"""Exception taxonomy for repository and tag operations.

Every operation on RepositoryHandle raises one of these on failure. When a
failure originates in a git command or a signer, the original exception is
chained with ``raise ... from cause`` and exposed through ``cause``.
"""

from pathlib import Path


class ReltagError(Exception):
    """Base exception for reltag errors."""

    error_type = "reltag-error"

    @property
    def cause(self) -> BaseException | None:
        """The underlying exception this error wraps, if any."""
        return self.__cause__


class NotARepository(ReltagError):
    """Raised when no git metadata is found at (or above) the base directory."""

    error_type = "not-a-repository"

    def __init__(self, path: Path, *, searched_upward: bool) -> None:
        self.path = path
        self.searched_upward = searched_upward
        where = f"{path} or any parent directory" if searched_upward else str(path)
        super().__init__(f"No git repository found at {where}")


class MissingRemote(ReltagError):
    """Raised when the repository has no remote with the requested name."""

    error_type = "missing-remote"

    def __init__(self, remote: str) -> None:
        self.remote = remote
        super().__init__(f"Repository doesn't have an '{remote}' remote")


class MalformedRemote(ReltagError):
    """Raised when a remote has no URL, or its URL has no owner/name path."""

    error_type = "malformed-remote"

    def __init__(self, url: str | None, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(reason)


class RemoteQueryFailed(ReltagError):
    """Raised when reading remote configuration fails."""

    error_type = "remote-query-failed"

    def __init__(self, remote: str) -> None:
        self.remote = remote
        super().__init__(f"Could not determine '{remote}' remote")


class HeadUnresolvable(ReltagError):
    """Raised when HEAD does not resolve to a commit (e.g. no commits yet)."""

    error_type = "head-unresolvable"

    def __init__(self, repo_root: Path, reason: str) -> None:
        self.repo_root = repo_root
        self.reason = reason
        super().__init__(f"Could not resolve HEAD in {repo_root}: {reason}")


class TagQueryFailed(ReltagError):
    """Raised when listing or matching tags fails."""

    error_type = "tag-query-failed"

    def __init__(self, pattern: str | None, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        if pattern is None:
            super().__init__(f"Could not list tags: {reason}")
        else:
            super().__init__(f"Could not find tag {pattern}: {reason}")


class TagAlreadyExists(ReltagError):
    """Raised when creating a tag without force and the tag already exists."""

    error_type = "tag-already-exists"

    def __init__(self, tag_name: str) -> None:
        self.tag_name = tag_name
        super().__init__(f"Tag {tag_name} already exists (use force to replace it)")


class TagCreationFailed(ReltagError):
    """Raised when an annotated tag cannot be created."""

    error_type = "tag-creation-failed"

    def __init__(self, tag_name: str, reason: str) -> None:
        self.tag_name = tag_name
        self.reason = reason
        super().__init__(f"Could not create tag {tag_name}: {reason}")


class TagDeletionFailed(ReltagError):
    """Raised when a tag cannot be deleted, including when it does not exist."""

    error_type = "tag-deletion-failed"

    def __init__(self, tag_name: str, reason: str) -> None:
        self.tag_name = tag_name
        self.reason = reason
        super().__init__(f"Could not delete tag {tag_name}: {reason}")


class SigningError(ReltagError):
    """Raised by a TagSigner when it cannot produce a signature."""

    error_type = "signing-failed"


class InvalidConfig(ReltagError):
    """Raised when .reltag/config.toml is not valid TOML or holds a value of the wrong type."""

    error_type = "invalid-config"

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid config {path}: {reason}")
