"""Value types returned by repository operations."""

from dataclasses import dataclass, field
from enum import Enum


class HostingKind(Enum):
    """Code-hosting provider a remote URL belongs to."""

    GITHUB = "github"
    GITLAB = "gitlab"
    CODEBERG = "codeberg"
    OTHER = "other"


@dataclass(frozen=True)
class ParsedRemote:
    """Hosting kind, owner and repository name parsed from a remote URL."""

    kind: HostingKind
    owner: str
    name: str


@dataclass(frozen=True)
class RemoteDescriptor:
    """Identity of the repository's origin remote.

    Attributes:
        kind: Hosting provider classified from the URL host
        owner: Second-to-last path segment of the URL
        name: Last path segment with '.git' removed
        url: The configured URL (password stripped)
    """

    kind: HostingKind
    owner: str
    name: str
    url: str

    @property
    def full_name(self) -> str:
        """Owner and name joined as 'owner/name'."""
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class CommitInfo:
    """The commit HEAD points at.

    Attributes:
        short_id: First 7 characters of full_id
        full_id: Full hex object id
        branch: Branch name without 'refs/heads/', or "" when detached
    """

    short_id: str
    full_id: str
    branch: str

    @property
    def is_detached(self) -> bool:
        return self.branch == ""


@dataclass(frozen=True, order=True)
class TagRef:
    """A tag pointer. Ordering compares tag names only.

    Attributes:
        name: Tag name without 'refs/tags/'
        ref: Full ref name
        object_id: Id the ref points at (tag object for annotated tags)
        commit_id: Commit the tag ultimately points at
    """

    name: str
    ref: str = field(compare=False)
    object_id: str = field(compare=False)
    commit_id: str = field(compare=False)
