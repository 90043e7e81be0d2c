"""Types returned by Git tag operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TagRefEntry:
    """A raw tag ref as stored in the repository.

    Attributes:
        ref: Full ref name (e.g., "refs/tags/v1.0.0")
        object_id: Id the ref points at (a tag object for annotated tags)
        commit_id: Id after peeling annotated tags; equals object_id for
            lightweight tags
    """

    ref: str
    object_id: str
    commit_id: str
