"""Fake implementation of Git tag operations for testing."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from reltag.gateway.git.tag_ops.abc import GitTagOps
from reltag.gateway.git.tag_ops.types import TagRefEntry
from reltag.refs import tag_ref
from reltag.tag_object import compute_tag_object_id, parse_tag_target

_FORBIDDEN_SUBSTRINGS = ("..", "@{", "//", " ", "~", "^", ":", "?", "*", "[", "\\")


@dataclass(frozen=True)
class TagRefUpdate:
    """Record of an update_tag_ref call."""

    tag_name: str
    object_id: str
    force: bool


class FakeGitTagOps(GitTagOps):
    """In-memory fake implementation of Git tag operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions. Tag objects written through
    write_tag_object() are stored by their real git object id, so refs to
    them peel to the commit named in the payload.

    Constructor Injection:
    ---------------------
    - tags: Mapping of repo_root -> {tag_name: object_id}. Object ids not
      written through write_tag_object() behave like lightweight tags.
    - list_raises / write_raises / update_raises / delete_raises: Exceptions
      raised by the corresponding operation

    Mutation Tracking:
    -----------------
    - written_payloads: Payloads passed to write_tag_object()
    - ref_updates: TagRefUpdate records from successful update_tag_ref() calls
    - deleted_tags: Tag names passed to successful delete_tag_ref() calls
    """

    def __init__(
        self,
        *,
        tags: dict[Path, dict[str, str]] | None = None,
        list_raises: Exception | None = None,
        write_raises: Exception | None = None,
        update_raises: Exception | None = None,
        delete_raises: Exception | None = None,
    ) -> None:
        self._tags: dict[Path, dict[str, str]] = tags if tags is not None else {}
        self._objects: dict[str, str] = {}
        self._list_raises = list_raises
        self._write_raises = write_raises
        self._update_raises = update_raises
        self._delete_raises = delete_raises

        # Mutation tracking
        self._written_payloads: list[str] = []
        self._ref_updates: list[TagRefUpdate] = []
        self._deleted_tags: list[str] = []

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_tag_refs(self, repo_root: Path) -> list[TagRefEntry]:
        """List tags of repo_root in insertion order."""
        if self._list_raises is not None:
            raise self._list_raises
        return [
            TagRefEntry(
                ref=tag_ref(tag_name),
                object_id=object_id,
                commit_id=self._peel(object_id),
            )
            for tag_name, object_id in self._tags.get(repo_root, {}).items()
        ]

    def tag_ref_exists(self, repo_root: Path, tag_name: str) -> bool:
        return tag_name in self._tags.get(repo_root, {})

    def is_valid_tag_name(self, repo_root: Path, tag_name: str) -> bool:
        """Approximate `git check-ref-format` for a single tag name."""
        if not tag_name or tag_name.startswith(("-", "/", ".")):
            return False
        if tag_name.endswith(("/", ".", ".lock")):
            return False
        if any(ord(char) < 0x20 or ord(char) == 0x7F for char in tag_name):
            return False
        return not any(bad in tag_name for bad in _FORBIDDEN_SUBSTRINGS)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def write_tag_object(self, repo_root: Path, payload: str) -> str:
        """Store the payload and return its object id."""
        if self._write_raises is not None:
            raise self._write_raises
        object_id = compute_tag_object_id(payload)
        self._objects[object_id] = payload
        self._written_payloads.append(payload)
        return object_id

    def update_tag_ref(
        self, repo_root: Path, tag_name: str, object_id: str, *, force: bool
    ) -> None:
        """Point the tag at object_id, refusing to overwrite unless forced."""
        if self._update_raises is not None:
            raise self._update_raises
        repo_tags = self._tags.setdefault(repo_root, {})
        if not force and tag_name in repo_tags:
            raise RuntimeError(
                f"Failed to update tag ref '{tag_name}': "
                f"cannot lock ref '{tag_ref(tag_name)}': reference already exists"
            )
        repo_tags[tag_name] = object_id
        self._ref_updates.append(TagRefUpdate(tag_name=tag_name, object_id=object_id, force=force))

    def delete_tag_ref(self, repo_root: Path, tag_name: str) -> None:
        if self._delete_raises is not None:
            raise self._delete_raises
        repo_tags = self._tags.get(repo_root, {})
        if tag_name not in repo_tags:
            raise RuntimeError(f"Failed to delete tag '{tag_name}': ref does not exist")
        del repo_tags[tag_name]
        self._deleted_tags.append(tag_name)

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def written_payloads(self) -> list[str]:
        """Payloads stored during the test. For test assertions only."""
        return list(self._written_payloads)

    @property
    def ref_updates(self) -> list[TagRefUpdate]:
        """Ref updates made during the test. For test assertions only."""
        return list(self._ref_updates)

    @property
    def deleted_tags(self) -> list[str]:
        """Tags deleted during the test. For test assertions only."""
        return list(self._deleted_tags)

    def _peel(self, object_id: str) -> str:
        payload = self._objects.get(object_id)
        if payload is None:
            return object_id
        return parse_tag_target(payload)
