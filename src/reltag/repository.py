"""Repository introspection and tagging for release automation.

RepositoryHandle answers three questions about a local checkout: where its
origin remote lives, what HEAD points at, and which tags exist. It also
creates (optionally signed, optionally forced) annotated tags and deletes
them.

The handle keeps no state besides its construction arguments. Every
operation locates the repository again and talks to git through the
gateway, so calls are self-contained and can be retried.
"""

import logging
import re
import subprocess
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from reltag.config import DEFAULT_TAG_MESSAGE, TagConfig
from reltag.constants import ORIGIN_REMOTE, SHORT_ID_LENGTH
from reltag.context import ReltagContext
from reltag.errors import (
    HeadUnresolvable,
    MalformedRemote,
    MissingRemote,
    NotARepository,
    ReltagError,
    RemoteQueryFailed,
    SigningError,
    TagAlreadyExists,
    TagCreationFailed,
    TagDeletionFailed,
    TagQueryFailed,
)
from reltag.gateway.git.abc import Git
from reltag.refs import extract_head_name, extract_tag_name, tag_ref
from reltag.remote_url import parse_remote_url, redact_password
from reltag.signing.types import SigningContext
from reltag.tag_object import append_signature, build_tag_payload
from reltag.types import CommitInfo, RemoteDescriptor, TagRef

logger = logging.getLogger(__name__)

# What a gateway raises when a git command fails, cannot be started, or
# its text cannot be encoded
_GATEWAY_FAILURES = (RuntimeError, subprocess.SubprocessError, OSError, UnicodeError)


@contextmanager
def _classify_failures(to_error: Callable[[str], ReltagError]) -> Iterator[None]:
    """Convert gateway failures raised in the block into a taxonomy error.

    Taxonomy errors raised inside the block pass through unchanged. The
    original exception is chained as the cause.

    Example:
        >>> with _classify_failures(lambda reason: TagQueryFailed(None, reason)):
        ...     entries = git.tag.list_tag_refs(root)
    """
    try:
        yield
    except _GATEWAY_FAILURES as e:
        raise to_error(str(e)) from e


@dataclass(frozen=True)
class OpenedRepository:
    """A located working tree.

    Attributes:
        root: Directory holding the .git metadata
    """

    root: Path


class RepositoryHandle:
    """Operations on the git repository at (or above) a base directory."""

    def __init__(
        self,
        basedir: Path,
        *,
        search_upward: bool,
        git: Git,
        signing: SigningContext | None = None,
        tag_config: TagConfig | None = None,
    ) -> None:
        """Create a handle. No repository access happens here.

        Args:
            basedir: Directory repository lookup starts from
            search_upward: Also look in the parents of basedir
            git: Gateway used for every git operation
            signing: Signing settings used by tag(); unsigned when None
            tag_config: Tag message template; the tag name when None
        """
        self._basedir = basedir
        self._search_upward = search_upward
        self._git = git
        self._signing = signing if signing is not None else SigningContext.disabled()
        self._tag_config = (
            tag_config if tag_config is not None else TagConfig(message=DEFAULT_TAG_MESSAGE)
        )

    @classmethod
    def from_context(cls, ctx: ReltagContext) -> "RepositoryHandle":
        """Build a handle from the release configuration held by ctx."""
        return cls(
            ctx.basedir,
            search_upward=ctx.root_search,
            git=ctx.git,
            signing=SigningContext.from_config(ctx.config.signing, ctx.signer),
            tag_config=ctx.config.tag,
        )

    @property
    def basedir(self) -> Path:
        return self._basedir

    @property
    def search_upward(self) -> bool:
        return self._search_upward

    @property
    def signing(self) -> SigningContext:
        return self._signing

    # ============================================================================
    # Query Operations
    # ============================================================================

    def open(self) -> OpenedRepository:
        """Locate the repository.

        Without upward search only basedir itself is checked. With it,
        basedir and then each parent directory up to the filesystem root.

        Raises:
            NotARepository: If no directory checked holds git metadata
        """
        start = self._basedir.resolve()
        candidates = [start, *start.parents] if self._search_upward else [start]
        for candidate in candidates:
            if self._git.repo.has_git_metadata(candidate):
                return OpenedRepository(root=candidate)
        raise NotARepository(start, searched_upward=self._search_upward)

    def resolve_origin(self) -> RemoteDescriptor:
        """Describe the repository's origin remote.

        The first configured URL is used when origin has several.

        Raises:
            MissingRemote: If there is no origin remote
            MalformedRemote: If origin has no URL or the URL has no owner/name
            RemoteQueryFailed: If reading the remote configuration fails
        """
        root = self.open().root
        with _classify_failures(lambda reason: RemoteQueryFailed(ORIGIN_REMOTE)):
            if ORIGIN_REMOTE not in self._git.remote.list_remote_names(root):
                raise MissingRemote(ORIGIN_REMOTE)
            urls = self._git.remote.get_remote_urls(root, ORIGIN_REMOTE)

        if not urls:
            raise MalformedRemote(None, f"Remote '{ORIGIN_REMOTE}' has no URL configured")

        url = urls[0]
        parsed = parse_remote_url(url)
        return RemoteDescriptor(
            kind=parsed.kind,
            owner=parsed.owner,
            name=parsed.name,
            url=redact_password(url),
        )

    def current_head(self) -> CommitInfo:
        """Describe the commit HEAD points at.

        Raises:
            HeadUnresolvable: If the repository has no commits or HEAD is not a commit
        """
        root = self.open().root
        with _classify_failures(lambda reason: HeadUnresolvable(root, reason)):
            full_id = self._git.commit.resolve_head_commit(root)
            if full_id is None:
                raise HeadUnresolvable(root, "HEAD does not point to a commit")
            symbolic_ref = self._git.commit.get_head_symbolic_ref(root)

        return CommitInfo(
            short_id=full_id[:SHORT_ID_LENGTH],
            full_id=full_id,
            branch=extract_head_name(symbolic_ref) if symbolic_ref is not None else "",
        )

    def list_tags(self) -> list[TagRef]:
        """List every tag, sorted by name.

        Raises:
            TagQueryFailed: If the tags cannot be read
        """
        root = self.open().root
        with _classify_failures(lambda reason: TagQueryFailed(None, reason)):
            entries = self._git.tag.list_tag_refs(root)

        return sorted(
            TagRef(
                name=extract_tag_name(entry.ref),
                ref=entry.ref,
                object_id=entry.object_id,
                commit_id=entry.commit_id,
            )
            for entry in entries
        )

    def tag_exists(self, pattern: str) -> bool:
        """Check whether any tag name fully matches a regular expression.

        Example:
            >>> handle.tag_exists(r"v1\\.0\\.0")
            True
            >>> handle.tag_exists(r"v1")  # partial matches don't count
            False

        Raises:
            TagQueryFailed: If the pattern is invalid or the tags cannot be read
        """
        try:
            compiled = re.compile(pattern)
        except re.error as e:
            raise TagQueryFailed(pattern, f"invalid pattern: {e}") from e

        root = self.open().root
        with _classify_failures(lambda reason: TagQueryFailed(pattern, reason)):
            entries = self._git.tag.list_tag_refs(root)

        return any(compiled.fullmatch(extract_tag_name(entry.ref)) for entry in entries)

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def create_tag(
        self,
        name: str,
        *,
        force: bool = False,
        signing: SigningContext | None = None,
        message: str | None = None,
    ) -> TagRef:
        """Create an annotated tag at HEAD.

        The tag object is written first and the ref is pointed at it in one
        update. Without force the update only succeeds if the ref does not
        exist, so a tag created concurrently is never overwritten.

        Args:
            name: Tag name without 'refs/tags/'
            force: Replace an existing tag of the same name
            signing: Signing settings; None creates an unsigned tag
            message: Tag message; None or empty uses the configured template

        Returns:
            The tag as it now exists

        Raises:
            TagAlreadyExists: If the tag exists and force is False
            TagCreationFailed: For an invalid name, unresolvable HEAD, a
                signer failure or a failing git command
        """
        root = self.open().root
        resolved_signing = signing if signing is not None else SigningContext.disabled()

        with _classify_failures(lambda reason: TagCreationFailed(name, reason)):
            if not self._git.tag.is_valid_tag_name(root, name):
                raise TagCreationFailed(name, f"'{name}' is not a valid tag name")
            if not force and self._git.tag.tag_ref_exists(root, name):
                raise TagAlreadyExists(name)

            commit_id = self._git.commit.resolve_head_commit(root)
            if commit_id is None:
                raise TagCreationFailed(name, "HEAD does not point to a commit")

            payload = build_tag_payload(
                object_id=commit_id,
                tag_name=name,
                tagger_ident=self._git.commit.get_tagger_ident(root),
                message=message if message else self._tag_config.format_message(name),
            )
            if resolved_signing.enabled:
                payload = self._sign_payload(name, payload, resolved_signing)

            object_id = self._git.tag.write_tag_object(root, payload)

        try:
            self._git.tag.update_tag_ref(root, name, object_id, force=force)
        except _GATEWAY_FAILURES as e:
            # Classify by looking at the ref, not at git's message
            with _classify_failures(lambda reason: TagCreationFailed(name, reason)):
                exists_now = self._git.tag.tag_ref_exists(root, name)
            if not force and exists_now:
                raise TagAlreadyExists(name) from e
            raise TagCreationFailed(name, str(e)) from e

        logger.debug("Tagged %s as %s (force=%s)", commit_id, name, force)
        return TagRef(name=name, ref=tag_ref(name), object_id=object_id, commit_id=commit_id)

    def tag(self, name: str) -> TagRef:
        """Create a tag without force, signed according to the handle's settings."""
        return self.create_tag(name, force=False, signing=self._signing)

    def delete_tag(self, name: str) -> None:
        """Delete a tag.

        Raises:
            TagDeletionFailed: If the tag does not exist or cannot be deleted
        """
        root = self.open().root
        with _classify_failures(lambda reason: TagDeletionFailed(name, reason)):
            if not self._git.tag.tag_ref_exists(root, name):
                raise TagDeletionFailed(name, "tag does not exist")
            self._git.tag.delete_tag_ref(root, name)

        logger.debug("Deleted tag %s", name)

    def _sign_payload(self, name: str, payload: str, signing: SigningContext) -> str:
        if signing.signer is None:
            raise TagCreationFailed(name, "signing is enabled but no signer is configured")
        try:
            signature = signing.signer.sign(payload.encode("utf-8"), key_id=signing.key_id)
            armoured = signature.decode("ascii")
        except SigningError as e:
            raise TagCreationFailed(name, str(e)) from e
        except UnicodeDecodeError as e:
            raise TagCreationFailed(name, "signature is not ASCII-armoured") from e
        return append_signature(payload, armoured)


def open_repository(
    basedir: Path,
    *,
    search_upward: bool,
    git: Git | None = None,
) -> RepositoryHandle:
    """Create a handle and check that a repository can be located.

    Args:
        basedir: Directory repository lookup starts from
        search_upward: Also look in the parents of basedir
        git: Gateway to use; defaults to RealGit

    Raises:
        NotARepository: If no repository is found
    """
    if git is None:
        from reltag.gateway.git.real import RealGit

        git = RealGit()

    handle = RepositoryHandle(basedir, search_upward=search_upward, git=git)
    handle.open()
    return handle
