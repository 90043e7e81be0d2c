"""Fake Git implementation for testing."""

from __future__ import annotations

from pathlib import Path

from reltag.gateway.git.abc import Git
from reltag.gateway.git.commit_ops.fake import FakeGitCommitOps
from reltag.gateway.git.remote_ops.fake import FakeGitRemoteOps
from reltag.gateway.git.repo_ops.fake import FakeGitRepoOps
from reltag.gateway.git.tag_ops.fake import FakeGitTagOps
from reltag.refs import head_ref


class FakeGit(Git):
    """In-memory Git composed of fake sub-gateways.

    Sub-gateways are exposed with their fake types so tests can reach
    mutation tracking properties (e.g. fake_git.tag.ref_updates).
    """

    def __init__(
        self,
        *,
        repo: FakeGitRepoOps | None = None,
        remote: FakeGitRemoteOps | None = None,
        commit: FakeGitCommitOps | None = None,
        tag: FakeGitTagOps | None = None,
    ) -> None:
        self._repo = repo if repo is not None else FakeGitRepoOps()
        self._remote = remote if remote is not None else FakeGitRemoteOps()
        self._commit = commit if commit is not None else FakeGitCommitOps()
        self._tag = tag if tag is not None else FakeGitTagOps()

    @classmethod
    def for_repository(
        cls,
        root: Path,
        *,
        remote_urls: dict[str, list[str]] | None = None,
        head_commit: str | None = None,
        branch: str | None = None,
        tags: dict[str, str] | None = None,
    ) -> FakeGit:
        """Build a FakeGit holding a single repository rooted at root.

        Args:
            root: Working-tree root
            remote_urls: Mapping of remote name -> configured URLs
            head_commit: Full id of the HEAD commit; None for an empty repository
            branch: Branch HEAD is on; None for a detached HEAD
            tags: Mapping of tag name -> object id
        """
        return cls(
            repo=FakeGitRepoOps(repository_roots={root}),
            remote=FakeGitRemoteOps(
                remote_urls={
                    (root, name): urls for name, urls in (remote_urls or {}).items()
                }
            ),
            commit=FakeGitCommitOps(
                head_commits={root: head_commit} if head_commit is not None else {},
                head_refs={root: head_ref(branch)} if branch is not None else {},
            ),
            tag=FakeGitTagOps(tags={root: dict(tags or {})}),
        )

    @property
    def repo(self) -> FakeGitRepoOps:
        return self._repo

    @property
    def remote(self) -> FakeGitRemoteOps:
        return self._remote

    @property
    def commit(self) -> FakeGitCommitOps:
        return self._commit

    @property
    def tag(self) -> FakeGitTagOps:
        return self._tag
