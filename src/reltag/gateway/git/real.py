"""Production Git implementation using subprocess."""

from reltag.gateway.git.abc import Git
from reltag.gateway.git.commit_ops.abc import GitCommitOps
from reltag.gateway.git.commit_ops.real import RealGitCommitOps
from reltag.gateway.git.remote_ops.abc import GitRemoteOps
from reltag.gateway.git.remote_ops.real import RealGitRemoteOps
from reltag.gateway.git.repo_ops.abc import GitRepoOps
from reltag.gateway.git.repo_ops.real import RealGitRepoOps
from reltag.gateway.git.tag_ops.abc import GitTagOps
from reltag.gateway.git.tag_ops.dry_run import DryRunGitTagOps
from reltag.gateway.git.tag_ops.real import RealGitTagOps


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess. With
    dry_run=True, tag mutations are printed instead of executed.
    """

    def __init__(self, *, dry_run: bool = False) -> None:
        self._repo = RealGitRepoOps()
        self._remote = RealGitRemoteOps()
        self._commit = RealGitCommitOps()
        real_tag_ops = RealGitTagOps()
        self._tag: GitTagOps = DryRunGitTagOps(real_tag_ops) if dry_run else real_tag_ops

    @property
    def repo(self) -> GitRepoOps:
        return self._repo

    @property
    def remote(self) -> GitRemoteOps:
        return self._remote

    @property
    def commit(self) -> GitCommitOps:
        return self._commit

    @property
    def tag(self) -> GitTagOps:
        return self._tag
