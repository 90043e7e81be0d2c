"""Production implementation of Git commit queries using subprocess."""

from pathlib import Path

from reltag.gateway.git.commit_ops.abc import GitCommitOps
from reltag.subprocess_utils import run_subprocess_with_context

# `git symbolic-ref -q` exits 1 when HEAD is not a symbolic ref
_NOT_A_SYMBOLIC_REF = 1


class RealGitCommitOps(GitCommitOps):
    """Real implementation of Git commit queries using subprocess."""

    def resolve_head_commit(self, repo_root: Path) -> str | None:
        """Resolve HEAD to the full id of the commit it points at."""
        result = run_subprocess_with_context(
            cmd=["git", "rev-parse", "--verify", "--quiet", "HEAD^{commit}"],
            operation_context="resolve HEAD",
            cwd=repo_root,
            check=False,
        )
        if result.returncode != 0:
            return None
        commit_id = result.stdout.strip()
        return commit_id if commit_id else None

    def get_head_symbolic_ref(self, repo_root: Path) -> str | None:
        """Get the ref HEAD points at symbolically."""
        result = run_subprocess_with_context(
            cmd=["git", "symbolic-ref", "-q", "HEAD"],
            operation_context="read HEAD symbolic ref",
            cwd=repo_root,
            check=False,
        )
        if result.returncode == _NOT_A_SYMBOLIC_REF:
            return None
        result.check_returncode()
        return result.stdout.strip()

    def get_tagger_ident(self, repo_root: Path) -> str:
        """Get the identity line used for the tagger of new tags."""
        result = run_subprocess_with_context(
            cmd=["git", "var", "GIT_COMMITTER_IDENT"],
            operation_context="read committer identity",
            cwd=repo_root,
        )
        return result.stdout.strip()
