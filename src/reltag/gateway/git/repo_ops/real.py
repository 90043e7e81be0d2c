"""Real implementation of git repository location operations."""

from pathlib import Path

from reltag.gateway.git.repo_ops.abc import GitRepoOps


class RealGitRepoOps(GitRepoOps):
    """Filesystem-based implementation of repository location.

    Reads the directory directly instead of running `git rev-parse`, which
    would search parent directories on its own.
    """

    # ============================================================================
    # Query Operations
    # ============================================================================

    def has_git_metadata(self, path: Path) -> bool:
        """Check whether a directory is the root of a git working tree."""
        git_path = path / ".git"

        if git_path.is_dir():
            return (git_path / "HEAD").is_file()

        if git_path.is_file():
            # Linked worktree: .git contains "gitdir: /path/to/.git/worktrees/name"
            content = git_path.read_text(encoding="utf-8").strip()
            if content.startswith("gitdir: "):
                git_dir = Path(content[len("gitdir: ") :])
                if not git_dir.is_absolute():
                    git_dir = path / git_dir
                return git_dir.exists()

        return False
