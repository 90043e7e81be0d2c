"""Production implementation of Git remote operations using subprocess."""

from pathlib import Path

from reltag.gateway.git.remote_ops.abc import GitRemoteOps
from reltag.subprocess_utils import run_subprocess_with_context

# `git config --get-all` exits 1 when the key has no values
_CONFIG_KEY_NOT_FOUND = 1


class RealGitRemoteOps(GitRemoteOps):
    """Real implementation of Git remote operations using subprocess."""

    def list_remote_names(self, repo_root: Path) -> list[str]:
        """List the names of all configured remotes."""
        result = run_subprocess_with_context(
            cmd=["git", "remote"],
            operation_context="list remotes",
            cwd=repo_root,
        )
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]

    def get_remote_urls(self, repo_root: Path, remote: str) -> list[str]:
        """Get every URL configured for a remote."""
        result = run_subprocess_with_context(
            cmd=["git", "config", "--get-all", f"remote.{remote}.url"],
            operation_context=f"read URLs of remote '{remote}'",
            cwd=repo_root,
            check=False,
        )
        if result.returncode == _CONFIG_KEY_NOT_FOUND:
            return []
        result.check_returncode()
        return [line.strip() for line in result.stdout.splitlines() if line.strip()]
