"""Production Git tag operations using subprocess."""

from pathlib import Path

from reltag.gateway.git.tag_ops.abc import GitTagOps
from reltag.gateway.git.tag_ops.types import TagRefEntry
from reltag.refs import tag_ref
from reltag.subprocess_utils import run_subprocess_with_context

# Ref names cannot contain control characters, so a tab is a safe separator
_FOR_EACH_REF_FORMAT = "%(refname)\t%(objectname)\t%(*objectname)"


class RealGitTagOps(GitTagOps):
    """Production implementation of Git tag operations using subprocess."""

    # ============================================================================
    # Query Operations
    # ============================================================================

    def list_tag_refs(self, repo_root: Path) -> list[TagRefEntry]:
        """List every ref under refs/tags/."""
        result = run_subprocess_with_context(
            cmd=["git", "for-each-ref", f"--format={_FOR_EACH_REF_FORMAT}", "refs/tags"],
            operation_context="list tags",
            cwd=repo_root,
        )

        entries = []
        for line in result.stdout.splitlines():
            if not line:
                continue
            ref, object_id, peeled_id = line.split("\t")
            entries.append(
                TagRefEntry(
                    ref=ref,
                    object_id=object_id,
                    commit_id=peeled_id if peeled_id else object_id,
                )
            )
        return entries

    def tag_ref_exists(self, repo_root: Path, tag_name: str) -> bool:
        """Check whether refs/tags/<tag_name> exists."""
        result = run_subprocess_with_context(
            cmd=["git", "show-ref", "--verify", "--quiet", tag_ref(tag_name)],
            operation_context=f"check if tag '{tag_name}' exists",
            cwd=repo_root,
            check=False,
        )
        return result.returncode == 0

    def is_valid_tag_name(self, repo_root: Path, tag_name: str) -> bool:
        """Check whether refs/tags/<tag_name> is a well-formed ref name."""
        result = run_subprocess_with_context(
            cmd=["git", "check-ref-format", tag_ref(tag_name)],
            operation_context=f"validate tag name '{tag_name}'",
            cwd=repo_root,
            check=False,
        )
        return result.returncode == 0

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    def write_tag_object(self, repo_root: Path, payload: str) -> str:
        """Store an annotated tag object with `git mktag`."""
        result = run_subprocess_with_context(
            cmd=["git", "mktag"],
            operation_context="write tag object",
            cwd=repo_root,
            input=payload,
        )
        return result.stdout.strip()

    def update_tag_ref(
        self, repo_root: Path, tag_name: str, object_id: str, *, force: bool
    ) -> None:
        """Point refs/tags/<tag_name> at an object.

        Without force, an empty old value makes git refuse to overwrite an
        existing ref, atomically.
        """
        cmd = ["git", "update-ref", tag_ref(tag_name), object_id]
        if not force:
            cmd.append("")
        run_subprocess_with_context(
            cmd=cmd,
            operation_context=f"update tag ref '{tag_name}'",
            cwd=repo_root,
        )

    def delete_tag_ref(self, repo_root: Path, tag_name: str) -> None:
        """Delete refs/tags/<tag_name>."""
        run_subprocess_with_context(
            cmd=["git", "update-ref", "-d", tag_ref(tag_name)],
            operation_context=f"delete tag '{tag_name}'",
            cwd=repo_root,
        )
