"""Helpers for converting between full ref names and short names."""

from reltag.constants import REFS_HEADS, REFS_TAGS


def extract_tag_name(ref: str) -> str:
    """Strip 'refs/tags/' from a ref name.

    Returns "" when the ref is not a tag ref.

    Example:
        >>> extract_tag_name("refs/tags/v1.0.0")
        'v1.0.0'
        >>> extract_tag_name("refs/heads/main")
        ''
    """
    if ref.startswith(REFS_TAGS):
        return ref[len(REFS_TAGS) :]
    return ""


def extract_head_name(ref: str) -> str:
    """Strip 'refs/heads/' from a ref name.

    Returns "" when the ref is not a branch ref, which covers a detached HEAD
    (whose target is 'HEAD' itself).
    """
    if ref.startswith(REFS_HEADS):
        return ref[len(REFS_HEADS) :]
    return ""


def tag_ref(tag_name: str) -> str:
    return f"{REFS_TAGS}{tag_name}"


def head_ref(branch_name: str) -> str:
    return f"{REFS_HEADS}{branch_name}"
