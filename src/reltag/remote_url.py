"""Parse git remote URLs into hosting kind, owner and repository name.

Accepted shapes:
- scheme URLs: https://github.com/acme/widget.git, ssh://git@host:22/acme/widget
- scp-like: git@github.com:acme/widget.git
- local paths: /srv/git/acme/widget.git (always HostingKind.OTHER)
"""

import re
from urllib.parse import SplitResult, urlsplit, urlunsplit

from reltag.errors import MalformedRemote
from reltag.types import HostingKind, ParsedRemote

# Exact host match only; self-hosted instances classify as OTHER
_HOSTING_KINDS: dict[str, HostingKind] = {
    "github.com": HostingKind.GITHUB,
    "gitlab.com": HostingKind.GITLAB,
    "codeberg.org": HostingKind.CODEBERG,
}

_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_SCP_PATTERN = re.compile(r"^(?:(?P<user>[^@/]+)@)?(?P<host>[^:/]+):(?P<path>.*)$")

_GIT_SUFFIX = ".git"


def _host_from_netloc(netloc: str) -> str:
    host_port = netloc.rpartition("@")[2]
    if host_port.startswith("["):
        return host_port[1:].partition("]")[0]
    return host_port.partition(":")[0]


def _split_scheme_url(url: str) -> SplitResult:
    try:
        return urlsplit(url)
    except ValueError as e:
        raise MalformedRemote(url, f"Unparseable remote URL {url}") from e


def split_remote_url(url: str) -> tuple[str | None, str]:
    """Split a remote URL into (host, path).

    Host is None for local paths and file:// URLs. Raises MalformedRemote for a
    scheme URL urllib cannot split.
    """
    if _SCHEME_PATTERN.match(url):
        parts = _split_scheme_url(url)
        host = _host_from_netloc(parts.netloc)
        return (host if host else None), parts.path

    match = _SCP_PATTERN.match(url)
    # A single-letter "host" is a Windows drive letter, not scp syntax
    if match is not None and len(match.group("host")) > 1:
        return match.group("host"), match.group("path")

    return None, url


def classify_host(host: str | None) -> HostingKind:
    if host is None:
        return HostingKind.OTHER
    return _HOSTING_KINDS.get(host, HostingKind.OTHER)


def strip_git_suffix(name: str) -> str:
    """Remove every occurrence of '.git' from a repository name.

    The removal is not anchored to the end of the name: 'my.github.io.git'
    becomes 'myhub.io'.
    """
    while _GIT_SUFFIX in name:
        name = name.replace(_GIT_SUFFIX, "")
    return name


def parse_remote_url(url: str) -> ParsedRemote:
    """Parse a remote URL into hosting kind, owner and name.

    Owner is the second-to-last path segment and name the last one, with
    '.git' removed.

    Args:
        url: Remote URL as configured in git

    Returns:
        ParsedRemote for the URL

    Raises:
        MalformedRemote: If the URL cannot be split or its path has fewer than two
            segments

    Example:
        >>> parse_remote_url("https://github.com/acme/widget.git")
        ParsedRemote(kind=<HostingKind.GITHUB: 'github'>, owner='acme', name='widget')
    """
    host, path = split_remote_url(url)
    segments = [segment for segment in path.split("/") if segment]
    if len(segments) < 2:
        raise MalformedRemote(url, f"Unparseable remote URL {path}")

    return ParsedRemote(
        kind=classify_host(host),
        owner=segments[-2],
        name=strip_git_suffix(segments[-1]),
    )


def redact_password(url: str) -> str:
    """Drop the password from a scheme URL's user-info, keeping the user name.

    Non-scheme URLs are returned unchanged.

    Raises:
        MalformedRemote: If a scheme URL cannot be split, e.g. an unclosed IPv6 bracket
    """
    if not _SCHEME_PATTERN.match(url):
        return url
    parts = _split_scheme_url(url)
    if parts.password is None:
        return url
    user, _, _ = parts.netloc.rpartition("@")[0].partition(":")
    host_port = parts.netloc.rpartition("@")[2]
    return urlunsplit(parts._replace(netloc=f"{user}@{host_port}"))
