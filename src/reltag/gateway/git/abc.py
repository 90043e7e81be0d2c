"""High-level git gateway interface.

Architecture:
- Git: Abstract base class composing the sub-gateways
- RealGit: Production implementation using subprocess
- FakeGit: In-memory implementation for tests
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from reltag.gateway.git.commit_ops.abc import GitCommitOps
    from reltag.gateway.git.remote_ops.abc import GitRemoteOps
    from reltag.gateway.git.repo_ops.abc import GitRepoOps
    from reltag.gateway.git.tag_ops.abc import GitTagOps


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def repo(self) -> GitRepoOps:
        """Access repository location subgateway."""
        ...

    @property
    @abstractmethod
    def remote(self) -> GitRemoteOps:
        """Access remote configuration subgateway."""
        ...

    @property
    @abstractmethod
    def commit(self) -> GitCommitOps:
        """Access HEAD and commit query subgateway."""
        ...

    @property
    @abstractmethod
    def tag(self) -> GitTagOps:
        """Access tag operations subgateway."""
        ...
