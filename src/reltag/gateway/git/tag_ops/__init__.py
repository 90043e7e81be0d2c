"""Git tag operations sub-gateway.

This module provides a separate gateway for tag operations,
including listing tag refs, writing annotated tag objects, and
updating or deleting tag refs.

Import from submodules:
- abc: GitTagOps
- types: TagRefEntry
- real: RealGitTagOps
- fake: FakeGitTagOps
- dry_run: DryRunGitTagOps
"""
