"""Git remote configuration sub-gateway.

Read-only access to remote names and their configured URLs.

Import from submodules:
- abc: GitRemoteOps
- real: RealGitRemoteOps
- fake: FakeGitRemoteOps
"""
