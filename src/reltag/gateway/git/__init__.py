"""Git gateway.

Import from submodules:
- abc: Git
- real: RealGit
- fake: FakeGit
"""
