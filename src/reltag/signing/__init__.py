"""Tag signing providers.

Import from submodules:
- abc: TagSigner
- types: SigningContext
- gpg: GpgTagSigner
- fake: FakeTagSigner
"""
