"""Signing settings passed to tag creation."""

from __future__ import annotations

from dataclasses import dataclass

from reltag.config import SigningConfig
from reltag.signing.abc import TagSigner


@dataclass(frozen=True)
class SigningContext:
    """Whether and how to sign new tags.

    Attributes:
        enabled: Sign tags when True; signer and key_id are ignored otherwise
        key_id: Key identifier handed to the signer
        signer: Signature provider, required when enabled
    """

    enabled: bool
    key_id: str | None
    signer: TagSigner | None

    @classmethod
    def disabled(cls) -> SigningContext:
        return cls(enabled=False, key_id=None, signer=None)

    @classmethod
    def from_config(cls, config: SigningConfig, signer: TagSigner) -> SigningContext:
        """Build the signing settings of a release from its `[signing]` table."""
        return cls(enabled=config.enabled, key_id=config.key, signer=signer)
