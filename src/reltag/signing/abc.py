"""Abstract interface for producing tag signatures."""

from abc import ABC, abstractmethod


class TagSigner(ABC):
    """Produces detached signatures for annotated tag payloads."""

    @abstractmethod
    def sign(self, payload: bytes, *, key_id: str | None) -> bytes:
        """Sign a tag payload.

        Args:
            payload: The unsigned tag object content
            key_id: Signing key identifier; None uses the signer's default key

        Returns:
            ASCII-armoured detached signature

        Raises:
            SigningError: If no signature could be produced
        """
        ...
