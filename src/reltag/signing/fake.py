"""Fake tag signer for testing."""

from __future__ import annotations

from dataclasses import dataclass

from reltag.signing.abc import TagSigner

FAKE_SIGNATURE = (
    "-----BEGIN PGP SIGNATURE-----\n"
    "\n"
    "ZmFrZS1zaWduYXR1cmU=\n"
    "-----END PGP SIGNATURE-----\n"
)


@dataclass(frozen=True)
class SignCall:
    """Record of a sign() call."""

    payload: bytes
    key_id: str | None


class FakeTagSigner(TagSigner):
    """Returns a fixed signature and records what it was asked to sign.

    Constructor Injection:
    ---------------------
    - signature: Returned from every sign() call; text is ASCII-encoded first
    - sign_raises: Exception raised instead of signing
    """

    def __init__(
        self,
        *,
        signature: str | bytes = FAKE_SIGNATURE,
        sign_raises: Exception | None = None,
    ) -> None:
        self._signature = signature
        self._sign_raises = sign_raises
        self._sign_calls: list[SignCall] = []

    def sign(self, payload: bytes, *, key_id: str | None) -> bytes:
        self._sign_calls.append(SignCall(payload=payload, key_id=key_id))
        if self._sign_raises is not None:
            raise self._sign_raises
        if isinstance(self._signature, bytes):
            return self._signature
        return self._signature.encode("ascii")

    @property
    def sign_calls(self) -> list[SignCall]:
        """Calls made during the test. For test assertions only."""
        return list(self._sign_calls)
