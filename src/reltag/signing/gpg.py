"""Tag signer backed by the gpg executable."""

import logging
import subprocess

from reltag.errors import SigningError
from reltag.signing.abc import TagSigner

logger = logging.getLogger(__name__)


class GpgTagSigner(TagSigner):
    """Signs tag payloads with `gpg --detach-sign --armor`, the way git does.

    The key is selected with --local-user when a key id is given; otherwise
    gpg's default key is used.
    """

    def __init__(self, program: str = "gpg") -> None:
        self._program = program

    def sign(self, payload: bytes, *, key_id: str | None) -> bytes:
        cmd = [self._program, "--batch", "--status-fd=2", "--detach-sign", "--armor"]
        if key_id:
            cmd.extend(["--local-user", key_id])

        logger.debug("Signing tag payload with %s (key %s)", self._program, key_id or "default")
        try:
            result = subprocess.run(
                cmd,
                input=payload,
                capture_output=True,
                check=False,
            )
        except FileNotFoundError as e:
            raise SigningError(f"Signing program '{self._program}' not found") from e

        # gpg reports success on the status fd; exit code alone is not enough
        stderr = result.stderr.decode("utf-8", errors="replace")
        if result.returncode != 0 or "[GNUPG:] SIG_CREATED " not in stderr:
            raise SigningError(f"gpg failed to sign the data: {stderr.strip()}")

        return result.stdout
