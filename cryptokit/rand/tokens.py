"""
Secure Random Tokens

This module generates cryptographically secure random bytes and their
text encodings for use as API keys, session IDs, salts and nonces.

Typical sizes:
- tokens and session IDs: random_hex(32) gives 64 hex characters
- password hashing salts: random_bytes(16)
- AES-GCM nonces: random_bytes(12)

Never use the `random` module for secrets; it is predictable.
"""

import base64
import logging
from typing import Any

from ..config import MAX_TOKEN_BYTES
from ..errors import EntropyReadError, InvalidLengthError, LengthTooLargeError
from .sources import as_entropy_source

logger = logging.getLogger(__name__)


def _check_length(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, not {type(n).__name__}")
    if n <= 0:
        logger.debug("Rejected random length %d", n)
        raise InvalidLengthError(n)
    if n > MAX_TOKEN_BYTES:
        logger.debug("Rejected random length %d (limit %d)", n, MAX_TOKEN_BYTES)
        raise LengthTooLargeError(n, MAX_TOKEN_BYTES)


def random_bytes(n: int, source: Any = None) -> bytes:
    """
    Read exactly n cryptographically secure random bytes.

    Short reads from the source are retried until the buffer is full.

    Args:
        n: Number of bytes, 1 to MAX_TOKEN_BYTES
        source: Entropy source or binary stream (default: system CSPRNG)

    Returns:
        n random bytes

    Raises:
        InvalidLengthError: If n <= 0
        LengthTooLargeError: If n > MAX_TOKEN_BYTES
        EntropyReadError: If the source fails or runs dry
    """
    _check_length(n)
    src = as_entropy_source(source)

    buf = bytearray()
    while len(buf) < n:
        try:
            chunk = src.read(n - len(buf))
        except (OSError, ValueError, EOFError) as e:
            logger.debug("Entropy source %s failed after %d bytes: %s", type(src).__name__, len(buf), e)
            raise EntropyReadError(n, len(buf), str(e)) from e

        if not chunk:
            logger.debug("Entropy source %s exhausted after %d bytes", type(src).__name__, len(buf))
            raise EntropyReadError(n, len(buf))

        if len(buf) + len(chunk) < n:
            logger.debug("Short read from %s: %d bytes", type(src).__name__, len(chunk))
        buf += chunk[:n - len(buf)]

    return bytes(buf)


def random_hex(n: int, source: Any = None) -> str:
    """Return n random bytes as a lowercase hex string of length 2n."""
    return random_bytes(n, source).hex()


def random_base64(n: int, source: Any = None) -> str:
    """Return n random bytes as a padded standard base64 string."""
    return base64.b64encode(random_bytes(n, source)).decode('ascii')
