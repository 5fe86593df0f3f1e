"""
HMAC-SHA256 Authentication

This module computes and verifies HMAC-SHA256 tags with a shared secret
key. HMAC gives integrity and authenticity, not confidentiality: the
payload is never encrypted.

Use a strong random key (at least 32 bytes, see `cryptokit.rand`) and do
not reuse an HMAC key for encryption.
"""

import hmac
import hashlib
import binascii
import logging
from typing import NamedTuple, Optional, Union

from ..errors import CryptokitError, EmptyKeyError, InvalidInputError, InvalidTagError

logger = logging.getLogger(__name__)

# Size of an HMAC-SHA256 tag in bytes
TAG_SIZE = hashlib.sha256().digest_size

BytesLike = Union[bytes, bytearray, memoryview, str]


class VerifyResult(NamedTuple):
    """Outcome of `check_tag`: `ok` is False whenever `error` is set."""
    ok: bool
    error: Optional[CryptokitError] = None


def _as_bytes(value: BytesLike, name: str) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidInputError(f"{name} must be bytes-like or str, not {type(value).__name__}")


def compute_tag(key: BytesLike, payload: BytesLike) -> bytes:
    """
    Compute the HMAC-SHA256 tag of a payload.

    Args:
        key: The secret key (must not be empty)
        payload: The data to authenticate (may be empty)

    Returns:
        The 32-byte authentication tag

    Raises:
        EmptyKeyError: If the key has zero length
        InvalidInputError: If key or payload is not bytes-like or str
    """
    key = _as_bytes(key, 'key')
    payload = _as_bytes(payload, 'payload')
    if not key:
        raise EmptyKeyError()

    return hmac.new(key, payload, hashlib.sha256).digest()


def verify_tag(key: BytesLike, payload: BytesLike, expected_tag: bytes) -> bool:
    """
    Verify an HMAC-SHA256 tag for the provided payload.

    A wrong tag, wrong key or tag of the wrong length is reported as False,
    not as an error.

    Args:
        key: The secret key (must not be empty)
        payload: The data to verify
        expected_tag: The tag received alongside the payload

    Returns:
        True if the tag matches, False otherwise

    Raises:
        EmptyKeyError: If the key has zero length
    """
    tag = compute_tag(key, payload)

    # Constant-time comparison to prevent timing attacks
    return hmac.compare_digest(tag, _as_bytes(expected_tag, 'expected_tag'))


def check_tag(key: BytesLike, payload: BytesLike, expected_tag: bytes) -> VerifyResult:
    """
    Verify a tag, reporting failures as a value instead of raising.

    An empty key yields `VerifyResult(False, EmptyKeyError(...))`, so callers
    may test either the flag or the error. Arguments of the wrong type are
    reported the same way, with an `InvalidInputError`.
    """
    try:
        return VerifyResult(verify_tag(key, payload, expected_tag))
    except CryptokitError as e:
        logger.debug("HMAC verification not attempted: %s", e)
        return VerifyResult(False, e)


def compute_tag_hex(key: BytesLike, payload: BytesLike) -> str:
    """Compute the HMAC-SHA256 tag as a lowercase hex string."""
    return compute_tag(key, payload).hex()


def verify_tag_hex(key: BytesLike, payload: BytesLike, expected_hex: str) -> bool:
    """
    Verify a hex-encoded HMAC-SHA256 tag.

    Raises:
        InvalidTagError: If expected_hex is not valid hexadecimal
        EmptyKeyError: If the key has zero length
    """
    if not isinstance(expected_hex, str):
        raise InvalidInputError(f"expected_hex must be str, not {type(expected_hex).__name__}")
    try:
        expected_tag = bytes.fromhex(expected_hex.strip())
    except (ValueError, binascii.Error) as e:
        raise InvalidTagError(f"invalid hex tag: {e}") from e

    return verify_tag(key, payload, expected_tag)


if __name__ == "__main__":
    import os

    key = os.urandom(32)
    data = b"This is some data to authenticate"

    tag = compute_tag(key, data)
    print(f"Auth tag: {tag.hex()}")
    assert verify_tag(key, data, tag)

    modified_data = bytearray(data)
    modified_data[0] ^= 0x01
    assert not verify_tag(key, bytes(modified_data), tag)

    result = check_tag(b"", data, tag)
    print(f"Empty key check: {result}")
    assert not result.ok and isinstance(result.error, EmptyKeyError)

    print("HMAC tests completed successfully!")
