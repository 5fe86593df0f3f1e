"""
Error Types

This module defines the exceptions raised by the MAC and randomness
helpers. Catch `CryptokitError` to handle every failure the library
reports, or one of the subclasses for finer control. Each subclass also
derives from the builtin exception that best describes it, so existing
`except ValueError` / `except OSError` handlers keep working.
"""

from typing import Optional


class CryptokitError(Exception):
    """Base class for all cryptokit errors."""
    pass


class EmptyKeyError(CryptokitError, ValueError):
    """Raised when an HMAC operation is given a zero-length key."""

    def __init__(self, message: str = "empty key"):
        super().__init__(message)


class InvalidInputError(CryptokitError, TypeError):
    """Raised when a key, payload or tag is not bytes-like or str."""
    pass


class InvalidTagError(CryptokitError, ValueError):
    """Raised when a hex-encoded tag cannot be decoded."""
    pass


class InvalidLengthError(CryptokitError, ValueError):
    """Raised when a random output length is not a positive integer."""

    def __init__(self, n: int):
        self.n = n
        super().__init__("n must be > 0")


class LengthTooLargeError(CryptokitError, ValueError):
    """
    Raised when a random output length exceeds the allocation limit.

    Attributes:
        n: The requested number of bytes
        limit: The maximum number of bytes allowed
    """

    def __init__(self, n: int, limit: int):
        self.n = n
        self.limit = limit
        super().__init__(f"n too large: {n}")


class EntropyReadError(CryptokitError, OSError):
    """
    Raised when an entropy source cannot supply the requested bytes.

    The underlying exception, if any, is available as `__cause__`.

    Attributes:
        requested: Number of bytes requested
        received: Number of bytes obtained before the failure
    """

    def __init__(self, requested: int, received: int, reason: Optional[str] = None):
        self.requested = requested
        self.received = received
        detail = reason or "unexpected EOF"
        super().__init__(f"read random: {detail} ({received} of {requested} bytes)")
