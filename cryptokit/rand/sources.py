"""
Entropy Sources

An entropy source is anything that can hand out unpredictable bytes on
demand. The random helpers take one as an explicit argument so tests can
inject deterministic fakes; `None` selects the platform CSPRNG.
"""

import secrets
import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from Cryptodome.Random import get_random_bytes


class EntropySource(ABC):
    """
    Abstract base class for entropy sources.

    `read` may return fewer bytes than requested; an empty result means the
    source is exhausted. Failures should be raised as OSError, ValueError
    or EOFError.
    """

    def __init__(self):
        self.name = self.__class__.__name__
        self.logger = logging.getLogger(f"cryptokit.rand.source.{self.name}")

    @abstractmethod
    def read(self, n: int) -> bytes:
        """Return up to n random bytes."""
        pass


class SystemEntropySource(EntropySource):
    """The operating system CSPRNG, through the `secrets` module."""

    def read(self, n: int) -> bytes:
        return secrets.token_bytes(n)


class CryptodomeEntropySource(EntropySource):
    """The pycryptodomex random generator."""

    def read(self, n: int) -> bytes:
        return get_random_bytes(n)


class StreamEntropySource(EntropySource):
    """
    Wraps a binary file-like object such as `io.BytesIO` or an open
    `/dev/urandom` handle. The stream is not closed by this wrapper.
    """

    def __init__(self, stream: Any):
        super().__init__()
        self.stream = stream

    def read(self, n: int) -> bytes:
        chunk: Optional[bytes] = self.stream.read(n)
        # Non-blocking streams return None when no data is ready
        if chunk is None:
            self.logger.debug("Stream returned no data")
            return b''
        if not isinstance(chunk, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"entropy stream must be opened in binary mode, read() returned {type(chunk).__name__}"
            )
        return bytes(chunk)


def as_entropy_source(source: Any = None) -> EntropySource:
    """
    Coerce a caller-supplied source into an `EntropySource`.

    Args:
        source: None, an EntropySource, or an object with a `read(n)` method

    Returns:
        The entropy source to read from

    Raises:
        TypeError: If the object cannot supply bytes
    """
    if source is None:
        return SystemEntropySource()
    if isinstance(source, EntropySource):
        return source
    if callable(getattr(source, 'read', None)):
        return StreamEntropySource(source)
    raise TypeError(f"entropy source must provide read(n), got {type(source).__name__}")
