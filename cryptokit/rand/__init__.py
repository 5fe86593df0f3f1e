"""
Secure Randomness Package

This package wraps the platform CSPRNG to produce random bytes and
hex/base64 tokens from a pluggable entropy source.
"""

from ..config import MAX_TOKEN_BYTES
from .sources import (
    EntropySource,
    SystemEntropySource,
    CryptodomeEntropySource,
    StreamEntropySource,
    as_entropy_source,
)
from .tokens import random_bytes, random_hex, random_base64

__all__ = [
    'MAX_TOKEN_BYTES',
    'EntropySource',
    'SystemEntropySource',
    'CryptodomeEntropySource',
    'StreamEntropySource',
    'as_entropy_source',
    'random_bytes',
    'random_hex',
    'random_base64',
]
