"""
HMAC Authentication Package

This package implements HMAC-SHA256 helpers for ensuring data integrity
and authenticity with a shared secret key.
"""

from .auth import (
    TAG_SIZE,
    VerifyResult,
    compute_tag,
    verify_tag,
    check_tag,
    compute_tag_hex,
    verify_tag_hex,
)

__all__ = [
    'TAG_SIZE',
    'VerifyResult',
    'compute_tag',
    'verify_tag',
    'check_tag',
    'compute_tag_hex',
    'verify_tag_hex',
]
