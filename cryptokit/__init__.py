"""
cryptokit - Small, Reviewable Cryptographic Helpers

This library wraps platform primitives behind a deliberately small,
validated API. It implements no cryptographic algorithms itself.

Key Features:
- HMAC-SHA256 tag computation and constant-time verification
- Cryptographically secure random bytes, hex and base64 tokens
- Pluggable entropy sources for deterministic testing
- Typed errors for every failure path
- Command-line tools: cryptokit-hmac and cryptokit-rand

"""

__version__ = '0.1.0'
__author__ = 'cryptokit Team'
