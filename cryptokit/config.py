"""
Configuration

Defaults and environment variable names shared by the library and the
command-line tools.
"""

import os
import logging

# Hard allocation guard for random output; not configurable.
MAX_TOKEN_BYTES = 1 << 20  # 1 MiB

ENV_HMAC_KEY = 'CRYPTOKIT_HMAC_KEY'
ENV_TOKEN_BYTES = 'CRYPTOKIT_TOKEN_BYTES'
ENV_LOG_LEVEL = 'CRYPTOKIT_LOG_LEVEL'

DEFAULTS = {
    'token_bytes': 16,           # 128-bit tokens
    'log_level': 'WARNING',
}


def default_token_bytes() -> int:
    """
    Number of random bytes the rand CLI emits when -n is not given.

    Raises:
        ValueError: If CRYPTOKIT_TOKEN_BYTES is set but not an integer
    """
    raw = os.environ.get(ENV_TOKEN_BYTES)
    if raw is None or not raw.strip():
        return DEFAULTS['token_bytes']
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_TOKEN_BYTES} must be an integer, got {raw!r}")


def log_level(verbose: bool = False) -> int:
    """Resolve the logging level from the environment (DEBUG when verbose)."""
    if verbose:
        return logging.DEBUG
    name = os.environ.get(ENV_LOG_LEVEL, DEFAULTS['log_level']).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULTS['log_level'])
    return level
