"""Runtime configuration for textmix.

Values are read from the environment once, at import time:
- TEXTMIX_CACHE_MAX_ENTRIES: how many matrices the process-wide cache keeps
  (defaults to 0, meaning no limit)
"""

import os
from typing import Final


def _int_env(name: str, default: int) -> int:
    """Read a non-negative integer from the environment."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be >= 0, got {value}")
    return value


CACHE_MAX_ENTRIES: Final[int] = _int_env("TEXTMIX_CACHE_MAX_ENTRIES", 0)
