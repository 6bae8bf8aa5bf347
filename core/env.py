"""Environment variable helpers."""

from __future__ import annotations

import os
from typing import List, Optional, Sequence

from core.logging import get_logger

logger = get_logger(__name__)


def env_str(key: str, default: Optional[str] = None, *, fallbacks: Sequence[str] = ()) -> Optional[str]:
    """Return the first non-blank value among ``key`` and its ``fallbacks``."""
    for name in (key, *fallbacks):
        value = (os.getenv(name) or "").strip()
        if value:
            return value
    logger.debug("Environment variable %s not set. Using default.", key)
    return default


def env_int(key: str, default: int, *, minimum: Optional[int] = None) -> int:
    raw = (os.getenv(key) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("%s=%r is not an integer; using %d.", key, raw, default)
        return default
    if minimum is not None and value < minimum:
        logger.warning("%s=%d is below the minimum %d; using %d.", key, value, minimum, default)
        return default
    return value


def env_list(key: str, default: List[str]) -> List[str]:
    """Split a comma separated variable, dropping blank entries."""
    raw = os.getenv(key)
    if raw is None:
        return list(default)
    return [item.strip() for item in raw.split(",") if item.strip()]
