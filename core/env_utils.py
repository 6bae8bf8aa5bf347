"""Helpers for loading optional .env files and validating required variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence

from dotenv import load_dotenv

from core.logging import get_logger

logger = get_logger(__name__)


def load_dotenv_if_available(path: Path | None = None) -> None:
    """Load environment variables from a .env file when the file exists."""

    env_path = path or Path(".env")
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
        logger.debug("Loaded environment variables from %s", env_path)


def require_env_vars(required: Sequence[str], *, context: str | None = None) -> None:
    """Raise an error when none of the listed variables carry a value."""

    if any(os.getenv(name) for name in required):
        return

    prefix = f"[{context}] " if context else ""
    message = (
        f"{prefix}Missing required environment variable: one of {', '.join(required)}. "
        "Populate your .env or configure runtime secrets."
    )
    raise RuntimeError(message)


__all__ = ["load_dotenv_if_available", "require_env_vars"]
