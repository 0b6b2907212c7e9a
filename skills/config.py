"""Environment settings shared by the skills (see .env.example)."""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path
from typing import Optional

DEFAULT_LOG_DIR = Path.home() / ".ngnMCP" / "logs"


class NgnConfigError(Exception):
    """Raised when an environment variable has an unusable value."""


def log_dir() -> Path:
    raw = os.getenv("NGN_LOG_DIR", "").strip()
    return Path(raw).expanduser() if raw else DEFAULT_LOG_DIR


def log_level() -> int:
    raw = os.getenv("NGN_LOG_LEVEL", "").strip().upper() or "INFO"
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise NgnConfigError(f"NGN_LOG_LEVEL must be DEBUG, INFO, WARNING, ERROR or CRITICAL, got {raw!r}")
    return level


def make_rng() -> Optional[random.Random]:
    raw = os.getenv("NGN_RANDOM_SEED", "").strip()
    if not raw:
        return None
    try:
        return random.Random(int(raw))
    except ValueError as exc:
        raise NgnConfigError(f"NGN_RANDOM_SEED must be an integer, got {raw!r}") from exc
