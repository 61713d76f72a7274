"""
Runtime settings, read from the environment (and a local ``.env`` file).

    SPELLED_NUMBERS_LOCALE      default locale code            (en)
    SPELLED_NUMBERS_FALLBACK    display string for failures    (locale's "Not a Number")
    SPELLED_NUMBERS_LOG_LEVEL   logging level for the CLI/API  (WARNING)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

_PREFIX = "SPELLED_NUMBERS_"


@dataclass(frozen=True)
class Settings:
    locale: str = "en"
    fallback: Optional[str] = None
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def load_settings(*, dotenv: bool = True) -> Settings:
    """Build ``Settings`` from ``SPELLED_NUMBERS_*`` environment variables."""
    if dotenv:
        load_dotenv()

    fallback = os.environ.get(f"{_PREFIX}FALLBACK") or None
    return Settings(
        locale=os.environ.get(f"{_PREFIX}LOCALE", "en").strip().lower() or "en",
        fallback=fallback,
        log_level=os.environ.get(f"{_PREFIX}LOG_LEVEL", "WARNING").strip() or "WARNING",
    )
