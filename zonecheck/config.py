"""
Configuration loaded from environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


PLATFORM_TIMEZONE_SETS = ("common", "all")


def _env_bool(name: str, default: str) -> bool:
    raw = os.getenv(name, default).strip().lower()
    if raw in ("true", "1", "yes"):
        return True
    if raw in ("false", "0", "no"):
        return False
    raise ValueError(f"{name} must be true or false, got {raw!r}")


@dataclass(frozen=True)
class ZoneCheckConfig:
    """Reference data configuration."""

    # "common" skips deprecated IANA links such as US/Eastern; "all" keeps them
    platform_timezones: str = "common"
    # List ICU alias names (e.g. Asia/Kolkata next to Asia/Calcutta) as identifiers
    icu_include_aliases: bool = False

    def __post_init__(self):
        if self.platform_timezones not in PLATFORM_TIMEZONE_SETS:
            raise ValueError(
                "ZONECHECK_PLATFORM_TIMEZONES must be one of "
                f"{', '.join(PLATFORM_TIMEZONE_SETS)}, got {self.platform_timezones!r}"
            )

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> ZoneCheckConfig:
        """
        Load configuration from environment variables.

        Args:
            dotenv_path: Optional .env file read before the environment
                (existing variables win)
        """
        load_dotenv(dotenv_path)
        return cls(
            platform_timezones=os.getenv("ZONECHECK_PLATFORM_TIMEZONES", "common").strip().lower(),
            icu_include_aliases=_env_bool("ZONECHECK_ICU_INCLUDE_ALIASES", "false"),
        )
