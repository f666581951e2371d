"""
Timezone reference data: region table, providers and read-only indexes.
"""

import functools
from typing import Tuple

from zonecheck.config import ZoneCheckConfig
from .base import ZoneDataProvider
from .catalog import CountryIndex, TimezoneCatalog
from .icu import UNKNOWN_ZONE, CldrProvider
from .platform import PytzProvider


@functools.lru_cache(maxsize=1)
def default_providers() -> Tuple[PytzProvider, CldrProvider]:
    """
    Build the process-wide provider pair once, from environment configuration.
    """
    config = ZoneCheckConfig.from_env()
    return (
        PytzProvider(include_links=config.platform_timezones == "all"),
        CldrProvider(include_aliases=config.icu_include_aliases),
    )


def get_catalog() -> TimezoneCatalog:
    """Get the catalog over the default providers."""
    return TimezoneCatalog(*default_providers())


def get_country_index() -> CountryIndex:
    """Get the country index over the default providers."""
    return CountryIndex(*default_providers())


__all__ = [
    "ZoneDataProvider",
    "PytzProvider",
    "CldrProvider",
    "UNKNOWN_ZONE",
    "TimezoneCatalog",
    "CountryIndex",
    "default_providers",
    "get_catalog",
    "get_country_index",
]
