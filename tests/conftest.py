"""
Shared fixtures: small in-memory timezone databases that disagree on purpose.
"""

from typing import Dict, List, Tuple

import pytest

from zonecheck.models.enums import ZoneSource
from zonecheck.validators.resolver import MembershipResolver
from zonecheck.zonedata.base import ZoneDataProvider
from zonecheck.zonedata.catalog import CountryIndex, TimezoneCatalog
from zonecheck.zonedata.icu import UNKNOWN_ZONE


class StaticProvider(ZoneDataProvider):
    """Provider serving fixed lists."""

    def __init__(self, source: ZoneSource, identifiers: List[str], countries: Dict[str, List[str]]):
        self._source = source
        self._identifiers = tuple(identifiers)
        self._countries = countries

    @property
    def source(self) -> ZoneSource:
        return self._source

    def all_identifiers(self) -> Tuple[str, ...]:
        return self._identifiers

    def lookup_by_country(self, country_code: str) -> List[str]:
        return self._countries[country_code.upper()]


PLATFORM_ZONES = [
    "Africa/Abidjan",
    "America/Chicago",
    "America/New_York",
    "Asia/Kolkata",
    "Europe/London",
    "Europe/Paris",
    "Pacific/Auckland",
    "UTC",
]

PLATFORM_COUNTRIES = {
    "FR": ["Europe/Paris"],
    "GB": ["Europe/London"],
    "IN": ["Asia/Kolkata"],
    "NZ": ["Pacific/Auckland"],
    "US": ["America/New_York", "America/Chicago"],
}

# CLDR-style names: Asia/Calcutta instead of Asia/Kolkata, no Chicago, Etc/UTC
ICU_ZONES = [
    "Africa/Abidjan",
    "America/New_York",
    "Asia/Calcutta",
    "Etc/UTC",
    "Europe/London",
    "Europe/Paris",
]

ICU_COUNTRIES = {
    "FR": ["Europe/Paris"],
    "GB": ["Europe/London"],
    "IN": ["Asia/Calcutta"],
    "US": ["America/New_York"],
}

ICU_ALIASES = {
    "Asia/Kolkata": "Asia/Calcutta",
    "UTC": "Etc/UTC",
}


def icu_canonical_id(value: str) -> str:
    if value in ICU_ZONES:
        return value
    return ICU_ALIASES.get(value, UNKNOWN_ZONE)


@pytest.fixture
def platform_provider():
    """Platform-side test database."""
    return StaticProvider(ZoneSource.PLATFORM, PLATFORM_ZONES, PLATFORM_COUNTRIES)


@pytest.fixture
def icu_provider():
    """ICU-side test database."""
    return StaticProvider(ZoneSource.ICU, ICU_ZONES, ICU_COUNTRIES)


@pytest.fixture
def catalog(platform_provider, icu_provider):
    """Catalog over the test databases."""
    return TimezoneCatalog(platform_provider, icu_provider)


@pytest.fixture
def country_index(platform_provider, icu_provider):
    """Country index over the test databases."""
    return CountryIndex(platform_provider, icu_provider)


@pytest.fixture
def resolver(catalog, country_index):
    """Resolver over the test databases."""
    return MembershipResolver(catalog, country_index, icu_canonical_id)
