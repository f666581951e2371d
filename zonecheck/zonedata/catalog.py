"""
Read-only access to the platform and ICU timezone databases.
"""

import logging
from typing import Dict, FrozenSet, Iterable, Tuple

from zonecheck.models.enums import ZoneSource
from .base import ZoneDataProvider

logger = logging.getLogger(__name__)


def _by_source(providers: Iterable[ZoneDataProvider]) -> Dict[ZoneSource, ZoneDataProvider]:
    mapping: Dict[ZoneSource, ZoneDataProvider] = {}
    for provider in providers:
        if provider.source in mapping:
            raise ValueError(f"Duplicate provider for source: {provider.source.value}")
        mapping[provider.source] = provider

    missing = [source.value for source in ZoneSource if source not in mapping]
    if missing:
        raise ValueError(f"Missing provider for source(s): {', '.join(missing)}")
    return mapping


class TimezoneCatalog:
    """Full identifier lists, one per source, with no reconciliation between them."""

    def __init__(self, platform: ZoneDataProvider, icu: ZoneDataProvider):
        self._providers = _by_source([platform, icu])

    def provider(self, source: ZoneSource) -> ZoneDataProvider:
        """Get the provider behind a source."""
        return self._providers[ZoneSource(source)]

    def all_identifiers(self, source: ZoneSource) -> Tuple[str, ...]:
        """
        Get every identifier of a source, unfiltered.

        Args:
            source: PLATFORM or ICU

        Returns:
            Tuple of identifiers
        """
        return self.provider(source).all_identifiers()


class CountryIndex:
    """
    Country code -> identifiers, per source.

    A country the source has no data for is not an error: the lookup
    yields an empty set.
    """

    def __init__(self, platform: ZoneDataProvider, icu: ZoneDataProvider):
        self._providers = _by_source([platform, icu])

    def lookup(self, source: ZoneSource, country_code: str) -> FrozenSet[str]:
        """
        Get identifiers used in a country.

        Args:
            source: PLATFORM or ICU
            country_code: ISO 3166-1 alpha-2 code

        Returns:
            Identifiers for the country, empty if the code is unknown
        """
        provider = self._providers[ZoneSource(source)]
        code = country_code.strip().upper()
        try:
            return frozenset(provider.lookup_by_country(code))
        except LookupError:
            logger.debug(
                "No %s timezones for country %r", provider.source.value, country_code
            )
            return frozenset()
