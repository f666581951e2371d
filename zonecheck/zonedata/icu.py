"""
ICU timezone database backed by the CLDR data bundled with Babel.
"""

import logging
import re
from typing import Dict, FrozenSet, Set, Tuple

import babel
from babel.core import get_global

from zonecheck.models.enums import ZoneSource
from .base import ZoneDataProvider

logger = logging.getLogger(__name__)

# ICU's canonical ID for "could not resolve this timezone"
UNKNOWN_ZONE = "Etc/Unknown"

# ICU custom zone syntax: GMT+h, GMT+hh, GMT+hhmm, GMT+hh:mm
CUSTOM_ZONE_PATTERN = re.compile(r"^GMT([+-])(\d{1,2})(?::?(\d{2}))?$")

# CLDR territory codes that are not countries
_NON_COUNTRY_TERRITORIES = {"001", "ZZ"}


class CldrProvider(ZoneDataProvider):
    """
    Identifiers from the CLDR timezone data that ICU is built on.

    Identifiers are the CLDR canonical names, which can differ from IANA
    (e.g. CLDR keeps "Asia/Calcutta" where IANA moved to "Asia/Kolkata"),
    so this list legitimately diverges from the platform one.
    """

    def __init__(self, include_aliases: bool = False):
        meta_zones: Dict[str, str] = get_global("meta_zones")
        zone_territories: Dict[str, str] = get_global("zone_territories")
        territory_zones: Dict[str, list] = get_global("territory_zones")
        self._aliases: Dict[str, str] = dict(get_global("zone_aliases"))

        canonical: Set[str] = set(meta_zones) | set(zone_territories)
        canonical.discard(UNKNOWN_ZONE)
        self._canonical: FrozenSet[str] = frozenset(canonical)

        identifiers = set(canonical)
        if include_aliases:
            identifiers.update(self._aliases)
            identifiers.discard(UNKNOWN_ZONE)
        self._identifiers: Tuple[str, ...] = tuple(sorted(identifiers))

        by_country: Dict[str, Set[str]] = {}
        for zone, territory in zone_territories.items():
            if zone == UNKNOWN_ZONE or territory in _NON_COUNTRY_TERRITORIES:
                continue
            by_country.setdefault(territory.upper(), set()).add(zone)
        for territory, zones in territory_zones.items():
            if territory in _NON_COUNTRY_TERRITORIES:
                continue
            by_country.setdefault(territory.upper(), set()).update(
                zone for zone in zones if zone != UNKNOWN_ZONE
            )
        self._by_country: Dict[str, FrozenSet[str]] = {
            code: frozenset(zones) for code, zones in by_country.items()
        }

        logger.info(
            "Loaded %d ICU timezones for %d countries from Babel %s",
            len(self._identifiers),
            len(self._by_country),
            babel.__version__,
        )

    @property
    def source(self) -> ZoneSource:
        return ZoneSource.ICU

    def all_identifiers(self) -> Tuple[str, ...]:
        return self._identifiers

    def lookup_by_country(self, country_code: str) -> FrozenSet[str]:
        code = country_code.strip().upper()
        if code not in self._by_country:
            raise LookupError(f"No ICU timezone data for country: {country_code}")
        return self._by_country[code]

    def canonical_id(self, value: str) -> str:
        """
        Resolve a timezone name the way ICU's TimeZone.createTimeZone does.

        Args:
            value: Candidate timezone identifier

        Returns:
            Canonical CLDR identifier, a normalized "GMT+hh:mm" custom ID,
            or "Etc/Unknown" if ICU would not recognize the name
        """
        if value in self._canonical:
            return value

        alias_target = self._aliases.get(value)
        if alias_target:
            return alias_target

        match = CUSTOM_ZONE_PATTERN.match(value)
        if match:
            sign, hours, minutes = match.group(1), int(match.group(2)), int(match.group(3) or 0)
            if hours <= 23 and minutes <= 59:
                return f"GMT{sign}{hours:02d}:{minutes:02d}"

        return UNKNOWN_ZONE
