"""
Timezone identifier membership resolution.

Decides whether a string names a known timezone, optionally restricted to a
set of regions or to one country, by checking it against both the platform
(pytz) and ICU (CLDR) databases. An identifier is accepted if either
database lists it.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Callable, FrozenSet, Optional, Tuple

from zonecheck.models.enums import RegionFlag, ViolationCode, ZoneSource
from zonecheck.zonedata import default_providers
from zonecheck.zonedata.catalog import CountryIndex, TimezoneCatalog
from zonecheck.zonedata.icu import UNKNOWN_ZONE
from zonecheck.zonedata.registry import MaskLike, has_regions, is_all
from .zone_filter import filter_zone, matches_zone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Verdict:
    """Outcome of a membership check."""
    code: Optional[ViolationCode] = None

    @property
    def is_valid(self) -> bool:
        """True when the identifier was accepted."""
        return self.code is None

    @classmethod
    def valid(cls) -> "Verdict":
        return cls()

    @classmethod
    def invalid(cls, code: ViolationCode) -> "Verdict":
        return cls(code=ViolationCode(code))


class MembershipResolver:
    """
    Classifies candidate timezone identifiers.

    Holds only read-only reference data, so one instance can be shared
    across threads.
    """

    def __init__(
        self,
        catalog: TimezoneCatalog,
        country_index: CountryIndex,
        canonicalize: Callable[[str], str],
    ):
        """
        Args:
            catalog: Identifier lists for both sources
            country_index: Per-country identifier lists for both sources
            canonicalize: ICU name resolution, returning "Etc/Unknown"
                for names ICU does not recognize
        """
        self.catalog = catalog
        self.country_index = country_index
        self._canonicalize = canonicalize

    def resolve(
        self,
        value: str,
        mask: MaskLike = RegionFlag.ALL,
        country_code: Optional[str] = None,
        intl_compatible: bool = False,
    ) -> Verdict:
        """
        Check a candidate timezone identifier.

        Args:
            value: Candidate identifier (already a string)
            mask: Regions the identifier must belong to
            country_code: ISO 3166-1 alpha-2 code the identifier must belong to
            intl_compatible: Also require ICU to recognize the identifier

        Returns:
            Verdict, valid or carrying exactly one ViolationCode

        Raises:
            TypeError: If value is not a string
        """
        if not isinstance(value, str):
            raise TypeError(f"Timezone value must be a string, {type(value).__name__} given")

        if intl_compatible and self._canonicalize(value) == UNKNOWN_ZONE:
            return self._reject(value, ViolationCode.INTL_INCOMPATIBLE)

        platform_ids, icu_ids = self._candidates(mask, country_code)
        if value in platform_ids or value in icu_ids:
            logger.debug("Timezone %r accepted", value)
            return Verdict.valid()

        if country_code:
            code = ViolationCode.NOT_IN_COUNTRY
        elif not is_all(mask):
            code = ViolationCode.NOT_IN_ZONE
        else:
            code = ViolationCode.NOT_RECOGNIZED
        return self._reject(value, code)

    def _candidates(
        self, mask: MaskLike, country_code: Optional[str]
    ) -> Tuple[FrozenSet[str], FrozenSet[str]]:
        if country_code:
            platform_ids = self.country_index.lookup(ZoneSource.PLATFORM, country_code)
            # Region bits narrow the platform country list; a bare PER_COUNTRY does not
            if has_regions(mask) and not is_all(mask):
                platform_ids = frozenset(
                    identifier for identifier in platform_ids if matches_zone(identifier, mask)
                )
            # The country already implies a geography for ICU data
            icu_ids = self.country_index.lookup(ZoneSource.ICU, country_code)
            return platform_ids, icu_ids

        return (
            filter_zone(self.catalog, ZoneSource.PLATFORM, mask),
            filter_zone(self.catalog, ZoneSource.ICU, mask),
        )

    @staticmethod
    def _reject(value: str, code: ViolationCode) -> Verdict:
        logger.debug("Timezone %r rejected: %s", value, code.value)
        return Verdict.invalid(code)


@functools.lru_cache(maxsize=1)
def default_resolver() -> MembershipResolver:
    """Get the process-wide resolver over the default pytz and Babel data."""
    platform, icu = default_providers()
    return MembershipResolver(
        TimezoneCatalog(platform, icu),
        CountryIndex(platform, icu),
        icu.canonical_id,
    )
