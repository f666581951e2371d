"""
Platform timezone database backed by pytz (the IANA tz database).
"""

import logging
from typing import List, Tuple

import pytz

from zonecheck.models.enums import ZoneSource
from .base import ZoneDataProvider

logger = logging.getLogger(__name__)


class PytzProvider(ZoneDataProvider):
    """
    Identifiers from the IANA database bundled with pytz.

    By default only ``pytz.common_timezones`` is used, which leaves out
    deprecated links such as "US/Eastern" or "EST". Pass ``include_links=True``
    to list ``pytz.all_timezones`` instead.
    """

    def __init__(self, include_links: bool = False):
        names = pytz.all_timezones if include_links else pytz.common_timezones
        self._identifiers: Tuple[str, ...] = tuple(names)
        logger.info(
            "Loaded %d platform timezones from pytz %s",
            len(self._identifiers),
            pytz.__version__,
        )

    @property
    def source(self) -> ZoneSource:
        return ZoneSource.PLATFORM

    def all_identifiers(self) -> Tuple[str, ...]:
        return self._identifiers

    def lookup_by_country(self, country_code: str) -> List[str]:
        # pytz.country_timezones raises KeyError on a miss
        return list(pytz.country_timezones(country_code.strip().upper()))
