"""
Base class for timezone reference data sources.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Tuple

from zonecheck.models.enums import ZoneSource


class ZoneDataProvider(ABC):
    """
    Abstract source of timezone identifiers.

    Each provider is responsible for:
    1. Listing every identifier its database knows about
    2. Listing the identifiers used in a given country

    Data is loaded once when the provider is built and never changes after.
    """

    @property
    @abstractmethod
    def source(self) -> ZoneSource:
        """Which database this provider reads."""
        pass

    @abstractmethod
    def all_identifiers(self) -> Tuple[str, ...]:
        """
        Return every identifier known to this source, unfiltered.

        Returns:
            Tuple of identifiers such as "Europe/Paris"
        """
        pass

    @abstractmethod
    def lookup_by_country(self, country_code: str) -> Iterable[str]:
        """
        Return identifiers used in a country.

        Args:
            country_code: ISO 3166-1 alpha-2 code

        Returns:
            Identifiers for that country

        Raises:
            LookupError: If the source has no data for the code
        """
        pass
