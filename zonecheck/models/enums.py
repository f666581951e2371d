"""
Enumerations for timezone membership checks.
"""

from enum import Enum, IntFlag


class RegionFlag(IntFlag):
    """Geographic grouping of timezone identifiers, combinable with ``|``."""
    AFRICA = 1
    AMERICA = 2
    ANTARCTICA = 4
    ARCTIC = 8
    ASIA = 16
    ATLANTIC = 32
    AUSTRALIA = 64
    EUROPE = 128
    INDIAN = 256
    PACIFIC = 512
    UTC = 1024
    ALL = 2047
    PER_COUNTRY = 4096


class ZoneSource(str, Enum):
    """Timezone database an identifier list comes from."""
    PLATFORM = "PLATFORM"
    ICU = "ICU"


class ViolationCode(str, Enum):
    """Reason a timezone identifier was rejected."""
    INTL_INCOMPATIBLE = "INTL_INCOMPATIBLE"
    NOT_IN_COUNTRY = "NOT_IN_COUNTRY"
    NOT_IN_ZONE = "NOT_IN_ZONE"
    NOT_RECOGNIZED = "NOT_RECOGNIZED"
