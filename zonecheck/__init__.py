"""
Timezone identifier validation against the pytz and ICU (CLDR) databases.
"""

from .exceptions import ZoneCheckError, UnexpectedTypeError, UnexpectedValueError
from .models import RegionFlag, ZoneSource, ViolationCode, TimezoneConstraint
from .validators import (
    MembershipResolver,
    Verdict,
    default_resolver,
    TimezoneValidator,
    TimezoneViolation,
    TimezoneValidationResult,
)

__version__ = "0.1.0"

__all__ = [
    "ZoneCheckError",
    "UnexpectedTypeError",
    "UnexpectedValueError",
    "RegionFlag",
    "ZoneSource",
    "ViolationCode",
    "TimezoneConstraint",
    "MembershipResolver",
    "Verdict",
    "default_resolver",
    "TimezoneValidator",
    "TimezoneViolation",
    "TimezoneValidationResult",
]
