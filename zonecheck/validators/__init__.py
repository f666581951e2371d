"""
Validators package initialization.
"""

from .resolver import MembershipResolver, Verdict, default_resolver
from .rules import TimezoneValidator, TimezoneViolation, TimezoneValidationResult
from .zone_filter import filter_zone, matches_zone

__all__ = [
    "MembershipResolver",
    "Verdict",
    "default_resolver",
    "TimezoneValidator",
    "TimezoneViolation",
    "TimezoneValidationResult",
    "filter_zone",
    "matches_zone",
]
