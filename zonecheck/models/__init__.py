"""
Models package initialization.
"""

from .enums import RegionFlag, ZoneSource, ViolationCode
from .schema import TimezoneConstraint

__all__ = [
    "RegionFlag",
    "ZoneSource",
    "ViolationCode",
    "TimezoneConstraint",
]
