"""
Exceptions raised for misuse of the timezone validators.

Rejected identifiers are never reported through exceptions; they come back as
``Verdict`` / ``TimezoneViolation`` values.
"""

from typing import Any


class ZoneCheckError(Exception):
    """Base class for zonecheck errors."""


class UnexpectedTypeError(ZoneCheckError, TypeError):
    """A validator was handed an argument of the wrong type."""

    def __init__(self, value: Any, expected: str):
        self.value = value
        self.expected = expected
        super().__init__(
            f'Expected argument of type "{expected}", "{type(value).__name__}" given'
        )


class UnexpectedValueError(UnexpectedTypeError):
    """The value under validation cannot be turned into a string."""
