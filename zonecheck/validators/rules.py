"""
Validation rules for timezone identifiers.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from zonecheck.exceptions import UnexpectedTypeError, UnexpectedValueError
from zonecheck.models.enums import ViolationCode
from zonecheck.models.schema import TimezoneConstraint
from zonecheck.zonedata.registry import constant_name
from .resolver import MembershipResolver, default_resolver

logger = logging.getLogger(__name__)


@dataclass
class TimezoneViolation:
    """A single rejected timezone value."""
    message: str
    code: ViolationCode
    invalid_value: str
    parameters: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage/display."""
        return {
            "message": self.message,
            "code": self.code.value,
            "invalid_value": self.invalid_value,
            "parameters": dict(self.parameters),
        }


@dataclass
class TimezoneValidationResult:
    """Result of validating several values against one constraint."""
    violations: List[TimezoneViolation]

    @property
    def is_valid(self) -> bool:
        """Check if every value passed."""
        return len(self.violations) == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for storage/display."""
        return {
            "is_valid": self.is_valid,
            "violation_count": len(self.violations),
            "violations": [v.to_dict() for v in self.violations],
        }


def _is_stringable(value: Any) -> bool:
    if isinstance(value, (str, int, float)):
        return True
    # Objects only count if they define their own __str__
    return type(value).__str__ is not object.__str__


def format_value(value: str) -> str:
    """Quote a value for interpolation into a violation message."""
    return f'"{value}"'


class TimezoneValidator:
    """Validator for timezone identifier values."""

    def __init__(self, resolver: Optional[MembershipResolver] = None):
        self._resolver = resolver

    @property
    def resolver(self) -> MembershipResolver:
        """Resolver in use, the process-wide default unless one was given."""
        if self._resolver is None:
            self._resolver = default_resolver()
        return self._resolver

    def validate(self, value: Any, constraint: TimezoneConstraint) -> Optional[TimezoneViolation]:
        """
        Validate a single value.

        Args:
            value: Value to check; None and "" are accepted as "nothing to check"
            constraint: Timezone constraint options

        Returns:
            TimezoneViolation if the value was rejected, None otherwise

        Raises:
            UnexpectedTypeError: If constraint is not a TimezoneConstraint
            UnexpectedValueError: If value cannot be turned into a string
        """
        if not isinstance(constraint, TimezoneConstraint):
            raise UnexpectedTypeError(constraint, TimezoneConstraint.__name__)

        if value is None or value == "":
            return None

        if not _is_stringable(value):
            raise UnexpectedValueError(value, "string")

        value = str(value)
        verdict = self.resolver.resolve(
            value,
            constraint.zone,
            constraint.country_code,
            constraint.intl_compatible,
        )
        if verdict.is_valid:
            return None

        zone_name = constant_name(constraint.zone)
        parameters = {
            "{{ value }}": format_value(value),
            "{{ zone }}": zone_name if isinstance(zone_name, str) else str(int(zone_name)),
        }
        if constraint.country_code:
            parameters["{{ country_code }}"] = constraint.country_code

        message = constraint.message
        for placeholder, replacement in parameters.items():
            message = message.replace(placeholder, replacement)

        return TimezoneViolation(
            message=message,
            code=verdict.code,
            invalid_value=value,
            parameters=parameters,
        )

    def validate_many(
        self, values: Iterable[Any], constraint: TimezoneConstraint
    ) -> TimezoneValidationResult:
        """
        Validate several values against the same constraint.

        Args:
            values: Values to check
            constraint: Timezone constraint options

        Returns:
            TimezoneValidationResult with one violation per rejected value
        """
        violations: List[TimezoneViolation] = []
        for value in values:
            violation = self.validate(value, constraint)
            if violation is not None:
                violations.append(violation)

        if violations:
            logger.info(
                "%d timezone value(s) rejected: %s",
                len(violations),
                ", ".join(sorted({v.code.value for v in violations})),
            )
        return TimezoneValidationResult(violations=violations)
