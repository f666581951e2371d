"""
Pydantic models for timezone constraint configuration.
"""

import re
from typing import Any, Annotated, Optional

from pydantic import BaseModel, Field, PlainValidator, field_validator, model_validator

from zonecheck.zonedata.registry import parse_mask
from .enums import RegionFlag

COUNTRY_CODE_PATTERN = re.compile(r"^[A-Z]{2}$")

RegionMask = Annotated[RegionFlag, PlainValidator(parse_mask)]


class TimezoneConstraint(BaseModel):
    """Options for validating a timezone identifier."""
    zone: RegionMask = Field(
        RegionFlag.ALL,
        description="Regions the identifier must belong to (flags or names like 'EUROPE|ASIA')",
    )
    country_code: Optional[str] = Field(
        None, description="ISO 3166-1 alpha-2 country the identifier must belong to"
    )
    intl_compatible: bool = Field(
        False, description="Also require the ICU database to recognize the identifier"
    )
    message: str = Field(
        "This value is not a valid timezone.",
        description="Violation message, '{{ value }}' is replaced by the rejected value",
    )

    @field_validator('country_code')
    @classmethod
    def validate_country_code(cls, v: Optional[str]) -> Optional[str]:
        """Normalize and check the country code shape."""
        if v is None:
            return v
        code = v.strip().upper()
        if not code:
            return None
        if not COUNTRY_CODE_PATTERN.match(code):
            raise ValueError(f"Invalid ISO 3166-1 alpha-2 country code: {v}")
        return code

    @model_validator(mode='after')
    def validate_zone(self) -> 'TimezoneConstraint':
        """Check the zone option fits the country option."""
        if self.country_code is None:
            if not self.zone or int(self.zone) & ~int(RegionFlag.ALL):
                raise ValueError('The option "zone" must be a valid range of region flags')
        elif not self.zone & RegionFlag.PER_COUNTRY:
            raise ValueError(
                'The option "country_code" can only be used when the "zone" option '
                'includes PER_COUNTRY'
            )
        return self

    @staticmethod
    def default_option() -> str:
        """Option set when the constraint is built from a single bare value."""
        return "zone"

    @classmethod
    def from_option(cls, value: Any) -> 'TimezoneConstraint':
        """Create from a bare value for the default option."""
        return cls.model_validate({cls.default_option(): value})

    class Config:
        frozen = True
        json_schema_extra = {
            "example": {
                "zone": "PER_COUNTRY|EUROPE",
                "country_code": "FR",
                "intl_compatible": False,
                "message": "This value is not a valid timezone.",
            }
        }
