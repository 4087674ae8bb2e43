"""Per-call rounding and grouping options.

These are built fresh for every formatting call and never shared, so they are
frozen to keep a caller from mutating one mid-call.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PRECISION = 3
DEFAULT_CURRENCY_PRECISION = 2
DEFAULT_GROUP_SEPARATOR = ","
DEFAULT_DECIMAL_POINT = "."


class RoundingSpec(BaseModel):
    """How a value is rounded before it is grouped.

    ``significant_digits`` acts as a switch: when it is set and ``precision``
    is positive, ``precision`` counts significant figures instead of
    fractional digits.
    """

    model_config = ConfigDict(frozen=True)

    precision: int = Field(default=DEFAULT_PRECISION, ge=0)
    significant_digits: int | None = Field(default=None, ge=0)
    strip_trailing_zeros: bool = False

    @property
    def uses_significant_digits(self) -> bool:
        return self.significant_digits is not None and self.precision > 0


class GroupingSpec(BaseModel):
    """Thousands separator and decimal point characters."""

    model_config = ConfigDict(frozen=True)

    group_separator: str = Field(default=DEFAULT_GROUP_SEPARATOR, min_length=1, max_length=1)
    decimal_point: str = Field(default=DEFAULT_DECIMAL_POINT, min_length=1, max_length=1)
