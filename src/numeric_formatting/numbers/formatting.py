"""Strict rounding-and-grouping entry point for generic numbers."""

from __future__ import annotations

from numeric_formatting.models.specs import (
    DEFAULT_DECIMAL_POINT,
    DEFAULT_GROUP_SEPARATOR,
    DEFAULT_PRECISION,
    GroupingSpec,
    RoundingSpec,
)
from numeric_formatting.numbers.decimal_value import parse_decimal
from numeric_formatting.numbers.grouping import group_digits
from numeric_formatting.numbers.rounding import round_value


def round_and_format(
    number_text: str,
    group_separator: str | None = None,
    decimal_point: str | None = None,
    precision: int | None = None,
    significant_digits: int | None = None,
    strip_trailing_zeros: bool = False,
) -> str:
    """Parse, round, optionally strip zeros, then group *number_text*.

    Defaults are ``,`` for grouping, ``.`` for the decimal point and a
    precision of 3. Raises ``NotANumberError`` when *number_text* is not a
    plain decimal; unlike the currency path nothing is passed through.

    Examples:
        round_and_format("-12345678.1236")            -> "-12,345,678.124"
        round_and_format("1000", ".", ",")            -> "1.000,000"
        round_and_format("0.1", strip_trailing_zeros=True) -> "0.1"
    """
    value = parse_decimal(number_text)
    rounding = RoundingSpec(
        precision=DEFAULT_PRECISION if precision is None else precision,
        significant_digits=significant_digits,
        strip_trailing_zeros=strip_trailing_zeros,
    )
    grouping = GroupingSpec(
        group_separator=group_separator or DEFAULT_GROUP_SEPARATOR,
        decimal_point=decimal_point or DEFAULT_DECIMAL_POINT,
    )
    return group_digits(round_value(value, rounding), grouping.group_separator, grouping.decimal_point)
