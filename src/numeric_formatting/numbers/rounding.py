"""Fixed-precision and significant-digit rounding, plus trailing-zero stripping."""

from __future__ import annotations

from numeric_formatting.models.specs import RoundingSpec
from numeric_formatting.numbers.decimal_value import ExactDecimal


def round_fixed(value: ExactDecimal, precision: int) -> str:
    """Round to *precision* fractional digits, ties away from zero (``10.9999`` → ``11.00``)."""
    return value.to_fixed(precision)


def round_significant(value: ExactDecimal, precision: int) -> str:
    """Round to *precision* significant figures.

    The number of fractional digits rendered is ``|precision - digits|``
    where ``digits`` is the count of integer digits of the value, so
    ``302.24398923423`` at five figures gives ``302.24`` and ``0.0012345`` at
    three gives ``0.00123``. Zero counts as a single digit.
    """
    if value.is_zero:
        digits = 1
        rounded = ExactDecimal.from_int(0)
    else:
        digits = value.integer_digits()
        rounded = value.quantize(digits - precision)
    return rounded.to_fixed(abs(precision - digits))


def round_value(value: ExactDecimal, spec: RoundingSpec) -> str:
    """Round *value* per *spec* and return canonical text (``.`` decimal point)."""
    if spec.uses_significant_digits:
        formatted = round_significant(value, spec.precision)
    else:
        formatted = round_fixed(value, spec.precision)
    if spec.strip_trailing_zeros:
        formatted = strip_insignificant_zeros(formatted)
    return formatted


def strip_insignificant_zeros(number: str) -> str:
    """Drop trailing fractional zeros, and the ``.`` if nothing is left after it.

    Must run on canonical text, before a custom decimal point is substituted.
    """
    if "." not in number:
        return number
    whole, fraction = number.rsplit(".", 1)
    fraction = fraction.rstrip("0")
    if not fraction:
        return whole
    return f"{whole}.{fraction}"
