"""Exact decimal values backed by an integer mantissa and a base-10 scale.

Every scaling and rounding step is integer arithmetic on the mantissa, so a
value such as ``2.79336291208791`` never passes through a binary float.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering

from numeric_formatting.errors import NotANumberError

_NUMERIC_TEXT = re.compile(r"(-?)([0-9]+)(?:\.([0-9]+))?")


def round_half_away_from_zero(numerator: int, divisor: int) -> int:
    """Divide *numerator* by a positive *divisor*, rounding ties away from zero."""
    quotient, remainder = divmod(abs(numerator), divisor)
    if 2 * remainder >= divisor:
        quotient += 1
    return -quotient if numerator < 0 else quotient


@total_ordering
@dataclass(frozen=True, eq=False)
class ExactDecimal:
    """Signed decimal equal to ``mantissa * 10 ** -scale``.

    ``scale`` is never negative. Two values compare equal when they denote the
    same number, whatever their scale (``1.50 == 1.5``).
    """

    mantissa: int
    scale: int = 0

    def __post_init__(self):
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")

    @classmethod
    def from_int(cls, value: int) -> ExactDecimal:
        return cls(mantissa=value, scale=0)

    @property
    def is_zero(self) -> bool:
        return self.mantissa == 0

    @property
    def is_negative(self) -> bool:
        return self.mantissa < 0

    def integer_digits(self) -> int:
        """Return ``floor(log10(|value|)) + 1`` for a nonzero value.

        Counts the digits left of the decimal point; for values below one the
        result is zero or negative (``0.05`` gives ``-1``).
        """
        if self.is_zero:
            raise ValueError("integer_digits is undefined for zero")
        return len(str(abs(self.mantissa))) - self.scale

    def quantize(self, exponent: int) -> ExactDecimal:
        """Round to the nearest multiple of ``10 ** exponent``, ties away from zero."""
        target_scale = -exponent
        if target_scale >= self.scale:
            return ExactDecimal(self.mantissa * 10 ** (target_scale - self.scale), target_scale)

        rounded = round_half_away_from_zero(self.mantissa, 10 ** (self.scale - target_scale))
        if target_scale < 0:
            # Keep the scale non-negative by folding the power back into the mantissa
            return ExactDecimal(rounded * 10 ** -target_scale, 0)
        return ExactDecimal(rounded, target_scale)

    def to_fixed(self, places: int) -> str:
        """Render with exactly *places* fractional digits.

        The value is rounded first when it carries more digits than requested.
        A value that rounds to zero is rendered without a minus sign.
        """
        if places < 0:
            raise ValueError(f"places must be non-negative, got {places}")
        quantized = self.quantize(-places)
        digits = str(abs(quantized.mantissa)).rjust(places + 1, "0")
        sign = "-" if quantized.is_negative else ""
        if places == 0:
            return f"{sign}{digits}"
        return f"{sign}{digits[:-places]}.{digits[-places:]}"

    def _aligned(self, other: ExactDecimal) -> tuple[int, int]:
        scale = max(self.scale, other.scale)
        return (
            self.mantissa * 10 ** (scale - self.scale),
            other.mantissa * 10 ** (scale - other.scale),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExactDecimal):
            return NotImplemented
        left, right = self._aligned(other)
        return left == right

    def __lt__(self, other: ExactDecimal) -> bool:
        if not isinstance(other, ExactDecimal):
            return NotImplemented
        left, right = self._aligned(other)
        return left < right

    def __hash__(self) -> int:
        mantissa, scale = self.mantissa, self.scale
        while scale and mantissa % 10 == 0:
            mantissa //= 10
            scale -= 1
        return hash((mantissa, scale))

    def __str__(self) -> str:
        return self.to_fixed(self.scale)


def parse_decimal(text: str) -> ExactDecimal:
    """Parse NumericText (``-?[0-9]+(\\.[0-9]+)?``) into an ExactDecimal.

    Raises ``NotANumberError`` for anything else, the empty string included.
    No whitespace, exponent or leading ``+`` is accepted.
    """
    match = _NUMERIC_TEXT.fullmatch(text)
    if match is None:
        raise NotANumberError(text)
    sign, whole, fraction = match.groups()
    fraction = fraction or ""
    mantissa = int(whole + fraction)
    return ExactDecimal(-mantissa if sign else mantissa, len(fraction))


def to_numeric_text(value) -> str:
    """Convert a host scalar to the text the parser consumes.

    Floats and ``Decimal`` values are written in fixed-point notation so that
    ``1e-07`` reaches the parser as ``0.0000001``. Anything that is not a
    number (booleans included) is stringified and left for the parser to reject.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or value is None:
        return "" if value is None else str(value).lower()
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # repr gives the shortest round-tripping digits; Decimal drops the exponent
        return format(Decimal(repr(value)), "f")
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)
