"""Number and money filters for template engines.

Each filter is a plain function over already-evaluated arguments, so a host
engine only has to register ``FILTERS`` under their names. Filters that
format for display pass non-numeric input through unchanged; the comparison
filters raise ``NotANumberError`` instead.
"""

from __future__ import annotations

from pydantic import ValidationError

from numeric_formatting.currency import formatting as currency_formatting
from numeric_formatting.currency.table import CurrencyTable
from numeric_formatting.errors import MissingArgumentError, NotANumberError
from numeric_formatting.models.locale import RenderContext
from numeric_formatting.models.specs import (
    DEFAULT_CURRENCY_PRECISION,
    DEFAULT_DECIMAL_POINT,
    DEFAULT_GROUP_SEPARATOR,
)
from numeric_formatting.numbers.decimal_value import ExactDecimal, parse_decimal, to_numeric_text
from numeric_formatting.numbers.formatting import round_and_format
from numeric_formatting.numbers.grouping import group_digits


def _first_char(argument, default: str) -> str:
    """First character of a separator argument; ``None`` or ``""`` gives *default*."""
    text = "" if argument is None else str(argument)
    return text[:1] or default


def _ambient_currency(context: RenderContext | None) -> str:
    return (context or RenderContext()).currency_type


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


def money(value, use_symbol: bool | None = None, use_space: bool | None = None,
          currency_type: str | None = None, context: RenderContext | None = None,
          table: CurrencyTable | None = None) -> str:
    """Format *value* as money in *currency_type* or the context's currency."""
    return currency_formatting.format_currency(
        value,
        use_symbol=True if use_symbol is None else use_symbol,
        use_space=True if use_space is None else use_space,
        currency_code=currency_type,
        default_currency=_ambient_currency(context),
        table=table,
    )


def money_without_trailing_zeros(value, use_symbol: bool | None = None, use_space: bool | None = None,
                                 currency_type: str | None = None, context: RenderContext | None = None,
                                 table: CurrencyTable | None = None) -> str:
    """Like ``money`` but drops a literal ``.00``."""
    return currency_formatting.money_without_trailing_zeros(
        value,
        use_symbol=True if use_symbol is None else use_symbol,
        use_space=True if use_space is None else use_space,
        currency_code=currency_type,
        default_currency=_ambient_currency(context),
        table=table,
    )


# ---------------------------------------------------------------------------
# Number formatting
# ---------------------------------------------------------------------------


def number_with_precision(value, thousands_delimiter: str | None = None,
                          fractional_separator: str | None = None, precision: int | None = None,
                          significant: int | None = None, strip_insignificant_zeros: bool = False) -> str:
    """Round to *precision* (default 3) and group.

    Non-numeric input and arguments the rounding rules reject (a negative
    *precision*) return the text unchanged.
    """
    text = to_numeric_text(value)
    try:
        return round_and_format(
            text,
            group_separator=_first_char(thousands_delimiter, DEFAULT_GROUP_SEPARATOR),
            decimal_point=_first_char(fractional_separator, DEFAULT_DECIMAL_POINT),
            precision=precision,
            significant_digits=significant,
            strip_trailing_zeros=strip_insignificant_zeros,
        )
    except (NotANumberError, ValidationError):
        return text


def number_with_delimiter(value, thousands_delimiter: str | None = None,
                          fractional_separator: str | None = None) -> str:
    """Group the digits of *value* without rounding it."""
    text = to_numeric_text(value)
    try:
        parse_decimal(text)
    except NotANumberError:
        return text
    return group_digits(
        text,
        _first_char(thousands_delimiter, DEFAULT_GROUP_SEPARATOR),
        _first_char(fractional_separator, DEFAULT_DECIMAL_POINT),
    )


def number_to_percentage(value, thousands_delimiter: str | None = None,
                         fractional_separator: str | None = None, precision: int | None = None) -> str:
    """Round and group *value*, then append ``%``. Raises on non-numeric input."""
    formatted = round_and_format(
        to_numeric_text(value),
        group_separator=_first_char(thousands_delimiter, DEFAULT_GROUP_SEPARATOR),
        decimal_point=_first_char(fractional_separator, DEFAULT_DECIMAL_POINT),
        precision=precision,
    )
    return f"{formatted}%"


def number_to_currency(value, delimiter: str | None = None, separator: str | None = None,
                       unit: str | None = None, precision: int | None = None,
                       format: str | None = None) -> str:
    """Render *value* through a ``%u``/``%n`` pattern (default ``%u%n``).

    ``%u`` is replaced by *unit* (default ``$``) and ``%n`` by the rounded
    number, or by the raw text when it does not parse.
    """
    text = to_numeric_text(value)
    if not text:
        return ""

    try:
        number = round_and_format(
            text,
            group_separator=_first_char(delimiter, DEFAULT_GROUP_SEPARATOR),
            decimal_point=_first_char(separator, DEFAULT_DECIMAL_POINT),
            precision=DEFAULT_CURRENCY_PRECISION if precision is None else precision,
        )
    except NotANumberError:
        number = text

    unit = "$" if unit is None else unit
    pattern = "%u%n" if format is None else format
    return pattern.replace("%u", unit).replace("%n", number)


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


def _require_number(value) -> ExactDecimal:
    return parse_decimal(to_numeric_text(value))


def between(value, low=None, high=None) -> bool:
    """True when *value* lies strictly between *low* and *high*."""
    if low is None:
        raise MissingArgumentError("low")
    if high is None:
        raise MissingArgumentError("high")
    number = _require_number(value)
    return _require_number(low) < number < _require_number(high)


def more_than(value, reference=None) -> bool:
    """True when *value* is strictly greater than *reference*."""
    if reference is None:
        raise MissingArgumentError("reference")
    return _require_number(value) > _require_number(reference)


def less_than(value, reference=None) -> bool:
    """True when *value* is strictly less than *reference*."""
    if reference is None:
        raise MissingArgumentError("reference")
    return _require_number(value) < _require_number(reference)


FILTERS = {
    "money": money,
    "money_without_trailing_zeros": money_without_trailing_zeros,
    "number_with_precision": number_with_precision,
    "number_with_delimiter": number_with_delimiter,
    "number_to_percentage": number_to_percentage,
    "number_to_currency": number_to_currency,
    "between": between,
    "more_than": more_than,
    "less_than": less_than,
}
