"""Currency formatting: parse, round to the locale precision, group, add the symbol.

Unlike ``round_and_format`` this path never raises on bad input. Money
filters run over whatever a template hands them, so a value that is not a
number comes back exactly as it went in.

The process-wide locale table is read on first use through
``default_table()``, not at import, so a host can configure logging and the
environment before it is built. Callers that manage their own table pass
``table=`` and never touch it.
"""

from __future__ import annotations

from functools import cache

from numeric_formatting.config import Settings
from numeric_formatting.currency.table import CurrencyTable, load_currency_table
from numeric_formatting.errors import NotANumberError
from numeric_formatting.models.specs import DEFAULT_CURRENCY_PRECISION
from numeric_formatting.numbers.decimal_value import parse_decimal, to_numeric_text
from numeric_formatting.numbers.grouping import group_digits
from numeric_formatting.numbers.rounding import round_fixed


@cache
def default_table() -> CurrencyTable:
    """Load the shared table once, from ``NUMFMT_CURRENCY_TABLE_PATH`` or the packaged file."""
    return load_currency_table(Settings().currency_table_path or None)


def format_currency(
    value,
    use_symbol: bool = True,
    use_space: bool = True,
    currency_code: str | None = None,
    default_currency: str | None = None,
    *,
    table: CurrencyTable | None = None,
) -> str:
    """Format *value* as money.

    Args:
        value: Text or number to format. For a list or tuple the first item is
            used; an empty one yields ``""``.
        use_symbol: When false, the default locale's separators and two
            fractional digits are used and no symbol is added.
        use_space: When false, every space is removed from the result.
        currency_code: Explicit currency; takes priority when non-empty.
        default_currency: Ambient currency used when *currency_code* is empty.
        table: Locale table to resolve codes against; defaults to the table
            from ``default_table()``.

    Returns the original text when it does not parse as a decimal.
    """
    if table is None:
        table = default_table()

    if isinstance(value, (list, tuple)):
        if not value:
            return ""
        value = value[0]
    text = to_numeric_text(value)
    if not text:
        return ""

    try:
        amount = parse_decimal(text)
    except NotANumberError:
        return text

    if not use_symbol:
        default = table.default
        rounded = round_fixed(amount, DEFAULT_CURRENCY_PRECISION)
        return group_digits(rounded, default.group_separator, default.decimal_point)

    locale = table.resolve(currency_code or default_currency)
    number = group_digits(round_fixed(amount, locale.precision), locale.group_separator, locale.decimal_point)
    formatted = locale.wrap(number)
    if not use_space:
        formatted = formatted.replace(" ", "")
    return formatted


def money_without_trailing_zeros(
    value,
    use_symbol: bool = True,
    use_space: bool = True,
    currency_code: str | None = None,
    default_currency: str | None = None,
    *,
    table: CurrencyTable | None = None,
) -> str:
    """``format_currency`` with every literal ``.00`` removed from the result.

    This is a plain substring removal, not zero stripping: ``10.00`` becomes
    ``10`` but ``10.10`` is unchanged.
    """
    formatted = format_currency(
        value,
        use_symbol=use_symbol,
        use_space=use_space,
        currency_code=currency_code,
        default_currency=default_currency,
        table=table,
    )
    return formatted.replace(".00", "")
