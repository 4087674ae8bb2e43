#!/usr/bin/env python3
"""Format a number or money amount from the command line."""
import argparse
import sys

# Load .env file
from dotenv import load_dotenv
load_dotenv()

from numeric_formatting.config import Settings
from numeric_formatting.currency.formatting import default_table, format_currency
from numeric_formatting.errors import CurrencyTableError, NotANumberError
from numeric_formatting.numbers.formatting import round_and_format
from numeric_formatting.utils.logging import setup_logging


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("value", help="Decimal text, e.g. -12345678.1236")
    parser.add_argument("--mode", choices=("money", "number"), default="money")
    parser.add_argument("--currency", default=None, help="Currency code (money mode)")
    parser.add_argument("--no-symbol", action="store_true", help="Omit the currency symbol")
    parser.add_argument("--no-space", action="store_true", help="Remove spaces from the result")
    parser.add_argument("--precision", type=int, default=None, help="Fractional digits (number mode)")
    parser.add_argument("--significant", action="store_true", help="Treat precision as significant figures")
    parser.add_argument("--strip-zeros", action="store_true", help="Strip insignificant trailing zeros")
    parser.add_argument("--delimiter", default=",", help="Thousands delimiter (number mode)")
    parser.add_argument("--separator", default=".", help="Decimal separator (number mode)")
    args = parser.parse_args(argv)

    settings = Settings()
    setup_logging(settings.log_level)

    if args.mode == "number":
        try:
            print(round_and_format(
                args.value,
                group_separator=args.delimiter,
                decimal_point=args.separator,
                precision=args.precision,
                significant_digits=1 if args.significant else None,
                strip_trailing_zeros=args.strip_zeros,
            ))
        except NotANumberError as e:
            print(f"Error: {e}")
            return 1
        return 0

    try:
        table = default_table()
    except CurrencyTableError as e:
        print(f"Error: {e}")
        return 1

    print(format_currency(
        args.value,
        use_symbol=not args.no_symbol,
        use_space=not args.no_space,
        currency_code=args.currency,
        default_currency=settings.default_currency,
        table=table,
    ))
    return 0


if __name__ == "__main__":
    sys.exit(main())
