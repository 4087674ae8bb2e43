"""Currency locale rules and the render-scoped context the filters read.

A ``CurrencyLocale`` bundles what the money filters need to know about one
currency: its symbol and where it goes, the grouping and decimal characters,
and how many fractional digits to show. Locales are frozen; the table that
holds them is built once and shared by every caller.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from numeric_formatting.config import Settings
from numeric_formatting.models.specs import (
    DEFAULT_CURRENCY_PRECISION,
    DEFAULT_DECIMAL_POINT,
    DEFAULT_GROUP_SEPARATOR,
)


class CurrencyLocale(BaseModel):
    """Formatting rules for a single currency code."""

    model_config = ConfigDict(frozen=True)

    code: str
    # Carried over from the configuration resource; nothing reads it
    display_name: str = ""
    symbol: str = ""
    symbol_is_prefix: bool = True
    group_separator: str = Field(default=DEFAULT_GROUP_SEPARATOR, min_length=1, max_length=1)
    decimal_point: str = Field(default=DEFAULT_DECIMAL_POINT, min_length=1, max_length=1)
    precision: int = Field(default=DEFAULT_CURRENCY_PRECISION, ge=0)

    @field_validator("code")
    @classmethod
    def _uppercase_code(cls, value: str) -> str:
        code = value.strip().upper()
        if not code:
            raise ValueError("code must not be blank")
        return code

    @field_validator("group_separator")
    @classmethod
    def _no_space_grouping(cls, value: str) -> str:
        # use_space=False strips every space from the output
        if value.isspace():
            raise ValueError("group_separator must not be whitespace")
        return value

    def wrap(self, number: str) -> str:
        """Attach the symbol to an already grouped *number*.

        The minus sign always leads (``-$ 5.00``, ``-5,00 €``). An empty symbol
        leaves the number bare.
        """
        if not self.symbol:
            return number
        sign = ""
        if number.startswith("-"):
            sign, number = "-", number[1:]
        if self.symbol_is_prefix:
            return f"{sign}{self.symbol} {number}"
        return f"{sign}{number} {self.symbol}"


DEFAULT_LOCALE = CurrencyLocale(
    code="DEFAULT",
    symbol="$",
    symbol_is_prefix=True,
    group_separator=DEFAULT_GROUP_SEPARATOR,
    decimal_point=DEFAULT_DECIMAL_POINT,
    precision=DEFAULT_CURRENCY_PRECISION,
)


class RenderContext(BaseModel):
    """Per-render values the host passes to the filters by value.

    ``currency_type`` is the ambient currency used when a money filter is
    called without an explicit code.
    """

    currency_type: str = "USD"

    @classmethod
    def from_settings(cls, settings: Settings) -> RenderContext:
        return cls(currency_type=settings.default_currency)
