"""Immutable currency code → locale lookup, built once from a JSON resource."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ValidationError

from numeric_formatting.errors import CurrencyTableError
from numeric_formatting.models.locale import DEFAULT_LOCALE, CurrencyLocale
from numeric_formatting.utils.logging import get_logger

logger = get_logger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_TABLE_PATH = DATA_DIR / "currencies.json"
SUPPORTED_VERSIONS = frozenset({1})


class CurrencyTableFile(BaseModel):
    """On-disk layout of the currency configuration resource."""

    version: int
    currencies: list[CurrencyLocale]


class CurrencyTable:
    """Read-only mapping from uppercase currency code to ``CurrencyLocale``.

    Lookups never fail: an unknown or empty code resolves to the default
    locale, so callers do not branch on missing currencies.
    """

    def __init__(self, locales: list[CurrencyLocale], default: CurrencyLocale = DEFAULT_LOCALE):
        by_code: dict[str, CurrencyLocale] = {}
        for locale in locales:
            if locale.code in by_code:
                raise CurrencyTableError(f"Duplicate currency code: {locale.code}")
            by_code[locale.code] = locale
        self._locales = MappingProxyType(by_code)
        self._default = default

    @property
    def default(self) -> CurrencyLocale:
        return self._default

    def resolve(self, code: str | None) -> CurrencyLocale:
        """Return the locale for *code* (case-insensitive), or the default locale."""
        if not code:
            return self._default
        return self._locales.get(code.upper(), self._default)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and code.upper() in self._locales

    def __len__(self) -> int:
        return len(self._locales)

    def __iter__(self) -> Iterator[str]:
        return iter(self._locales)


def load_currency_table(path: str | Path | None = None) -> CurrencyTable:
    """Build a ``CurrencyTable`` from the JSON resource at *path*.

    Defaults to the table packaged with the library. Any problem with the
    resource (unreadable file, bad JSON, unsupported version, invalid or
    duplicate entries) raises ``CurrencyTableError`` here, never at lookup time.
    """
    path = Path(path) if path else DEFAULT_TABLE_PATH
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CurrencyTableError(f"Currency table not readable: {path}") from exc

    try:
        table_file = CurrencyTableFile.model_validate_json(raw)
    except ValidationError as exc:
        raise CurrencyTableError(f"Invalid currency table {path}: {exc}") from exc

    if table_file.version not in SUPPORTED_VERSIONS:
        raise CurrencyTableError(f"Unsupported currency table version {table_file.version} in {path}")

    table = CurrencyTable(table_file.currencies)
    logger.info("currency_table_loaded", path=str(path), version=table_file.version, currencies=len(table))
    return table
