"""Application configuration via environment variables with NUMFMT_ prefix."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Numeric formatting configuration.

    All settings are read from environment variables prefixed with ``NUMFMT_``.
    None of them are consulted per formatting call: the currency table is
    built once from ``currency_table_path`` and the default currency is handed
    to the filters through a ``RenderContext``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMFMT_")

    # ── Currency ───────────────────────────────────────────────────────────
    # Ambient currency used when a money filter gets no explicit code
    default_currency: str = Field(default="USD", min_length=1)
    # Empty means the table packaged under numeric_formatting/currency/data
    currency_table_path: str = ""

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
