"""Test the currency locale table and its loader."""
import json

import pytest

from numeric_formatting.currency.table import CurrencyTable, load_currency_table
from numeric_formatting.errors import CurrencyTableError
from numeric_formatting.models.locale import DEFAULT_LOCALE
from tests.factories import make_locale, make_table_entry, write_currency_table


class TestPackagedTable:
    def test_loads(self, currency_table):
        assert len(currency_table) > 10
        assert "EUR" in currency_table

    def test_codes_are_uppercase(self, currency_table):
        assert all(code == code.upper() for code in currency_table)

    def test_eur_rules(self, currency_table):
        eur = currency_table.resolve("EUR")
        assert eur.symbol == "€"
        assert eur.symbol_is_prefix is False
        assert eur.group_separator == "."
        assert eur.decimal_point == ","
        assert eur.precision == 2

    def test_precision_defaults_to_two(self, currency_table):
        assert currency_table.resolve("GBP").precision == 2

    def test_explicit_precision(self, currency_table):
        assert currency_table.resolve("JPY").precision == 0
        assert currency_table.resolve("KWD").precision == 3

    def test_no_whitespace_grouping(self, currency_table):
        assert not any(currency_table.resolve(code).group_separator.isspace() for code in currency_table)


class TestResolve:
    def test_case_insensitive(self, small_table):
        assert small_table.resolve("eur") is small_table.resolve("EUR")

    def test_unknown_code_returns_default(self, small_table):
        assert small_table.resolve("XYZ") is DEFAULT_LOCALE

    def test_empty_code_returns_default(self, small_table):
        assert small_table.resolve("") is DEFAULT_LOCALE
        assert small_table.resolve(None) is DEFAULT_LOCALE

    def test_contains(self, small_table):
        assert "gbp" in small_table
        assert "XYZ" not in small_table
        assert 42 not in small_table

    def test_custom_default(self):
        fallback = make_locale("XXX", symbol="¤")
        table = CurrencyTable([], default=fallback)
        assert table.resolve("EUR") is fallback
        assert len(table) == 0

    def test_duplicate_codes_rejected(self):
        with pytest.raises(CurrencyTableError, match="Duplicate"):
            CurrencyTable([make_locale("EUR"), make_locale("eur")])

    def test_iteration_is_a_snapshot(self, small_table):
        codes = list(small_table)
        codes.append("USD")
        assert list(small_table) == ["EUR", "GBP", "JPY"]
        assert "USD" not in small_table

    def test_no_item_assignment(self, small_table):
        with pytest.raises(TypeError):
            small_table["USD"] = small_table.default
        assert small_table.resolve("USD") is DEFAULT_LOCALE


class TestLoadCurrencyTable:
    def test_from_path(self, tmp_path):
        path = write_currency_table(tmp_path, [make_table_entry("EUR"), make_table_entry("chf", symbol="CHF")])
        table = load_currency_table(path)
        assert len(table) == 2
        assert table.resolve("CHF").symbol == "CHF"

    def test_accepts_string_path(self, tmp_path):
        path = write_currency_table(tmp_path, [make_table_entry("EUR")])
        assert "EUR" in load_currency_table(str(path))

    def test_missing_precision_defaults(self, tmp_path):
        entry = make_table_entry("EUR")
        del entry["precision"]
        table = load_currency_table(write_currency_table(tmp_path, [entry]))
        assert table.resolve("EUR").precision == 2

    def test_display_name_is_optional(self, tmp_path):
        entry = make_table_entry("EUR")
        del entry["display_name"]
        table = load_currency_table(write_currency_table(tmp_path, [entry]))
        assert table.resolve("EUR").display_name == ""

    def test_missing_file(self, tmp_path):
        with pytest.raises(CurrencyTableError, match="not readable"):
            load_currency_table(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CurrencyTableError):
            load_currency_table(path)

    def test_unsupported_version(self, tmp_path):
        path = write_currency_table(tmp_path, [make_table_entry("EUR")], version=2)
        with pytest.raises(CurrencyTableError, match="version"):
            load_currency_table(path)

    def test_multi_character_separator_fails_fast(self, tmp_path):
        entry = make_table_entry("EUR")
        entry["group_separator"] = ".."
        with pytest.raises(CurrencyTableError):
            load_currency_table(write_currency_table(tmp_path, [entry]))

    def test_space_separator_fails_fast(self, tmp_path):
        entry = make_table_entry("SEK")
        entry["group_separator"] = " "
        with pytest.raises(CurrencyTableError):
            load_currency_table(write_currency_table(tmp_path, [entry]))

    def test_negative_precision_fails_fast(self, tmp_path):
        entry = make_table_entry("EUR")
        entry["precision"] = -1
        with pytest.raises(CurrencyTableError):
            load_currency_table(write_currency_table(tmp_path, [entry]))

    def test_missing_code_fails_fast(self, tmp_path):
        entry = make_table_entry("EUR")
        del entry["code"]
        with pytest.raises(CurrencyTableError):
            load_currency_table(write_currency_table(tmp_path, [entry]))

    def test_duplicate_codes_fail_fast(self, tmp_path):
        path = write_currency_table(tmp_path, [make_table_entry("EUR"), make_table_entry("EUR")])
        with pytest.raises(CurrencyTableError):
            load_currency_table(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text(json.dumps([make_table_entry("EUR")]), encoding="utf-8")
        with pytest.raises(CurrencyTableError):
            load_currency_table(path)
