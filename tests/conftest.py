"""Shared test fixtures."""
import pytest

from numeric_formatting.currency.table import CurrencyTable, load_currency_table
from numeric_formatting.models.locale import RenderContext
from tests.factories import make_locale


@pytest.fixture
def currency_table():
    """The table packaged with the library."""
    return load_currency_table()


@pytest.fixture
def small_table():
    """A hand-built table with one prefix and one suffix currency."""
    return CurrencyTable([
        make_locale("EUR"),
        make_locale("GBP", display_name="British Pound", symbol="£", symbol_is_prefix=True,
                    group_separator=",", decimal_point="."),
        make_locale("JPY", display_name="Japanese Yen", symbol="¥", symbol_is_prefix=True,
                    group_separator=",", decimal_point=".", precision=0),
    ])


@pytest.fixture
def render_context():
    return RenderContext(currency_type="USD")
