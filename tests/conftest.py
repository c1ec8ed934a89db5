"""Pytest configuration and shared fixtures."""

import pytest

from devex_app.config.loader import load_default_tables
from devex_app.conversion.rates import RateResolver
from devex_app.engine import DevExWidget
from devex_app.models.currency import CurrencyTables
from devex_app.ui.memory import InMemorySurface


@pytest.fixture
def default_tables() -> CurrencyTables:
    """Built-in currency tables without file overrides."""
    return load_default_tables()


@pytest.fixture
def resolver(default_tables: CurrencyTables) -> RateResolver:
    """Resolver over the built-in tables."""
    return RateResolver(default_tables)


@pytest.fixture
def surface() -> InMemorySurface:
    """Empty headless surface with USD selected."""
    return InMemorySurface()


@pytest.fixture
def widget(surface: InMemorySurface, default_tables: CurrencyTables) -> DevExWidget:
    """Started widget bound to the in-memory surface."""
    widget = DevExWidget(surface, tables=default_tables)
    widget.start()
    return widget


@pytest.fixture
def sample_overrides() -> dict:
    """Currency overrides touching rate, symbol and display settings."""
    return {
        "currencies": {
            "EUR": {"rate": 0.004},
            "BRL": {"symbol": "R$ "},
        },
        "display": {
            "unit_name": "RBX",
        },
    }
