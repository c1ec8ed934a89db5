"""Tests for configuration error classification and silent input normalization."""

import pytest

from devex_app.errors import ConfigurationError, RateTableError, UnknownCurrencyError
from devex_app.config.validation import ValidationError


class TestErrorHierarchy:
    """Test the configuration error classes."""

    def test_configuration_error_defaults(self):
        error = ConfigurationError("bad table")

        assert str(error) == "bad table"
        assert error.context == {}
        assert error.recoverable is False

    def test_unknown_currency_error(self):
        error = UnknownCurrencyError("no such code", code="XYZ", context={"source": "selector"})

        assert isinstance(error, ConfigurationError)
        assert error.code == "XYZ"
        assert error.context == {"source": "selector"}
        assert error.recoverable is False

    def test_rate_table_error_carries_validation_errors(self):
        errors = [ValidationError(field="currencies.USD.rate", message="Must be positive", value=0)]

        error = RateTableError("1 invalid entry", errors=errors, source="currencies.yaml")

        assert error.errors == errors
        assert error.source == "currencies.yaml"

    def test_rate_table_error_defaults(self):
        error = RateTableError("empty")
        assert error.errors == []
        assert error.source is None


class TestInputNeverRaises:
    """Test that invalid user input degrades to the Hidden state."""

    @pytest.mark.parametrize("text", ["", "abc", "-5", "1e999", "NaN", "  ", "1,5"])
    def test_invalid_input_hides_without_error(self, widget, surface, text):
        surface.type_text(text)
        surface.click_calculate()
        surface.press_key("Enter")
        surface.blur()

        assert surface.result_visible is False
