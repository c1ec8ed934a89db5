"""Unit tests for configuration management."""

import pytest
import yaml
from pathlib import Path

from devex_app.config.defaults import get_default_config
from devex_app.config.loader import ConfigLoader, load_default_tables
from devex_app.config.validation import ConfigValidator
from devex_app.errors import RateTableError
from devex_app.models.currency import CurrencyCode


def write_overrides(config_dir: Path, content: object) -> None:
    with open(config_dir / "currencies.yaml", "w", encoding="utf-8") as f:
        yaml.safe_dump(content, f, allow_unicode=True)


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        """Test that default configuration can be created."""
        config = get_default_config()
        assert config.currencies["USD"].rate == 0.0038
        assert config.currencies["INR"].rate == 0.3493
        assert config.currencies["JPY"].symbol == "¥"
        assert config.display.unit_name == "Robux"
        assert config.display.default_locale == "en_US"

    def test_every_code_has_one_entry(self) -> None:
        """Test that the defaults cover exactly the selectable codes."""
        config = get_default_config()
        assert set(config.currencies) == {code.value for code in CurrencyCode}

    def test_defaults_pass_validation(self) -> None:
        """Test that the built-in tables are valid."""
        loader = ConfigLoader.create()
        config = loader.merge_config(include_file=False)
        assert ConfigValidator.validate_config(config) == []


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self) -> None:
        """Test that ConfigLoader can be created."""
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.currencies_file.name == "currencies.yaml"

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test that an empty config directory yields the defaults."""
        tables = ConfigLoader.create(tmp_path).load_tables()

        assert tables.rates[CurrencyCode.USD] == 0.0038
        assert tables.symbols[CurrencyCode.GBP] == "£"
        assert tables.locales[CurrencyCode.EUR] == "de_DE"

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Test that an empty YAML file is treated as no overrides."""
        (tmp_path / "currencies.yaml").write_text("", encoding="utf-8")
        tables = ConfigLoader.create(tmp_path).load_tables()
        assert tables.rates[CurrencyCode.ARS] == 3.8

    def test_shipped_config_matches_defaults(self) -> None:
        """Test that the repository config directory changes nothing."""
        assert ConfigLoader.create().load_tables() == load_default_tables()

    def test_file_overrides(self, tmp_path: Path, sample_overrides: dict) -> None:
        """Test that file overrides merge over the defaults."""
        write_overrides(tmp_path, sample_overrides)
        tables = ConfigLoader.create(tmp_path).load_tables()

        assert tables.rates[CurrencyCode.EUR] == 0.004
        assert tables.symbols[CurrencyCode.EUR] == "€"
        assert tables.symbols[CurrencyCode.BRL] == "R$ "
        assert tables.unit_name == "RBX"
        # Untouched entries keep their defaults
        assert tables.rates[CurrencyCode.USD] == 0.0038

    def test_explicit_overrides_win(self, tmp_path: Path, sample_overrides: dict) -> None:
        """Test precedence of caller overrides over the file."""
        write_overrides(tmp_path, sample_overrides)
        loader = ConfigLoader.create(tmp_path)

        config = loader.merge_config({"currencies": {"EUR": {"rate": 0.005}}})

        assert config["currencies"]["EUR"]["rate"] == 0.005
        assert config["display"]["unit_name"] == "RBX"

    def test_invalid_override_raises(self, tmp_path: Path) -> None:
        """Test that invalid entries abort table loading."""
        write_overrides(tmp_path, {"currencies": {"USD": {"rate": -1}}})

        with pytest.raises(RateTableError) as exc_info:
            ConfigLoader.create(tmp_path).load_tables()

        assert [err.field for err in exc_info.value.errors] == ["currencies.USD.rate"]
        assert exc_info.value.source.endswith("currencies.yaml")

    def test_non_mapping_file_raises(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        write_overrides(tmp_path, ["USD", "EUR"])

        with pytest.raises(RateTableError):
            ConfigLoader.create(tmp_path).load_tables()

    @pytest.mark.parametrize("content", ["display:\n", "display: abc\n"])
    def test_non_mapping_display_raises(self, tmp_path: Path, content: str) -> None:
        """Test that an empty or scalar display section is rejected."""
        (tmp_path / "currencies.yaml").write_text(content, encoding="utf-8")

        with pytest.raises(RateTableError) as exc_info:
            ConfigLoader.create(tmp_path).load_tables()

        assert [err.field for err in exc_info.value.errors] == ["display"]

    def test_tables_are_read_only(self) -> None:
        """Test that loaded tables cannot be mutated."""
        tables = load_default_tables()

        with pytest.raises(TypeError):
            tables.rates[CurrencyCode.USD] = 1.0  # type: ignore[index]


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_currency_params(self) -> None:
        """Test validation of a complete currency entry."""
        params = {"rate": 0.0038, "symbol": "$", "locale": "en_US"}
        assert ConfigValidator.validate_currency_params("USD", params) == []

    @pytest.mark.parametrize("rate", [0, -0.5, "0.0038", None, True, float("inf")])
    def test_invalid_rate(self, rate) -> None:
        """Test validation of non-positive or non-numeric rates."""
        params = {"rate": rate, "symbol": "$", "locale": "en_US"}

        errors = ConfigValidator.validate_currency_params("USD", params)

        assert len(errors) == 1
        assert errors[0].field == "currencies.USD.rate"

    def test_empty_symbol(self) -> None:
        """Test validation of a blank symbol."""
        params = {"rate": 0.0038, "symbol": "  ", "locale": "en_US"}

        errors = ConfigValidator.validate_currency_params("USD", params)

        assert [err.field for err in errors] == ["currencies.USD.symbol"]

    @pytest.mark.parametrize("locale", ["xx_YY", "", None, 42])
    def test_unknown_locale(self, locale) -> None:
        """Test validation of locales Babel does not know."""
        params = {"rate": 0.0038, "symbol": "$", "locale": locale}

        errors = ConfigValidator.validate_currency_params("USD", params)

        assert [err.field for err in errors] == ["currencies.USD.locale"]

    def test_hyphenated_locale_accepted(self) -> None:
        """Test that BCP 47 style identifiers are accepted."""
        params = {"rate": 0.0038, "symbol": "$", "locale": "en-US"}
        assert ConfigValidator.validate_currency_params("USD", params) == []

    def test_unknown_code(self) -> None:
        """Test that codes outside the selector are rejected."""
        config = ConfigLoader.create().merge_config(include_file=False)
        config["currencies"]["XYZ"] = {"rate": 1.0, "symbol": "X", "locale": "en_US"}

        errors = ConfigValidator.validate_config(config)

        assert len(errors) == 1
        assert errors[0].message == "Unknown currency code"

    def test_missing_code(self) -> None:
        """Test that every selectable code must be present."""
        config = ConfigLoader.create().merge_config(include_file=False)
        del config["currencies"]["JPY"]

        errors = ConfigValidator.validate_config(config)

        assert [err.field for err in errors] == ["currencies.JPY"]

    def test_invalid_display_params(self) -> None:
        """Test validation of shared display parameters."""
        errors = ConfigValidator.validate_display_params(
            {"unit_name": "", "default_locale": "nope"}
        )
        assert {err.field for err in errors} == {"display.unit_name", "display.default_locale"}


class TestLocaleNormalization:
    """Test that hyphenated locales are usable for formatting."""

    def test_hyphenated_locale_normalized(self, tmp_path: Path) -> None:
        write_overrides(tmp_path, {"currencies": {"USD": {"locale": "de-DE"}}})

        tables = ConfigLoader.create(tmp_path).load_tables()

        assert tables.locales[CurrencyCode.USD] == "de_DE"
