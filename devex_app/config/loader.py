"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import structlog
import yaml

from ..errors import RateTableError
from ..models.currency import CurrencyCode, CurrencyTables
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator

logger = structlog.get_logger(__name__)

CURRENCIES_FILE = "currencies.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def currencies_file(self) -> Path:
        return self.config_dir / CURRENCIES_FILE

    def load_file_overrides(self) -> dict[str, Any]:
        """Load currency table overrides from the config directory."""
        if not self.currencies_file.exists():
            return {}

        with open(self.currencies_file, encoding="utf-8") as f:
            overrides = yaml.safe_load(f)

        if overrides is None:
            return {}

        if not isinstance(overrides, dict):
            raise RateTableError(
                "Currency overrides must be a mapping",
                source=str(self.currencies_file),
            )

        return overrides

    def merge_config(
        self,
        overrides: Optional[dict[str, Any]] = None,
        include_file: bool = True
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides passed by the caller (highest priority)
        2. currencies.yaml in the config directory
        3. Built-in defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        if include_file:
            config = self._deep_merge(config, self.load_file_overrides())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_tables(
        self,
        overrides: Optional[dict[str, Any]] = None,
        include_file: bool = True
    ) -> CurrencyTables:
        """
        Build validated currency tables from the merged configuration.

        Raises:
            RateTableError: if any merged entry fails validation
        """
        config = self.merge_config(overrides, include_file)
        errors = ConfigValidator.validate_config(config)

        if errors:
            logger.error(
                "Currency table validation failed",
                source=str(self.currencies_file),
                errors=[f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            )
            raise RateTableError(
                f"{len(errors)} invalid currency table entries",
                errors=errors,
                source=str(self.currencies_file),
            )

        currencies = config["currencies"]
        display = config.get("display", {})
        tables = CurrencyTables.build(
            rates={code: float(currencies[code.value]["rate"]) for code in CurrencyCode},
            symbols={code: currencies[code.value]["symbol"] for code in CurrencyCode},
            locales={code: currencies[code.value]["locale"].replace("-", "_") for code in CurrencyCode},
            unit_name=display.get("unit_name", "Robux"),
            default_locale=display.get("default_locale", "en_US").replace("-", "_"),
        )

        logger.debug(
            "Currency tables loaded",
            currencies=len(tables.rates),
            unit_name=tables.unit_name
        )
        return tables

    def _dataclass_to_dict(self, obj: Any) -> Any:
        """Convert nested dataclasses (and dicts of them) to dictionaries."""
        if hasattr(obj, '__dataclass_fields__'):
            return {
                field_name: self._dataclass_to_dict(getattr(obj, field_name))
                for field_name in obj.__dataclass_fields__
            }
        if isinstance(obj, dict):
            return {key: self._dataclass_to_dict(value) for key, value in obj.items()}
        return obj

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_default_tables() -> CurrencyTables:
    """Build currency tables from the built-in defaults only."""
    return ConfigLoader.create().load_tables(include_file=False)
