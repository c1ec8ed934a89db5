"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any

from babel import Locale, UnknownLocaleError

from ..models.currency import CurrencyCode


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_locale(value: Any) -> bool:
    if not isinstance(value, str) or not value:
        return False
    try:
        Locale.parse(value.replace("-", "_"))
    except (UnknownLocaleError, ValueError):
        return False
    return True


class ConfigValidator:
    """Validates currency table configuration."""

    @staticmethod
    def validate_currency_params(code: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate rate, symbol and locale for a single currency."""
        errors = []
        prefix = f"currencies.{code}"

        if not isinstance(params, dict):
            return [ValidationError(
                field=prefix,
                message="Must be a mapping with rate, symbol and locale",
                value=params
            )]

        # Validate rate
        value = params.get("rate")
        if (isinstance(value, bool) or not isinstance(value, (int, float))
                or not math.isfinite(value) or value <= 0):
            errors.append(ValidationError(
                field=f"{prefix}.rate",
                message="Must be a positive finite number",
                value=value
            ))

        # Validate symbol
        value = params.get("symbol")
        if not isinstance(value, str) or not value.strip():
            errors.append(ValidationError(
                field=f"{prefix}.symbol",
                message="Must be a non-empty string",
                value=value
            ))

        # Validate locale
        value = params.get("locale")
        if not _is_locale(value):
            errors.append(ValidationError(
                field=f"{prefix}.locale",
                message="Must be a locale identifier known to CLDR",
                value=value
            ))

        return errors

    @staticmethod
    def validate_display_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate shared display parameters."""
        errors = []

        if not isinstance(params, dict):
            return [ValidationError(
                field="display",
                message="Must be a mapping of display parameters",
                value=params
            )]

        if "unit_name" in params:
            value = params["unit_name"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="display.unit_name",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "default_locale" in params:
            value = params["default_locale"]
            if not _is_locale(value):
                errors.append(ValidationError(
                    field="display.default_locale",
                    message="Must be a locale identifier known to CLDR",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration.

        Every selectable currency must have exactly one entry, and no
        entries may exist for codes the selector does not offer.
        """
        errors = []
        currencies = config.get("currencies", {})

        if not isinstance(currencies, dict):
            return [ValidationError(
                field="currencies",
                message="Must be a mapping of currency code to parameters",
                value=currencies
            )]

        known = {code.value for code in CurrencyCode}

        for code in CurrencyCode:
            if code.value not in currencies:
                errors.append(ValidationError(
                    field=f"currencies.{code.value}",
                    message="Missing currency entry",
                    value=None
                ))

        for code, params in currencies.items():
            if code not in known:
                errors.append(ValidationError(
                    field=f"currencies.{code}",
                    message="Unknown currency code",
                    value=code
                ))
                continue
            errors.extend(ConfigValidator.validate_currency_params(code, params))

        if "display" in config:
            errors.extend(ConfigValidator.validate_display_params(config["display"]))

        return errors
