"""
Configuration error classifications for currency table defects.

These exceptions represent mistakes in the rate, symbol or locale tables.
They are not recoverable at runtime; the tables must be corrected.
"""

from typing import Optional, Dict, Any


class ConfigurationError(Exception):
    """Base class for currency table configuration defects."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class UnknownCurrencyError(ConfigurationError):
    """A currency code with no entry in the currency tables."""

    def __init__(self, message: str, code: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.code = code


class RateTableError(ConfigurationError):
    """Currency table overrides failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 source: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.source = source
