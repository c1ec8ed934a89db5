"""
Error classification for the DevEx calculator.

User input never raises: invalid quantities normalize to zero. The errors
here describe configuration defects in the currency tables, detected at
startup or on an impossible lookup.
"""

from .configuration import (
    ConfigurationError,
    UnknownCurrencyError,
    RateTableError,
)

__all__ = [
    "ConfigurationError",
    "UnknownCurrencyError",
    "RateTableError",
]
