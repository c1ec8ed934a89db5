"""Default currency tables for the DevEx calculator.

Rates are the value of one Robux in each currency. USD is the DevEx base
rate; INR derives from 1 USD = 91.92 INR; the others are approximations
from the USD rate. Update the values here when rates change.
"""

from dataclasses import dataclass, field

from ..models.currency import CurrencyCode


@dataclass(frozen=True)
class CurrencyParams:
    """Per-currency conversion and display parameters."""
    rate: float                                      # Value of 1 Robux
    symbol: str                                      # Display glyph
    locale: str                                      # Number formatting locale


@dataclass(frozen=True)
class DisplayParams:
    """Display parameters shared by all currencies."""
    unit_name: str = "Robux"
    default_locale: str = "en_US"                    # Fallback for unmapped codes


def _default_currencies() -> dict[str, CurrencyParams]:
    return {
        CurrencyCode.USD.value: CurrencyParams(rate=0.0038, symbol="$", locale="en_US"),
        CurrencyCode.INR.value: CurrencyParams(rate=0.3493, symbol="₹", locale="en_IN"),
        CurrencyCode.BRL.value: CurrencyParams(rate=0.0190, symbol="R$", locale="pt_BR"),
        CurrencyCode.EUR.value: CurrencyParams(rate=0.0035, symbol="€", locale="de_DE"),
        CurrencyCode.GBP.value: CurrencyParams(rate=0.0030, symbol="£", locale="en_GB"),
        CurrencyCode.CAD.value: CurrencyParams(rate=0.0051, symbol="C$", locale="en_CA"),
        CurrencyCode.AUD.value: CurrencyParams(rate=0.0058, symbol="A$", locale="en_AU"),
        CurrencyCode.JPY.value: CurrencyParams(rate=0.57, symbol="¥", locale="ja_JP"),
        CurrencyCode.MXN.value: CurrencyParams(rate=0.065, symbol="$", locale="es_MX"),
        CurrencyCode.ARS.value: CurrencyParams(rate=3.8, symbol="$", locale="es_AR"),
    }


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    currencies: dict[str, CurrencyParams] = field(default_factory=_default_currencies)
    display: DisplayParams = field(default_factory=DisplayParams)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig()
