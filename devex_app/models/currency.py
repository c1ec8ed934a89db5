"""Currency codes and the immutable currency tables"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class CurrencyCode(str, Enum):
    """Real-world currencies offered by the currency selector."""
    USD = "USD"
    INR = "INR"
    BRL = "BRL"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"
    JPY = "JPY"
    MXN = "MXN"
    ARS = "ARS"


@dataclass(frozen=True)
class CurrencyTables:
    """Rate, symbol and locale lookups keyed by currency code.

    Built once at startup and never mutated.
    """
    rates: Mapping[CurrencyCode, float]
    symbols: Mapping[CurrencyCode, str]
    locales: Mapping[CurrencyCode, str]
    unit_name: str = "Robux"
    default_locale: str = "en_US"

    @classmethod
    def build(
        cls,
        rates: Mapping[CurrencyCode, float],
        symbols: Mapping[CurrencyCode, str],
        locales: Mapping[CurrencyCode, str],
        unit_name: str = "Robux",
        default_locale: str = "en_US"
    ) -> "CurrencyTables":
        """Create tables wrapped in read-only mapping proxies."""
        return cls(
            rates=MappingProxyType(dict(rates)),
            symbols=MappingProxyType(dict(symbols)),
            locales=MappingProxyType(dict(locales)),
            unit_name=unit_name,
            default_locale=default_locale,
        )

    @property
    def codes(self) -> tuple[CurrencyCode, ...]:
        """Codes in selector order."""
        return tuple(self.rates)
