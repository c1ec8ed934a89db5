"""Rate and symbol lookups for the selected currency"""

from typing import Union

from ..errors import UnknownCurrencyError
from ..models.currency import CurrencyCode, CurrencyTables
from .formatting import resolve_format_locale


def to_currency_code(code: Union[str, CurrencyCode]) -> CurrencyCode:
    """
    Coerce a selector value into a CurrencyCode.

    Raises:
        UnknownCurrencyError: if the value is not an offered currency
    """
    if isinstance(code, CurrencyCode):
        return code
    try:
        return CurrencyCode(code)
    except ValueError as e:
        raise UnknownCurrencyError(
            f"Currency code {code!r} is not configured",
            code=str(code),
        ) from e


class RateResolver:
    """Resolves rate, symbol and formatting locale for a currency code.

    Rate and symbol lookups never fall back: a code missing from the tables
    is a configuration defect and raises UnknownCurrencyError.
    """

    def __init__(self, tables: CurrencyTables):
        self.tables = tables

    def resolve_rate(self, code: Union[str, CurrencyCode]) -> float:
        return self._lookup(self.tables.rates, code)

    def resolve_symbol(self, code: Union[str, CurrencyCode]) -> str:
        return self._lookup(self.tables.symbols, code)

    def resolve_locale(self, code: Union[str, CurrencyCode]) -> str:
        """Formatting locale for the code, or the default locale if unmapped."""
        return resolve_format_locale(code, self.tables.locales, self.tables.default_locale)

    def _lookup(self, table, code):
        currency = to_currency_code(code)
        try:
            return table[currency]
        except KeyError as e:
            raise UnknownCurrencyError(
                f"Currency code {currency.value} has no table entry",
                code=currency.value,
            ) from e
