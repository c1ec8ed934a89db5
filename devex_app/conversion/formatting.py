"""
Number formatting for conversion results.

All rounding is round-half-away-from-zero applied to the shortest decimal
representation of the float, so 1.005 renders as "1.01" rather than the
"1.00" a binary-exact rounding would give. Locale-aware output uses Babel
and the CLDR grouping and decimal conventions of each locale.
"""

from decimal import ROUND_HALF_UP, Context, Decimal, localcontext
from functools import lru_cache
from typing import Mapping, Optional, Union

from babel import Locale
from babel.numbers import format_decimal

from ..config.defaults import DisplayParams, get_default_config
from ..models.currency import CurrencyCode

DEFAULT_LOCALE = DisplayParams().default_locale

# Wide enough for any finite float quantized to a few decimal places
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)


def _to_decimal(value: float, places: int) -> Decimal:
    exponent = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(exponent, context=_CONTEXT)


@lru_cache(maxsize=None)
def _fixed_pattern(locale: str, places: int) -> str:
    """The locale's decimal pattern with exactly `places` fraction digits."""
    base = Locale.parse(locale).decimal_formats[None].pattern
    integer_part = base.split(";")[0].split(".")[0]
    if places == 0:
        return integer_part
    return f"{integer_part}.{'0' * places}"


@lru_cache(maxsize=1)
def _default_locales() -> dict[CurrencyCode, str]:
    return {
        CurrencyCode(code): params.locale
        for code, params in get_default_config().currencies.items()
    }


def resolve_format_locale(
    code: Union[str, CurrencyCode],
    locales: Mapping[CurrencyCode, str],
    default_locale: str = DEFAULT_LOCALE
) -> str:
    """Locale used to format amounts in `code`, or the default locale."""
    try:
        currency = CurrencyCode(code)
    except ValueError:
        return default_locale
    return locales.get(currency, default_locale)


def format_fixed(value: float, places: int = 2) -> str:
    """
    Format a value as a fixed-point string.

    Args:
        value: Value to format
        places: Number of decimal places (default 2)

    Returns:
        Fixed-point string without grouping (ex: "3.50")
    """
    return format(_to_decimal(value, places), "f")


def format_rate(rate: float) -> str:
    """Format a conversion rate for the rate readout (ex: "0.0038")."""
    return format_fixed(rate, places=4)


def format_localized(
    value: float,
    code: Union[str, CurrencyCode],
    locales: Optional[Mapping[CurrencyCode, str]] = None,
    default_locale: str = DEFAULT_LOCALE
) -> str:
    """
    Format a value with two decimals in the locale of a currency.

    Args:
        value: Converted value
        code: Currency code selecting the formatting locale
        locales: Currency to locale mapping (defaults to the built-in table)
        default_locale: Locale used when the code is unmapped

    Returns:
        Locale-formatted string (ex: "1.234,50" for EUR)
    """
    if locales is None:
        locales = _default_locales()

    locale = resolve_format_locale(code, locales, default_locale)

    with localcontext(_CONTEXT):
        return format_decimal(_to_decimal(value, 2), format=_fixed_pattern(locale, 2), locale=locale)


def format_quantity_grouped(quantity: float, locale: str = DEFAULT_LOCALE) -> str:
    """Thousands-grouped Robux quantity with up to three fraction digits."""
    with localcontext(_CONTEXT):
        return format_decimal(_to_decimal(quantity, 3), locale=locale)


def compose_detail(
    grouped_quantity: str,
    unit_name: str,
    symbol: str,
    fixed_value: str,
    code: Union[str, CurrencyCode]
) -> str:
    """Human-readable detail line, e.g. "100 Robux = $0.38 USD"."""
    code_text = code.value if isinstance(code, CurrencyCode) else code
    return f"{grouped_quantity} {unit_name} = {symbol}{fixed_value} {code_text}"
