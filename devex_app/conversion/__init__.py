"""Conversion pipeline: input reading, rate lookup, conversion and formatting"""

from .converter import convert
from .formatting import (
    compose_detail,
    format_fixed,
    format_localized,
    format_quantity_grouped,
    format_rate,
)
from .quantity import read_quantity
from .rates import RateResolver

__all__ = [
    "RateResolver",
    "read_quantity",
    "convert",
    "format_fixed",
    "format_localized",
    "format_quantity_grouped",
    "format_rate",
    "compose_detail",
]
