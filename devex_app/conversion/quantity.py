"""Quantity input parsing"""

import math
import re
from typing import Optional

# Optional sign, digits with optional fraction, optional exponent
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def read_quantity(raw: Optional[str]) -> float:
    """
    Parse the raw text of the quantity input.

    Invalid input is not an error: empty, non-numeric, negative and
    non-finite values all normalize to 0.0, which downstream means
    "nothing to calculate".

    Args:
        raw: Text currently held by the quantity input

    Returns:
        Parsed non-negative quantity, or 0.0
    """
    if raw is None:
        return 0.0

    text = raw.strip()
    if not _NUMBER_RE.fullmatch(text):
        return 0.0

    value = float(text)
    if not math.isfinite(value) or value <= 0:
        return 0.0

    return value


def is_cleared(raw: Optional[str]) -> bool:
    """True when the field is empty or holds the literal zero."""
    return raw is None or raw == "" or raw == "0"
