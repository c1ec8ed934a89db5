"""Robux to real currency conversion"""


def convert(quantity: float, rate: float) -> float:
    """
    Convert a Robux quantity at the given DevEx rate.

    No rounding is applied; precision is left to the formatters.
    """
    return quantity * rate
