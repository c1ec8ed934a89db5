"""
DevEx Calculator - Robux to real currency conversion widget

Converts a user-entered quantity of Robux into a monetary value in a
selected real-world currency using fixed DevEx rates, and renders the
result with currency symbol and locale-aware number formatting.
"""

__version__ = "0.1.0"
__author__ = "DevEx Calculator Team"
