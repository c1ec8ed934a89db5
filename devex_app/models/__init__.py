"""
Data models and contracts module.

Immutable data structures for currency codes and the currency tables
that drive conversion and formatting.
"""
