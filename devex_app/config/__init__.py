"""
Configuration module.

Default currency tables, YAML overrides and table validation.
"""
