"""
Display state and selection state module.

Manages the result container's Hidden/Shown state machine and the
application state holding the selected currency.
"""
