"""
State data models for the conversion widget.

This module defines the display state machine states, the triggers that
drive it, the application state holding the currency selection, and the
immutable result of a single calculation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.currency import CurrencyCode


class DisplayState(str, Enum):
    """Visibility of the result container."""
    HIDDEN = "hidden"
    SHOWN = "shown"


class DisplayTrigger(str, Enum):
    """UI events that run the calculation pipeline."""
    STARTUP = "startup"
    ACTIVATE = "activate"
    ENTER_KEY = "enter_key"
    INPUT = "input"
    BLUR = "blur"
    SELECTION_CHANGE = "selection_change"


@dataclass(frozen=True)
class DisplayResult:
    """Everything rendered for one calculation. Recomputed on every trigger."""

    # Inputs
    quantity: float
    code: CurrencyCode
    rate: float
    symbol: str

    # Conversion output
    converted: float

    # Rendered strings
    fixed_value: str                                 # "0.38"
    localized_value: str                             # "0,38" in pt_BR
    grouped_quantity: str                            # "1,000"
    detail: str                                      # "100 Robux = $0.38 USD"


@dataclass(frozen=True)
class DisplayTransition:
    """Represents a display state machine transition result."""
    new_state: DisplayState
    trigger: DisplayTrigger
    result: Optional[DisplayResult] = None


@dataclass
class AppState:
    """Mutable widget state: the selected currency and display visibility.

    Only the selection handler calls select(); only the presenter sets
    the display state.
    """
    selected: CurrencyCode = CurrencyCode.USD
    display: DisplayState = DisplayState.HIDDEN

    def select(self, code: CurrencyCode) -> CurrencyCode:
        """Update the selection and return the previous code."""
        previous = self.selected
        self.selected = code
        return previous
