"""
Result presenter.

Writes formatted strings into the display slots and toggles the result
container. Hiding only flips visibility; the slot text is left in place
and is always overwritten before the container is shown again.
"""

import structlog

from .conversion.formatting import format_rate
from .models.currency import CurrencyCode
from .state.models import AppState, DisplayState, DisplayTransition
from .ui.base import BaseWidgetSurface, DisplaySlot

logger = structlog.get_logger(__name__)


class ResultPresenter:
    """Applies display transitions and readouts to a UI surface."""

    def __init__(self, surface: BaseWidgetSurface, state: AppState):
        self.surface = surface
        self.state = state

    def refresh_readouts(self, code: CurrencyCode, rate: float, symbol: str) -> None:
        """Update the rate, code, symbol and currency labels."""
        self.surface.write_slot(DisplaySlot.RATE_DISPLAY, format_rate(rate))
        self.surface.write_slot(DisplaySlot.CURRENCY_CODE, code.value)
        self.surface.write_slot(DisplaySlot.RESULT_ICON, symbol)
        self.surface.write_slot(DisplaySlot.RESULT_CURRENCY, code.value)

    def apply(self, transition: DisplayTransition) -> None:
        """Render a transition: write the result and show, or hide."""
        result = transition.result

        if transition.new_state == DisplayState.SHOWN and result is not None:
            self.surface.write_slot(DisplaySlot.RESULT_VALUE, result.localized_value)
            self.surface.write_slot(DisplaySlot.RESULT_ICON, result.symbol)
            self.surface.write_slot(DisplaySlot.RESULT_CURRENCY, result.code.value)
            self.surface.write_slot(DisplaySlot.RESULT_DETAIL, result.detail)
            self.surface.set_result_visible(True)
            self.state.display = DisplayState.SHOWN

            logger.debug(
                "Result rendered",
                trigger=transition.trigger.value,
                detail=result.detail
            )
        else:
            self.surface.set_result_visible(False)
            self.state.display = DisplayState.HIDDEN
