"""
Trigger wiring between UI events and the calculation pipeline.

Every trigger converges on the widget's pipeline entry points and runs
synchronously; nothing is debounced, queued or rate-limited.
"""

from typing import TYPE_CHECKING, Any

from .conversion.quantity import is_cleared, read_quantity
from .state.models import DisplayTrigger
from .ui.base import BaseWidgetSurface, UIEvent

if TYPE_CHECKING:
    from .engine import DevExWidget

ENTER_KEY = "Enter"


class TriggerDispatcher:
    """Binds widget handlers to the events of a UI surface."""

    def __init__(self, widget: "DevExWidget"):
        self.widget = widget

    @property
    def surface(self) -> BaseWidgetSurface:
        return self.widget.surface

    def wire(self) -> None:
        """Register all triggers on the widget's surface."""
        self.surface.bind(UIEvent.SELECTION_CHANGE, self.on_selection_change)
        self.surface.bind(UIEvent.ACTIVATE, self.on_activate)
        self.surface.bind(UIEvent.KEY_PRESS, self.on_key_press)
        self.surface.bind(UIEvent.INPUT, self.on_input)
        self.surface.bind(UIEvent.BLUR, self.on_blur)

    def on_selection_change(self, **_: Any) -> None:
        self.widget.change_selection(self.surface.read_selected_code())

    def on_activate(self, **_: Any) -> None:
        self.widget.perform_calculation(DisplayTrigger.ACTIVATE)

    def on_key_press(self, key: str = "", **_: Any) -> None:
        if key == ENTER_KEY:
            self.widget.perform_calculation(DisplayTrigger.ENTER_KEY)

    def on_input(self, **_: Any) -> None:
        """Live recalculation: positive quantities render, anything else hides."""
        if read_quantity(self.surface.read_quantity_text()) > 0:
            self.widget.perform_calculation(DisplayTrigger.INPUT)
        else:
            self.widget.hide_result(DisplayTrigger.INPUT)

    def on_blur(self, **_: Any) -> None:
        if is_cleared(self.surface.read_quantity_text()):
            self.widget.hide_result(DisplayTrigger.BLUR)
