"""Headless in-memory UI surface."""

from typing import Optional

from .base import BaseWidgetSurface, DisplaySlot, UIEvent


class InMemorySurface(BaseWidgetSurface):
    """UI surface backed by plain attributes.

    Records every slot write so callers can inspect what was rendered.
    The user-action helpers update the element state first and then
    dispatch the matching event, as a browser would.
    """

    def __init__(self, name: str = "memory", quantity_text: str = "",
                 selected_code: str = "USD"):
        super().__init__(name)
        self.quantity_text = quantity_text
        self.selected_code = selected_code
        self.slots: dict[DisplaySlot, str] = {}
        self.result_visible = False
        self.writes: list[tuple[DisplaySlot, str]] = []

    def read_quantity_text(self) -> str:
        return self.quantity_text

    def read_selected_code(self) -> str:
        return self.selected_code

    def write_slot(self, slot: DisplaySlot, text: str) -> None:
        self.slots[slot] = text
        self.writes.append((slot, text))

    def set_result_visible(self, visible: bool) -> None:
        self.result_visible = visible

    def slot(self, slot: DisplaySlot) -> Optional[str]:
        return self.slots.get(slot)

    # User actions

    def type_text(self, text: str) -> None:
        """Replace the input contents, firing one input event."""
        self.quantity_text = text
        self.dispatch(UIEvent.INPUT)

    def press_key(self, key: str) -> None:
        self.dispatch(UIEvent.KEY_PRESS, key=key)

    def click_calculate(self) -> None:
        self.dispatch(UIEvent.ACTIVATE)

    def blur(self) -> None:
        self.dispatch(UIEvent.BLUR)

    def select_currency(self, code: str) -> None:
        self.selected_code = code
        self.dispatch(UIEvent.SELECTION_CHANGE)
