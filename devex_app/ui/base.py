"""Base classes for UI surfaces the widget reads from and writes to."""

from abc import ABC, abstractmethod
from collections import defaultdict
from enum import Enum
from typing import Any, Callable

from ..logging.config import get_logger


class UIEvent(str, Enum):
    """Events raised by the host UI."""
    SELECTION_CHANGE = "change"
    ACTIVATE = "click"
    KEY_PRESS = "keypress"
    INPUT = "input"
    BLUR = "blur"


class DisplaySlot(str, Enum):
    """Writable display elements."""
    RESULT_VALUE = "result-value"
    RESULT_DETAIL = "result-detail"
    RATE_DISPLAY = "rate-display"
    CURRENCY_CODE = "currency-code"
    RESULT_ICON = "result-icon"
    RESULT_CURRENCY = "result-currency"


EventHandler = Callable[..., Any]


class BaseWidgetSurface(ABC):
    """Base class for UI surfaces.

    Subclasses adapt a concrete UI: they expose the quantity input text and
    the selector value, accept writes to display slots, and toggle the result
    container. Event binding and synchronous dispatch are shared.
    """

    def __init__(self, name: str):
        self.name = name
        self.logger = get_logger(f"devex_app.ui.{name}")
        self._handlers: dict[UIEvent, list[EventHandler]] = defaultdict(list)

    @abstractmethod
    def read_quantity_text(self) -> str:
        """Raw text of the quantity input."""
        pass

    @abstractmethod
    def read_selected_code(self) -> str:
        """Value of the currency selector."""
        pass

    @abstractmethod
    def write_slot(self, slot: DisplaySlot, text: str) -> None:
        """Replace the text of a display slot."""
        pass

    @abstractmethod
    def set_result_visible(self, visible: bool) -> None:
        """Show or hide the result container."""
        pass

    def bind(self, event: UIEvent, handler: EventHandler) -> None:
        """Register a handler for an event. Handlers run in binding order."""
        self._handlers[event].append(handler)

    def unbind_all(self) -> None:
        self._handlers.clear()

    def dispatch(self, event: UIEvent, **payload: Any) -> None:
        """
        Run every handler bound to an event to completion.

        Args:
            event: Event raised by the UI
            **payload: Event details passed to each handler (e.g. key="Enter")
        """
        handlers = self._handlers.get(event, [])
        self.logger.debug(
            "Dispatching UI event",
            surface=self.name,
            ui_event=event.value,
            handlers=len(handlers),
            payload=payload or None
        )
        for handler in list(handlers):
            handler(**payload)
