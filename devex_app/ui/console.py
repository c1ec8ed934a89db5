"""Text console UI surface."""

import sys
from typing import Any, Optional, TextIO

from .base import DisplaySlot, UIEvent
from .memory import InMemorySurface


class ConsoleSurface(InMemorySurface):
    """In-memory surface that re-renders to a text stream after each event."""

    def __init__(self, stream: Optional[TextIO] = None, quantity_text: str = "",
                 selected_code: str = "USD"):
        super().__init__("console", quantity_text=quantity_text,
                         selected_code=selected_code)
        self.stream = stream or sys.stdout

    def dispatch(self, event: UIEvent, **payload: Any) -> None:
        super().dispatch(event, **payload)
        self.render()

    def render(self) -> None:
        """Write the rate readout and, when visible, the result block."""
        lines = [
            f"Rate: 1 Robux = {self.slot(DisplaySlot.RATE_DISPLAY) or '-'} "
            f"{self.slot(DisplaySlot.CURRENCY_CODE) or ''}".rstrip()
        ]
        if self.result_visible:
            lines.append(
                f"  {self.slot(DisplaySlot.RESULT_ICON) or ''} "
                f"{self.slot(DisplaySlot.RESULT_VALUE) or ''} "
                f"{self.slot(DisplaySlot.RESULT_CURRENCY) or ''}".rstrip()
            )
            lines.append(f"  {self.slot(DisplaySlot.RESULT_DETAIL) or ''}")

        print("\n".join(lines), file=self.stream, flush=True)
