"""UI surface adapters: the boundary between the pipeline and a host UI"""

from .base import BaseWidgetSurface, DisplaySlot, UIEvent
from .console import ConsoleSurface
from .memory import InMemorySurface

__all__ = [
    "BaseWidgetSurface",
    "DisplaySlot",
    "UIEvent",
    "InMemorySurface",
    "ConsoleSurface",
]
