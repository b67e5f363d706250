"""Display package for calendar output."""

from .console_renderer import ConsoleRenderer
from .renderer_protocol import (
    CalendarRendererProtocol,
    ConsoleRendererProtocol,
    SplitDisplayRenderer,
)

__all__ = [
    "CalendarRendererProtocol",
    "ConsoleRenderer",
    "ConsoleRendererProtocol",
    "SplitDisplayRenderer",
]
