"""Renderer protocol interface for type consistency."""

from typing import TYPE_CHECKING, List, Optional, Protocol

if TYPE_CHECKING:
    from ..calendar.state import CalendarState


class CalendarRendererProtocol(Protocol):
    """Protocol defining the interface that all calendar renderers implement."""

    def render_calendar(self, state: "CalendarState", help_text: Optional[str] = None) -> str:
        """Render a calendar state to text.

        Args:
            state: State to draw
            help_text: Optional key binding help shown under the grid

        Returns:
            Formatted string for display
        """
        ...


class SplitDisplayRenderer(Protocol):
    """Renderer that can show recent log lines beside its main content."""

    def update_log_area(self, log_lines: List[str]) -> None:
        """Update the reserved log area with new log lines."""
        ...


class ConsoleRendererProtocol(CalendarRendererProtocol, SplitDisplayRenderer, Protocol):
    """Extended protocol for console renderers used by the interactive host."""

    def clear_screen(self) -> bool:
        """Clear the console screen."""
        ...

    def display_with_clear(self, content: str) -> None:
        """Display content after clearing screen.

        Args:
            content: Content to display
        """
        ...

    def enable_split_display(self, max_log_lines: int = 5) -> None:
        """Enable split display mode for interactive logging.

        Args:
            max_log_lines: Maximum number of log lines to show
        """
        ...

    def disable_split_display(self) -> None:
        """Disable split display mode."""
        ...
