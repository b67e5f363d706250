"""Console-based month view renderer with split log display support."""

import logging
import sys
from typing import TYPE_CHECKING, Any, Dict, List, Optional, TextIO

from ..calendar.grid import month_name, weekday_names
from ..utils.helpers import secure_clear_screen, supports_color

if TYPE_CHECKING:
    from ..calendar.state import CalendarState
    from ..config.settings import DisplaySettings

logger = logging.getLogger(__name__)

# ANSI styles for emphasized cells
CURSOR_STYLE = "\033[1;7m"  # bold, reverse video
SELECTION_STYLE = "\033[1;32m"  # bold green
CURSOR_ON_SELECTION_STYLE = "\033[1;7;32m"
RESET = "\033[0m"

CLEAR_SEQUENCE = "\033[H\033[2J"

# Tallest month (31 days starting on the last column)
MAX_WEEK_ROWS = 6
DEFAULT_COLUMN_WIDTH = 4


class ConsoleRenderer:
    """Renders a calendar state as a text month grid."""

    def __init__(
        self,
        settings: Optional["DisplaySettings"] = None,
        stream: Optional[TextIO] = None,
    ) -> None:
        """Initialize console renderer.

        Args:
            settings: Display settings, defaults are used when omitted
            stream: Output stream for display methods, defaults to sys.stdout
        """
        self.stream = stream or sys.stdout

        colors = settings.colors if settings is not None else None
        self.use_colors = supports_color(self.stream) if colors is None else colors
        self.column_width = settings.column_width if settings is not None else DEFAULT_COLUMN_WIDTH
        self.fixed_height = settings.fixed_height if settings is not None else False
        self.show_status = settings.show_status if settings is not None else True

        self.width = self.column_width * 7
        self.log_area_lines: List[str] = []
        self.log_area_enabled = False
        self.max_log_lines = 0

        logger.debug(
            f"Console renderer initialized (colors={self.use_colors}, "
            f"column_width={self.column_width})"
        )

    def render_calendar(self, state: "CalendarState", help_text: Optional[str] = None) -> str:
        """Render the month view for ``state``.

        Layout: centered title, weekday header, one line per week row,
        then optional status and help lines.

        Args:
            state: State to draw
            help_text: Optional key binding help

        Returns:
            Formatted calendar text
        """
        lines = [
            self._render_title(state),
            self._render_weekday_header(state),
        ]

        for row in state.grid:
            lines.append(self._render_week(state, row))

        if self.fixed_height:
            lines.extend([""] * (MAX_WEEK_ROWS - len(state.grid)))

        if self.show_status:
            lines.append("")
            lines.append(self._render_status(state))

        if help_text:
            lines.append("")
            lines.append(help_text)

        return "\n".join(lines)

    def _render_title(self, state: "CalendarState") -> str:
        title = f"{month_name(state.month)} {state.year}"
        return title.center(self.width).rstrip()

    def _render_weekday_header(self, state: "CalendarState") -> str:
        cells = [
            abbr.rjust(self.column_width - 1) + " " for abbr in weekday_names(state.week_start)
        ]
        return "".join(cells).rstrip()

    def _render_week(self, state: "CalendarState", row: tuple) -> str:
        return "".join(self._render_cell(state, day) for day in row).rstrip()

    def _render_cell(self, state: "CalendarState", day: Optional[int]) -> str:
        """Render one day cell at exactly ``column_width`` visible characters."""
        if day is None:
            return " " * self.column_width

        digits = str(day).rjust(self.column_width - 2)
        is_cursor = day == state.day
        is_selected = state.is_selected(day)

        if self.use_colors:
            if is_cursor and is_selected:
                digits = f"{CURSOR_ON_SELECTION_STYLE}{digits}{RESET}"
            elif is_cursor:
                digits = f"{CURSOR_STYLE}{digits}{RESET}"
            elif is_selected:
                digits = f"{SELECTION_STYLE}{digits}{RESET}"
            return f" {digits} "

        if is_cursor:
            return f"[{digits}]"
        if is_selected:
            return f"({digits})"
        return f" {digits} "

    def _render_status(self, state: "CalendarState") -> str:
        cursor = state.cursor_date.strftime("%a %Y-%m-%d")
        selection = state.selection.isoformat() if state.selection else "none"
        return f"Cursor: {cursor} | Selected: {selection}"

    def clear_screen(self) -> bool:
        """Clear the console screen.

        Returns:
            True if screen was cleared successfully, False otherwise
        """
        if self.use_colors:
            self.stream.write(CLEAR_SEQUENCE)
            self.stream.flush()
            return True
        return secure_clear_screen()

    def display_with_clear(self, content: str) -> None:
        """Display content after clearing screen, followed by the log area.

        Args:
            content: Content to display
        """
        self.clear_screen()
        self.stream.write(content + "\n")

        if self.log_area_enabled and self.log_area_lines:
            self.stream.write("-" * self.width + "\n")
            for log_line in self.log_area_lines:
                self.stream.write(f"{log_line}\n")

        self.stream.flush()

    def enable_split_display(self, max_log_lines: int = 5) -> None:
        """Enable split display mode for interactive logging.

        Args:
            max_log_lines: Maximum number of log lines to show
        """
        self.log_area_enabled = True
        self.max_log_lines = max_log_lines
        self.log_area_lines = []

    def disable_split_display(self) -> None:
        """Disable split display mode."""
        self.log_area_enabled = False
        self.log_area_lines = []

    def update_log_area(self, log_lines: List[str]) -> None:
        """Update the reserved log area with new log lines.

        Args:
            log_lines: List of formatted log messages
        """
        if not self.log_area_enabled:
            return

        self.log_area_lines = log_lines[-self.max_log_lines :] if log_lines else []

    def get_log_area_status(self) -> Dict[str, Any]:
        """Get current log area status information."""
        return {
            "enabled": self.log_area_enabled,
            "max_lines": self.max_log_lines,
            "current_lines": len(self.log_area_lines),
            "log_content": self.log_area_lines.copy(),
        }
