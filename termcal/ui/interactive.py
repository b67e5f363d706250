"""Interactive UI controller for calendar navigation."""

import logging
from datetime import date
from typing import TYPE_CHECKING, Any, NamedTuple, Optional

from ..calendar.grid import SUNDAY
from ..calendar.state import (
    CalendarState,
    Command,
    initial_state,
    is_terminal,
    jump_to_date,
    transition,
)
from ..config.settings import DisplaySettings, LoggingSettings
from ..display.console_renderer import ConsoleRenderer
from .help import HelpView
from .keyboard import KeyboardHandler
from .keymap import KeyMap

if TYPE_CHECKING:
    from ..config.settings import TermCalSettings
    from ..display.renderer_protocol import ConsoleRendererProtocol

logger = logging.getLogger(__name__)


class CommandOutcome(NamedTuple):
    """Result of dispatching one command."""

    view: str
    should_quit: bool


class InteractiveController:
    """Controls interactive calendar navigation UI.

    Owns the calendar state, the key map and the help view. Every key press
    is mapped to at most one command, applied to the state, and the month
    view is redrawn.
    """

    def __init__(
        self,
        settings: Optional["TermCalSettings"] = None,
        renderer: Optional["ConsoleRendererProtocol"] = None,
        keyboard: Optional[KeyboardHandler] = None,
        keymap: Optional[KeyMap] = None,
        today: Optional[date] = None,
    ) -> None:
        """Initialize interactive controller.

        Args:
            settings: Application settings, defaults are used when omitted
            renderer: Console renderer, built from the display settings if omitted
            keyboard: Keyboard handler, a new one reading stdin if omitted
            keymap: Key bindings, the default bindings if omitted
            today: Fixed date for startup and the TODAY command
        """
        self.display_settings = settings.display if settings is not None else DisplaySettings()
        self.logging_settings = settings.logging if settings is not None else LoggingSettings()
        week_start = settings.week_start_index if settings is not None else SUNDAY

        self.renderer = renderer or ConsoleRenderer(self.display_settings)
        self.keymap = keymap or KeyMap()
        self.help_view = HelpView(self.keymap)
        self.keyboard = keyboard or KeyboardHandler()

        self._today = today
        self.state: CalendarState = initial_state(today, week_start=week_start)
        self._running = False

        self.keyboard.register_key_handler(self._on_key)

        logger.info("Interactive controller initialized")

    def handle_command(self, command: Command) -> CommandOutcome:
        """Apply ``command`` and render the resulting view.

        Args:
            command: Command to apply

        Returns:
            Rendered view and whether the host should stop
        """
        if command is Command.TOGGLE_HELP:
            show_all = self.help_view.toggle()
            logger.debug(f"Full help {'shown' if show_all else 'hidden'}")

        self.state = transition(self.state, command, today=self._today)
        return CommandOutcome(self.render_view(), is_terminal(command))

    def handle_key(self, key_name: str) -> Optional[CommandOutcome]:
        """Dispatch a key name; unbound keys return None and change nothing."""
        command = self.keymap.command_for(key_name)
        if command is None:
            logger.debug(f"Ignoring unbound key {key_name!r}")
            return None
        return self.handle_command(command)

    def render_view(self) -> str:
        """Render the current state with the help text if enabled."""
        help_text = self.help_view.render() if self.display_settings.show_help else None
        return self.renderer.render_calendar(self.state, help_text)

    async def _on_key(self, key_name: str) -> None:
        outcome = self.handle_key(key_name)
        if outcome is None:
            return

        if outcome.should_quit:
            logger.info("User requested exit from interactive mode")
            await self.stop()
            return

        self.renderer.display_with_clear(outcome.view)

    async def start(self, initial_date: Optional[date] = None) -> None:
        """Run interactive mode until the user quits.

        Args:
            initial_date: Optional date to move the cursor to before the first draw
        """
        if self._running:
            logger.warning("Interactive controller already running")
            return

        self._running = True

        if initial_date:
            self.state = jump_to_date(self.state, initial_date)

        self._setup_split_display_logging()

        logger.info("Starting interactive calendar navigation")

        try:
            self.renderer.display_with_clear(self.render_view())
            await self.keyboard.start_listening()
        finally:
            self._running = False
            self._cleanup_split_display_logging()
            logger.info("Interactive mode stopped")

    async def stop(self) -> None:
        """Stop interactive mode."""
        self._running = False
        self.keyboard.stop_listening()
        logger.debug("Interactive controller stop requested")

    @property
    def is_running(self) -> bool:
        """Check if interactive controller is running."""
        return self._running

    @property
    def current_date(self) -> date:
        """Date under the cursor."""
        return self.state.cursor_date

    @property
    def selected_date(self) -> Optional[date]:
        """Last confirmed date, or None if nothing was selected."""
        return self.state.selection

    def get_navigation_state(self) -> dict[str, Any]:
        """Get current navigation state information.

        Returns:
            Navigation state dictionary
        """
        today = self._today or date.today()
        return {
            "year": self.state.year,
            "month": self.state.month,
            "cursor_date": self.state.cursor_date.isoformat(),
            "selected_date": self.state.selection.isoformat() if self.state.selection else None,
            "is_today": self.state.cursor_date == today,
            "week_start": self.state.week_start,
            "full_help": self.help_view.show_all,
        }

    def _setup_split_display_logging(self) -> None:
        """Reserve the log area under the calendar if enabled."""
        if not self.logging_settings.interactive_split_display:
            return
        if hasattr(self.renderer, "enable_split_display"):
            self.renderer.enable_split_display(
                max_log_lines=self.logging_settings.interactive_log_lines
            )
            logger.debug("Split display logging enabled for interactive mode")
        else:
            logger.debug("Split display logging not available for current renderer")

    def _cleanup_split_display_logging(self) -> None:
        """Release the log area when leaving interactive mode."""
        if hasattr(self.renderer, "disable_split_display"):
            self.renderer.disable_split_display()
            logger.debug("Split display logging disabled")
