"""Calendar state container and navigation transitions."""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from .grid import (
    MAX_YEAR,
    MIN_YEAR,
    SUNDAY,
    Grid,
    build_grid,
    days_in_month,
    first_weekday,
    locate_day,
)

logger = logging.getLogger(__name__)


class Command(Enum):
    """Discrete navigation commands delivered by the host."""

    NEXT_MONTH = "next_month"
    PREV_MONTH = "prev_month"
    NEXT_DAY = "next_day"
    PREV_DAY = "prev_day"
    NEXT_WEEK = "next_week"
    PREV_WEEK = "prev_week"
    SELECT_DAY = "select_day"
    TODAY = "today"
    WEEK_START = "week_start"
    WEEK_END = "week_end"
    TOGGLE_HELP = "toggle_help"
    QUIT = "quit"


class CalendarView(Enum):
    """Calendar view modes. Only the month view is implemented."""

    MONTH = "month"


@dataclass(frozen=True)
class CalendarState:
    """Immutable calendar state.

    ``day`` is the cursor and is clamped into the month on construction.
    ``selection`` is the last date confirmed with SELECT_DAY and may lie in
    another month. ``grid`` and ``days_in_month`` are derived from
    ``(year, month, week_start)`` every time a state is built.
    """

    year: int
    month: int
    day: int = 1
    selection: Optional[date] = None
    view: CalendarView = CalendarView.MONTH
    week_start: int = SUNDAY
    days_in_month: int = field(init=False, repr=False, compare=False)
    grid: Grid = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValueError(f"Year must be in {MIN_YEAR}..{MAX_YEAR}, got {self.year}")

        total_days = days_in_month(self.year, self.month)
        object.__setattr__(self, "day", min(max(self.day, 1), total_days))
        object.__setattr__(self, "days_in_month", total_days)
        object.__setattr__(self, "grid", build_grid(self.year, self.month, self.week_start))

    @property
    def cursor_date(self) -> date:
        """Date under the cursor."""
        return date(self.year, self.month, self.day)

    @property
    def first_weekday(self) -> int:
        """Column index of the 1st of the month."""
        return first_weekday(self.year, self.month, self.week_start)

    @property
    def cursor_position(self) -> Tuple[int, int]:
        """Grid ``(row, column)`` of the cursor."""
        position = locate_day(self.grid, self.day)
        # The grid holds every day of the month, so the cursor is always found
        assert position is not None
        return position

    def is_selected(self, day: int) -> bool:
        """Return True if ``day`` of the displayed month is the confirmed selection."""
        return self.selection == date(self.year, self.month, day)

    def has_selection_in_view(self) -> bool:
        """Return True if the confirmed selection falls in the displayed month."""
        return (
            self.selection is not None
            and self.selection.year == self.year
            and self.selection.month == self.month
        )


def initial_state(today: Optional[date] = None, week_start: int = SUNDAY) -> CalendarState:
    """Create the startup state with the cursor on ``today``.

    Args:
        today: Starting date, defaults to the host clock
        week_start: Sunday-based weekday shown in the first column

    Returns:
        New calendar state with no confirmed selection
    """
    today = today or date.today()
    state = CalendarState(year=today.year, month=today.month, day=today.day, week_start=week_start)
    logger.debug(f"Calendar state initialized at {state.cursor_date}")
    return state


def next_month(state: CalendarState) -> CalendarState:
    """Advance one month, rolling December into January of the next year."""
    if state.month == 12:
        if state.year == MAX_YEAR:
            return state
        return replace(state, year=state.year + 1, month=1)
    return replace(state, month=state.month + 1)


def prev_month(state: CalendarState) -> CalendarState:
    """Go back one month, rolling January into December of the previous year."""
    if state.month == 1:
        if state.year == MIN_YEAR:
            return state
        return replace(state, year=state.year - 1, month=12)
    return replace(state, month=state.month - 1)


def jump_to_date(state: CalendarState, target: date) -> CalendarState:
    """Move the view and cursor to ``target``, keeping the selection."""
    return replace(state, year=target.year, month=target.month, day=target.day)


def shift_days(state: CalendarState, days: int) -> CalendarState:
    """Move the cursor by ``days``, rolling into adjacent months as needed.

    Movement saturates at the first and last representable dates.
    """
    try:
        target = state.cursor_date + timedelta(days=days)
    except OverflowError:
        target = date.max if days > 0 else date.min
    return jump_to_date(state, target)


def select_day(state: CalendarState) -> CalendarState:
    """Commit the cursor date as the confirmed selection."""
    return replace(state, selection=state.cursor_date)


def jump_to_week_start(state: CalendarState) -> CalendarState:
    """Move the cursor to the first day of its grid row within the month."""
    row, _ = state.cursor_position
    first = next(day for day in state.grid[row] if day is not None)
    return replace(state, day=first)


def jump_to_week_end(state: CalendarState) -> CalendarState:
    """Move the cursor to the last day of its grid row within the month."""
    row, _ = state.cursor_position
    last = [day for day in state.grid[row] if day is not None][-1]
    return replace(state, day=last)


def _unchanged(state: CalendarState) -> CalendarState:
    return state


_TRANSITIONS: Dict[Command, Callable[[CalendarState], CalendarState]] = {
    Command.NEXT_MONTH: next_month,
    Command.PREV_MONTH: prev_month,
    Command.NEXT_DAY: lambda state: shift_days(state, 1),
    Command.PREV_DAY: lambda state: shift_days(state, -1),
    Command.NEXT_WEEK: lambda state: shift_days(state, 7),
    Command.PREV_WEEK: lambda state: shift_days(state, -7),
    Command.SELECT_DAY: select_day,
    Command.WEEK_START: jump_to_week_start,
    Command.WEEK_END: jump_to_week_end,
    Command.TOGGLE_HELP: _unchanged,
    Command.QUIT: _unchanged,
}


def transition(
    state: CalendarState, command: Command, today: Optional[date] = None
) -> CalendarState:
    """Apply one command and return the resulting state.

    Total over all commands: QUIT and TOGGLE_HELP leave the state untouched
    and are acted on by the host.

    Args:
        state: Current state
        command: Command to apply
        today: Date used by TODAY, defaults to the host clock

    Returns:
        New state (or ``state`` itself when nothing changes)
    """
    if command is Command.TODAY:
        new_state = jump_to_date(state, today or date.today())
    else:
        new_state = _TRANSITIONS[command](state)

    if new_state is not state:
        logger.debug(
            f"{command.value}: {state.cursor_date} -> {new_state.cursor_date} "
            f"(selection={new_state.selection})"
        )
    return new_state


def is_terminal(command: Command) -> bool:
    """Return True if the command ends the host loop."""
    return command is Command.QUIT
