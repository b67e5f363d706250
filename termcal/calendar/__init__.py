"""Calendar grid layout and navigation state."""

from .grid import (
    MONDAY,
    SUNDAY,
    build_grid,
    days_in_month,
    first_weekday,
    is_leap_year,
    month_name,
    parse_week_start,
    weekday_names,
)
from .state import CalendarState, CalendarView, Command, initial_state, transition

__all__ = [
    "MONDAY",
    "SUNDAY",
    "CalendarState",
    "CalendarView",
    "Command",
    "build_grid",
    "days_in_month",
    "first_weekday",
    "initial_state",
    "is_leap_year",
    "month_name",
    "parse_week_start",
    "transition",
    "weekday_names",
]
