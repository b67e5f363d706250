"""Month grid construction for the proleptic Gregorian calendar.

The grid is a tuple of week rows, each holding seven optional day numbers.
Leading cells before the 1st and trailing cells after the last day are
``None``. Grids are pure values derived from ``(year, month, week_start)``
and are never patched in place.
"""

import calendar
from typing import Optional, Tuple

# Weekday indices as used by the grid (Sunday-based, 0=Sunday..6=Saturday)
SUNDAY = 0
MONDAY = 1

DAYS_PER_WEEK = 7
MIN_YEAR = 1
MAX_YEAR = 9999

WEEKDAY_ABBR = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

GridRow = Tuple[Optional[int], ...]
Grid = Tuple[GridRow, ...]


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"Month must be in 1..12, got {month}")


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years.

    Divisible by 4, except centuries that are not divisible by 400.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in the given month.

    Args:
        year: Calendar year
        month: Month number (1-12)

    Returns:
        Day count, 28-31

    Raises:
        ValueError: If month is outside 1..12
    """
    _check_month(month)
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def weekday_of(year: int, month: int, day: int) -> int:
    """Return the Sunday-based weekday (0=Sunday..6=Saturday) of a date."""
    # calendar.weekday() is Monday-based (0=Monday)
    return (calendar.weekday(year, month, day) + 1) % DAYS_PER_WEEK


def first_weekday(year: int, month: int, week_start: int = SUNDAY) -> int:
    """Return the column index of the 1st of the month.

    Args:
        year: Calendar year
        month: Month number (1-12)
        week_start: Sunday-based weekday shown in the first column

    Returns:
        Column index 0-6; with the default Sunday start this is the
        weekday itself (0=Sunday..6=Saturday)
    """
    _check_month(month)
    return (weekday_of(year, month, 1) - week_start) % DAYS_PER_WEEK


def row_count(year: int, month: int, week_start: int = SUNDAY) -> int:
    """Return how many week rows the month occupies (4, 5 or 6)."""
    cells = first_weekday(year, month, week_start) + days_in_month(year, month)
    return -(-cells // DAYS_PER_WEEK)


def build_grid(year: int, month: int, week_start: int = SUNDAY) -> Grid:
    """Lay out a month as rows of seven optional day numbers.

    Day ``d`` lands at linear position ``first_weekday + d - 1``; every
    other cell is ``None``.

    Example:
        >>> build_grid(2024, 2)[0]
        (None, None, None, None, 1, 2, 3)
    """
    offset = first_weekday(year, month, week_start)
    total_days = days_in_month(year, month)
    rows = row_count(year, month, week_start)

    cells: list = [None] * (rows * DAYS_PER_WEEK)
    for day in range(1, total_days + 1):
        cells[offset + day - 1] = day

    return tuple(
        tuple(cells[start : start + DAYS_PER_WEEK])
        for start in range(0, len(cells), DAYS_PER_WEEK)
    )


def locate_day(grid: Grid, day: int) -> Optional[Tuple[int, int]]:
    """Return the ``(row, column)`` holding ``day``, or None if absent."""
    for row_index, row in enumerate(grid):
        for col_index, value in enumerate(row):
            if value == day:
                return row_index, col_index
    return None


def weekday_names(week_start: int = SUNDAY) -> Tuple[str, ...]:
    """Return weekday abbreviations in column order."""
    return WEEKDAY_ABBR[week_start:] + WEEKDAY_ABBR[:week_start]


def month_name(month: int) -> str:
    """Return the English month name."""
    _check_month(month)
    return MONTH_NAMES[month]


def parse_week_start(value: str) -> int:
    """Convert a configured week start name into a weekday index.

    Raises:
        ValueError: If the name is not ``sunday`` or ``monday``
    """
    normalized = value.strip().lower()
    if normalized == "sunday":
        return SUNDAY
    if normalized == "monday":
        return MONDAY
    raise ValueError(f"Unsupported week start: {value!r} (expected 'sunday' or 'monday')")
