"""Unit tests for termcal.calendar.state."""

from dataclasses import FrozenInstanceError
from datetime import date

import pytest

from termcal.calendar.grid import MONDAY, SUNDAY
from termcal.calendar.state import (
    CalendarState,
    CalendarView,
    Command,
    initial_state,
    is_terminal,
    jump_to_date,
    next_month,
    prev_month,
    select_day,
    shift_days,
    transition,
)


class TestCalendarState:
    """Construction and derived fields."""

    def test_derived_fields(self):
        state = CalendarState(2024, 2, 10)

        assert state.days_in_month == 29
        assert state.first_weekday == 4
        assert state.grid[0] == (None, None, None, None, 1, 2, 3)
        assert state.view is CalendarView.MONTH
        assert state.selection is None

    def test_day_is_clamped(self):
        assert CalendarState(2023, 2, 31).day == 28
        assert CalendarState(2023, 2, 0).day == 1

    def test_invalid_year_raises(self):
        with pytest.raises(ValueError, match="Year must be in"):
            CalendarState(0, 1)
        with pytest.raises(ValueError, match="Year must be in"):
            CalendarState(10000, 1)

    def test_invalid_month_raises(self):
        with pytest.raises(ValueError):
            CalendarState(2024, 13)

    def test_state_is_immutable(self):
        state = CalendarState(2024, 2)
        with pytest.raises(FrozenInstanceError):
            state.day = 5  # type: ignore[misc]

    def test_equality_ignores_derived_fields(self):
        assert CalendarState(2024, 2, 3) == CalendarState(2024, 2, 3)

    def test_cursor_position(self):
        state = CalendarState(2024, 2, 29)
        assert state.cursor_position == (4, 4)

    def test_is_selected_and_view_membership(self):
        state = CalendarState(2024, 2, 10, selection=date(2024, 2, 14))

        assert state.is_selected(14) is True
        assert state.is_selected(10) is False
        assert state.has_selection_in_view() is True
        assert next_month(state).has_selection_in_view() is False


class TestInitialState:
    """Startup state."""

    def test_cursor_on_today(self, fixed_today):
        state = initial_state(fixed_today)

        assert (state.year, state.month, state.day) == (2026, 10, 18)
        assert state.selection is None
        assert state.week_start == SUNDAY

    def test_week_start_is_kept(self, fixed_today):
        assert initial_state(fixed_today, MONDAY).week_start == MONDAY

    def test_defaults_to_host_clock(self):
        today = date.today()
        state = initial_state()
        assert state.cursor_date == today


class TestMonthNavigation:
    """NEXT_MONTH and PREV_MONTH."""

    def test_next_month_rolls_year(self):
        state = transition(CalendarState(2024, 12, 5), Command.NEXT_MONTH)
        assert (state.year, state.month) == (2025, 1)

    def test_prev_month_rolls_year(self):
        state = transition(CalendarState(2024, 1, 5), Command.PREV_MONTH)
        assert (state.year, state.month) == (2023, 12)

    def test_cursor_clamped_into_shorter_month(self):
        state = transition(CalendarState(2024, 3, 31), Command.NEXT_MONTH)
        assert (state.month, state.day) == (4, 30)

    def test_cursor_clamped_into_february(self):
        state = transition(CalendarState(2024, 1, 31), Command.NEXT_MONTH)
        assert (state.month, state.day) == (2, 29)

    def test_february_2024_to_march(self):
        state = transition(CalendarState(2024, 2, 1), Command.NEXT_MONTH)

        assert (state.year, state.month) == (2024, 3)
        assert state.days_in_month == 31
        assert state.first_weekday == 5

    def test_next_then_prev_returns_to_month(self):
        start = CalendarState(2024, 6, 15)
        state = prev_month(next_month(start))
        assert state == start

    def test_navigation_saturates_at_range_edges(self):
        last = CalendarState(9999, 12, 31)
        first = CalendarState(1, 1, 1)

        assert next_month(last) is last
        assert prev_month(first) is first

    def test_month_change_keeps_selection(self):
        state = CalendarState(2024, 2, 10, selection=date(2024, 2, 14))
        assert next_month(state).selection == date(2024, 2, 14)


class TestDayNavigation:
    """Day and week movement with roll-over."""

    def test_next_day(self):
        state = transition(CalendarState(2024, 2, 10), Command.NEXT_DAY)
        assert state.cursor_date == date(2024, 2, 11)

    def test_next_day_rolls_into_next_month(self):
        state = transition(CalendarState(2024, 2, 29), Command.NEXT_DAY)
        assert state.cursor_date == date(2024, 3, 1)

    def test_prev_day_rolls_into_previous_year(self):
        state = transition(CalendarState(2024, 1, 1), Command.PREV_DAY)
        assert state.cursor_date == date(2023, 12, 31)

    def test_next_week(self):
        state = transition(CalendarState(2024, 2, 26), Command.NEXT_WEEK)
        assert state.cursor_date == date(2024, 3, 4)

    def test_prev_week(self):
        state = transition(CalendarState(2024, 3, 3), Command.PREV_WEEK)
        assert state.cursor_date == date(2024, 2, 25)

    def test_shift_saturates_at_max_date(self):
        state = shift_days(CalendarState(9999, 12, 30), 7)
        assert state.cursor_date == date(9999, 12, 31)

    def test_shift_saturates_at_min_date(self):
        state = shift_days(CalendarState(1, 1, 3), -7)
        assert state.cursor_date == date(1, 1, 1)

    def test_day_navigation_keeps_selection(self):
        state = CalendarState(2024, 2, 29, selection=date(2024, 2, 1))
        assert transition(state, Command.NEXT_DAY).selection == date(2024, 2, 1)


class TestSelection:
    """SELECT_DAY commits the cursor."""

    def test_select_day(self):
        state = transition(CalendarState(2024, 2, 14), Command.SELECT_DAY)
        assert state.selection == date(2024, 2, 14)

    def test_select_day_is_idempotent(self):
        once = select_day(CalendarState(2024, 2, 14))
        assert select_day(once) == once

    def test_reselect_replaces_previous_selection(self):
        state = select_day(CalendarState(2024, 2, 14))
        state = transition(state, Command.NEXT_MONTH)
        state = transition(state, Command.SELECT_DAY)
        assert state.selection == date(2024, 3, 14)


class TestJumps:
    """TODAY, WEEK_START and WEEK_END."""

    def test_today_jumps_to_given_date(self, fixed_today):
        state = transition(CalendarState(2000, 1, 1), Command.TODAY, today=fixed_today)
        assert state.cursor_date == fixed_today

    def test_today_keeps_selection(self, fixed_today):
        state = CalendarState(2000, 1, 1, selection=date(2000, 1, 2))
        assert transition(state, Command.TODAY, today=fixed_today).selection == date(2000, 1, 2)

    def test_week_start_within_month(self):
        state = transition(CalendarState(2024, 2, 14), Command.WEEK_START)
        assert state.day == 11

    def test_week_end_within_month(self):
        state = transition(CalendarState(2024, 2, 14), Command.WEEK_END)
        assert state.day == 17

    def test_week_start_stops_at_first_of_month(self):
        state = transition(CalendarState(2024, 2, 2), Command.WEEK_START)
        assert state.day == 1

    def test_week_end_stops_at_last_of_month(self):
        state = transition(CalendarState(2024, 2, 26), Command.WEEK_END)
        assert state.day == 29

    def test_week_jumps_follow_week_start(self):
        state = CalendarState(2024, 2, 14, week_start=MONDAY)

        assert transition(state, Command.WEEK_START).day == 12
        assert transition(state, Command.WEEK_END).day == 18

    def test_jump_to_date(self):
        state = jump_to_date(CalendarState(2024, 2, 14), date(1999, 12, 31))
        assert state.cursor_date == date(1999, 12, 31)


class TestTransition:
    """Totality of the transition function."""

    @pytest.mark.parametrize("command", [Command.QUIT, Command.TOGGLE_HELP])
    def test_host_commands_leave_state_unchanged(self, command):
        state = CalendarState(2024, 2, 14)
        assert transition(state, command) is state

    @pytest.mark.parametrize("command", list(Command))
    def test_every_command_is_handled(self, command, fixed_today):
        state = CalendarState(2024, 2, 14)
        result = transition(state, command, today=fixed_today)
        assert isinstance(result, CalendarState)

    def test_is_terminal(self):
        assert is_terminal(Command.QUIT) is True
        assert all(not is_terminal(c) for c in Command if c is not Command.QUIT)
