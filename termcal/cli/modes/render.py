"""Print mode handler: render one month to stdout and exit."""

import sys
from typing import Any

from ...calendar.state import initial_state
from ...display import ConsoleRenderer
from ...utils.exceptions import TermCalError
from ...utils.logging import setup_logging
from ..config import build_settings


def run_render_mode(args: Any) -> int:
    """Print the month containing ``--date`` (or today) with the cursor on that day.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        settings = build_settings(args)
    except TermCalError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    logger = setup_logging(settings)

    state = initial_state(getattr(args, "date", None), week_start=settings.week_start_index)
    renderer = ConsoleRenderer(settings.display)
    print(renderer.render_calendar(state))

    logger.debug(f"Printed {state.year}-{state.month:02d}")
    return 0


__all__ = ["run_render_mode"]
