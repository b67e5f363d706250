"""Interactive mode handler for the termcal CLI."""

import sys
from typing import Any

from ...display import ConsoleRenderer
from ...ui import InteractiveController
from ...utils.logging import setup_logging
from ..config import build_settings


async def run_interactive_mode(args: Any) -> int:
    """Run the keyboard-driven calendar until the user quits.

    The confirmed selection, if any, is printed as an ISO date on exit so
    the command can be used in scripts.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        settings = build_settings(args)

        renderer = ConsoleRenderer(settings.display)
        logger = setup_logging(settings, interactive_mode=True, renderer=renderer)
        logger.info("Logging initialized for interactive mode")

        controller = InteractiveController(settings, renderer=renderer)
        await controller.start(initial_date=getattr(args, "date", None))

        if controller.selected_date is not None:
            print(controller.selected_date.isoformat())

        return 0

    except KeyboardInterrupt:
        print("\nInteractive mode interrupted")
        return 0
    except Exception as e:
        print(f"Interactive mode error: {e}", file=sys.stderr)
        return 1


__all__ = ["run_interactive_mode"]
