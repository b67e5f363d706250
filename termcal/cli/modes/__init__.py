"""termcal CLI execution modes.

Provides the mode registry and dispatch for the interactive and print modes.
"""

from typing import Any, Callable

from .interactive import run_interactive_mode
from .render import run_render_mode

# Mode registry for available execution modes
MODE_REGISTRY: dict[str, dict[str, Any]] = {
    "interactive": {
        "name": "Interactive Mode",
        "description": "Keyboard-driven month navigation with day selection",
        "handler": run_interactive_mode,
        "async_mode": True,
    },
    "print": {
        "name": "Print Mode",
        "description": "Render a single month to stdout and exit",
        "handler": run_render_mode,
        "async_mode": False,
    },
}


def get_available_modes() -> dict[str, dict[str, Any]]:
    """Get all available execution modes.

    Returns:
        Dictionary of mode names to mode information
    """
    return MODE_REGISTRY.copy()


def get_mode_handler(mode_name: str) -> Callable[..., Any]:
    """Get handler function for specified mode.

    Args:
        mode_name: Name of the mode

    Returns:
        Handler function for the mode

    Raises:
        KeyError: If mode is not registered
    """
    if mode_name not in MODE_REGISTRY:
        raise KeyError(f"Unknown mode: {mode_name}")
    return MODE_REGISTRY[mode_name]["handler"]


async def execute_mode(mode_name: str, args: Any) -> int:
    """Execute the specified mode with given arguments.

    Args:
        mode_name: Name of the mode to execute
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    try:
        handler = get_mode_handler(mode_name)

        if MODE_REGISTRY[mode_name]["async_mode"]:
            result = await handler(args)
        else:
            result = handler(args)
        return int(result) if result is not None else 0

    except KeyError as e:
        print(f"Error: {e}")
        return 1


__all__ = [
    "MODE_REGISTRY",
    "execute_mode",
    "get_available_modes",
    "get_mode_handler",
    "run_interactive_mode",
    "run_render_mode",
]
