"""CLI module for termcal.

Argument parsing, settings construction and mode execution.
"""

from typing import Optional, Sequence

from .config import apply_cli_overrides, build_settings
from .modes import execute_mode
from .modes.interactive import run_interactive_mode
from .modes.render import run_render_mode
from .parser import create_parser, parse_date


async def main_entry(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point with argument parsing and mode dispatch.

    Args:
        argv: Arguments to parse, defaults to ``sys.argv[1:]``

    Returns:
        Exit code (0 for success, 1 for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    mode = "print" if args.print_month else "interactive"
    return await execute_mode(mode, args)


__all__ = [
    "apply_cli_overrides",
    "build_settings",
    "create_parser",
    "execute_mode",
    "main_entry",
    "parse_date",
    "run_interactive_mode",
    "run_render_mode",
]
