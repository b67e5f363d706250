"""Command-line argument parsing for termcal.

Options are split into display and logging groups; interactive navigation
is the default mode and ``--print`` renders a single month.
"""

import argparse
from datetime import date, datetime
from pathlib import Path

from .. import __version__
from ..utils.logging import LOG_LEVEL_CHOICES


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for all termcal options

    Example:
        >>> parser = create_parser()
        >>> args = parser.parse_args(["--print", "--date", "2024-02"])
        >>> args.date
        datetime.date(2024, 2, 1)
    """
    parser = argparse.ArgumentParser(
        prog="termcal",
        description="Interactive month calendar for the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           # Navigate the current month interactively
  %(prog)s --date 2024-02            # Start on February 2024
  %(prog)s --print --week-start monday  # Print this month with Monday first
  %(prog)s --print --date 2000-02-29 --no-color
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}", help="Show version information"
    )

    parser.add_argument(
        "--print",
        dest="print_month",
        action="store_true",
        help="Print one month and exit instead of starting interactive mode",
    )

    parser.add_argument(
        "--date",
        type=parse_date,
        default=None,
        metavar="YYYY-MM[-DD]",
        help="Date to start on (default: today; day 1 when only a month is given)",
    )

    parser.add_argument("--config", type=Path, help="Path to a YAML configuration file")

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging and detailed output"
    )

    # Display arguments
    display_group = parser.add_argument_group("display", "Calendar rendering options")

    display_group.add_argument(
        "--week-start",
        choices=["sunday", "monday"],
        default=None,
        help="Weekday shown in the first column (default: sunday)",
    )

    color_group = display_group.add_mutually_exclusive_group()
    color_group.add_argument(
        "--color", dest="color", action="store_true", help="Always use ANSI emphasis"
    )
    color_group.add_argument(
        "--no-color",
        dest="no_color",
        action="store_true",
        help="Mark the cursor with [] and the selection with () instead of colors",
    )

    display_group.add_argument(
        "--fixed-height",
        action="store_true",
        help="Always draw six week rows so the view height never changes",
    )

    display_group.add_argument(
        "--no-help", action="store_true", help="Hide the key binding help line"
    )

    # Logging arguments
    logging_group = parser.add_argument_group("logging", "Logging configuration options")

    logging_group.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set both console and file log levels",
    )

    logging_group.add_argument(
        "--console-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set console log level specifically",
    )

    logging_group.add_argument(
        "--file-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set file log level specifically",
    )

    logging_group.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only show errors on console (sets console level to ERROR)",
    )

    logging_group.add_argument(
        "--log-dir", type=Path, help="Directory for log files (enables file logging)"
    )

    logging_group.add_argument(
        "--no-file-logging", action="store_true", help="Disable file logging completely"
    )

    logging_group.add_argument(
        "--max-log-files", type=int, help="Maximum number of log files to keep (default: 5)"
    )

    logging_group.add_argument(
        "--no-console-logging", action="store_true", help="Disable console logging completely"
    )

    logging_group.add_argument(
        "--no-log-colors", action="store_true", help="Disable colored console output"
    )

    return parser


def parse_date(date_str: str) -> date:
    """Parse a ``YYYY-MM-DD`` or ``YYYY-MM`` date for command-line arguments.

    Args:
        date_str: Date string to parse

    Returns:
        Parsed date; the first of the month when no day is given

    Raises:
        argparse.ArgumentTypeError: If the value is not a valid date

    Example:
        >>> parse_date("2024-02-29")
        datetime.date(2024, 2, 29)
        >>> parse_date("2024-02")
        datetime.date(2024, 2, 1)
    """
    for fmt in ("%Y-%m-%d", "%Y-%m"):
        try:
            return datetime.strptime(date_str, fmt).date()
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"Invalid date format: {date_str}. Use YYYY-MM or YYYY-MM-DD")


__all__ = [
    "create_parser",
    "parse_date",
]
