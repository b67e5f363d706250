"""Settings construction from command-line arguments."""

import logging
from typing import Any

from ..config.settings import TermCalSettings, load_settings
from ..utils.logging import apply_command_line_overrides

logger = logging.getLogger(__name__)


def apply_cli_overrides(settings: TermCalSettings, args: Any) -> TermCalSettings:
    """Apply display-related command-line overrides to settings in place.

    Args:
        settings: Current settings object
        args: Parsed command line arguments

    Returns:
        Updated settings object
    """
    if getattr(args, "week_start", None):
        settings.week_start = args.week_start

    if getattr(args, "no_color", False):
        settings.display.colors = False
    elif getattr(args, "color", False):
        settings.display.colors = True

    if getattr(args, "fixed_height", False):
        settings.display.fixed_height = True

    if getattr(args, "no_help", False):
        settings.display.show_help = False

    return settings


def build_settings(args: Any) -> TermCalSettings:
    """Load settings for one run and layer the command line on top.

    Args:
        args: Parsed command line arguments

    Returns:
        Settings with command line > environment > YAML > defaults applied

    Raises:
        ConfigurationError: If ``--config`` names a missing or invalid file
    """
    settings = load_settings(config_path=getattr(args, "config", None))
    apply_command_line_overrides(settings, args)
    return apply_cli_overrides(settings, args)


__all__ = [
    "apply_cli_overrides",
    "build_settings",
]
