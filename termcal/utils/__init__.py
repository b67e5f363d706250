"""Utility functions and helpers package."""

from .exceptions import ConfigurationError, TermCalError, TerminalError
from .helpers import detect_color_support, secure_clear_screen, supports_color
from .logging import setup_logging

__all__ = [
    "ConfigurationError",
    "TermCalError",
    "TerminalError",
    "detect_color_support",
    "secure_clear_screen",
    "setup_logging",
    "supports_color",
]
