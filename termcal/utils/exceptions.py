"""Host-side exceptions.

The calendar core never raises during navigation; these cover the terminal
and configuration layers around it.
"""

from pathlib import Path
from typing import Optional


class TermCalError(Exception):
    """Base exception for all termcal errors."""


class ConfigurationError(TermCalError):
    """Raised when an explicitly requested configuration file cannot be used."""

    def __init__(self, message: str, config_path: Optional[Path] = None) -> None:
        """Initialize ConfigurationError.

        Args:
            message: Error message
            config_path: Configuration file that caused the error
        """
        super().__init__(message)
        self.config_path = config_path


class TerminalError(TermCalError):
    """Raised when the terminal cannot be switched into raw input mode."""
