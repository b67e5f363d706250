"""Application configuration."""

from .settings import DisplaySettings, LoggingSettings, TermCalSettings, load_settings

__all__ = ["DisplaySettings", "LoggingSettings", "TermCalSettings", "load_settings"]
