"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..calendar.grid import parse_week_start
from ..utils.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "TERMCAL_"


def _normalize_week_start(value: str) -> str:
    parse_week_start(value)
    return value.strip().lower()


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    # Console Logging
    console_enabled: bool = Field(default=True, description="Enable console logging")
    console_level: str = Field(
        default="WARNING",
        description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    console_colors: bool = Field(
        default=True, description="Enable colored console output (auto-detected)"
    )

    # File Logging
    file_enabled: bool = Field(default=False, description="Enable file logging")
    file_level: str = Field(
        default="DEBUG",
        description="File log level: DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL",
    )
    file_directory: Optional[str] = Field(
        default=None, description="Custom log directory (defaults to data_dir/logs)"
    )
    file_prefix: str = Field(default="termcal", description="Log file prefix")
    max_log_files: int = Field(default=5, ge=1, description="Maximum number of log files to keep")
    include_function_names: bool = Field(
        default=True, description="Include function names and line numbers in file logs"
    )

    # Interactive Mode
    interactive_split_display: bool = Field(
        default=True, description="Show recent log lines under the calendar in interactive mode"
    )
    interactive_log_lines: int = Field(
        default=3, ge=1, description="Number of log lines to show in interactive mode"
    )

    # Third-party Libraries
    third_party_level: str = Field(
        default="WARNING", description="Log level for third-party libraries"
    )


class DisplaySettings(BaseModel):
    """Calendar rendering options."""

    colors: Optional[bool] = Field(
        default=None, description="Use ANSI emphasis; None auto-detects terminal support"
    )
    column_width: int = Field(default=4, ge=4, le=8, description="Characters per day column")
    fixed_height: bool = Field(
        default=False, description="Always draw six week rows so the height never changes"
    )
    show_help: bool = Field(default=True, description="Show the key binding help line")
    show_status: bool = Field(default=True, description="Show the cursor/selection status line")


class TermCalSettings(BaseSettings):
    """Application settings with environment variable and YAML support."""

    _explicit_args: set = PrivateAttr(default_factory=set)
    _env_vars_set: set = PrivateAttr(default_factory=set)

    app_name: str = Field(default="termcal", description="Application name")
    week_start: str = Field(default="sunday", description="First weekday column: sunday, monday")

    # File Paths
    config_dir: Path = Field(default_factory=lambda: Path.home() / ".config" / "termcal")
    data_dir: Path = Field(default_factory=lambda: Path.home() / ".local" / "share" / "termcal")
    config_path: Optional[Path] = Field(
        default=None, description="Explicit YAML configuration file"
    )

    display: DisplaySettings = Field(
        default_factory=DisplaySettings, description="Calendar rendering settings"
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    def __init__(self, **kwargs: Any) -> None:
        env_vars_set = {
            key[len(ENV_PREFIX) :].lower() for key in os.environ if key.upper().startswith(ENV_PREFIX)
        }

        super().__init__(**kwargs)

        self._explicit_args = set(kwargs.keys())
        self._env_vars_set = env_vars_set

        self._load_yaml_config()

    @field_validator("week_start")
    @classmethod
    def _validate_week_start(cls, value: str) -> str:
        return _normalize_week_start(value)

    @property
    def week_start_index(self) -> int:
        """Sunday-based weekday index of the first column."""
        return parse_week_start(self.week_start)

    @property
    def config_file(self) -> Path:
        """Default path of the user's YAML configuration file."""
        return self.config_dir / "config.yaml"

    def _find_config_file(self) -> Optional[Path]:
        """Find the YAML configuration file to load.

        An explicit ``config_path`` must exist. Otherwise the project's
        ``config/config.yaml`` is preferred over the user config directory.
        """
        if self.config_path is not None:
            if not self.config_path.is_file():
                raise ConfigurationError(
                    f"Configuration file not found: {self.config_path}", self.config_path
                )
            return self.config_path

        project_config = Path.cwd() / "config" / "config.yaml"
        if project_config.is_file():
            return project_config

        if self.config_file.is_file():
            return self.config_file

        return None

    def _is_overridden(self, name: str) -> bool:
        return name in self._explicit_args or name in self._env_vars_set

    def _load_basic_settings(self, config_data: dict) -> None:
        """Load top-level settings from YAML data."""
        for setting in ["app_name", "week_start"]:
            if setting in config_data and not self._is_overridden(setting):
                value = config_data[setting]
                if setting == "week_start":
                    value = _normalize_week_start(str(value))
                setattr(self, setting, value)

    def _load_section(self, config_data: dict, section: str, model: type) -> None:
        """Merge a nested YAML section over the current values of ``section``."""
        section_data = config_data.get(section)
        if not section_data:
            return
        if not isinstance(section_data, dict):
            raise ValueError(f"'{section}' must be a mapping")
        if section in self._explicit_args:
            return

        current = getattr(self, section).model_dump()
        for key, value in section_data.items():
            if f"{section}__{key}" not in self._env_vars_set:
                current[key] = value
        setattr(self, section, model.model_validate(current))

    def _load_yaml_config(self) -> None:
        """Load configuration from YAML file if one exists.

        Errors in an explicitly requested file raise ConfigurationError;
        errors in a discovered file are logged and defaults are kept.
        """
        config_file = self._find_config_file()
        if not config_file:
            return

        try:
            with config_file.open(encoding="utf-8") as f:
                config_data = yaml.safe_load(f)

            if not config_data:
                return
            if not isinstance(config_data, dict):
                raise ValueError("top level must be a mapping")

            self._load_basic_settings(config_data)
            self._load_section(config_data, "display", DisplaySettings)
            self._load_section(config_data, "logging", LoggingSettings)

        except (OSError, yaml.YAMLError, ValidationError, ValueError) as e:
            if self.config_path is not None:
                raise ConfigurationError(
                    f"Could not load configuration from {config_file}: {e}", config_file
                ) from e
            logger.warning(f"Could not load YAML config from {config_file}: {e}")
        else:
            logger.debug(f"Loaded configuration from {config_file}")


def load_settings(config_path: Optional[Path] = None, **overrides: Any) -> TermCalSettings:
    """Build a settings object for one run of the application.

    Args:
        config_path: Explicit YAML file to load instead of the search path
        **overrides: Field values taking precedence over environment and YAML

    Returns:
        New TermCalSettings instance

    Raises:
        ConfigurationError: If ``config_path`` is missing or invalid
    """
    if config_path is not None:
        overrides["config_path"] = config_path
    return TermCalSettings(**overrides)
