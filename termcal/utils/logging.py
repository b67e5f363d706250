"""Logging configuration and setup utilities."""

import logging
import sys
from collections import deque
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any, Deque, Optional, Union

from .helpers import detect_color_support

if TYPE_CHECKING:
    from ..config.settings import TermCalSettings
    from ..display.renderer_protocol import SplitDisplayRenderer

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

LOG_LEVEL_CHOICES = ["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"]


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the VERBOSE level.

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendered %d rows", row_count)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including VERBOSE.

    Args:
        level_name: Level name, case insensitive

    Returns:
        Numeric level; unknown names map to INFO

    Example:
        >>> get_log_level("verbose")
        15
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        return logging.INFO
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = detect_color_support(sys.stderr) if enable_colors else "none"

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with a colored level name if supported."""
        formatted = super().format(record)

        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color_start = self.COLORS[level_name][self.color_mode]
            color_end = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color_start}{level_name}{color_end}", 1)

        return formatted


class TimestampedFileHandler(logging.FileHandler):
    """Handler that creates one timestamped log file per run."""

    def __init__(
        self, log_dir: Union[str, Path], prefix: str = "termcal", max_files: int = 5
    ) -> None:
        self.log_dir = Path(log_dir)
        self.prefix = prefix
        self.max_files = max_files

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = self.log_dir / f"{prefix}_{timestamp}.log"

        self.log_dir.mkdir(parents=True, exist_ok=True)
        super().__init__(str(log_path), encoding="utf-8")

        self.cleanup_old_files()

    def cleanup_old_files(self) -> None:
        """Remove log files beyond max_files, keeping the most recent."""
        log_files = list(self.log_dir.glob(f"{self.prefix}_*.log"))
        if len(log_files) <= self.max_files:
            return

        log_files.sort(key=lambda f: f.stat().st_mtime, reverse=True)
        for old_file in log_files[self.max_files :]:
            try:
                old_file.unlink()
            except OSError:
                # Another process may hold or already removed the file
                continue


class SplitDisplayHandler(logging.Handler):
    """Handler that feeds recent records into the renderer's log area."""

    def __init__(self, renderer: "SplitDisplayRenderer", max_log_lines: int = 5) -> None:
        super().__init__()
        self.renderer = renderer
        self.max_log_lines = max_log_lines
        self.log_buffer: Deque[str] = deque(maxlen=max_log_lines)

    def emit(self, record: logging.LogRecord) -> None:
        """Add the record to the buffer and push it to the renderer."""
        try:
            self.log_buffer.append(self.format(record))
            self.renderer.update_log_area(list(self.log_buffer))
        except Exception:
            self.handleError(record)


def setup_logging(
    settings: "TermCalSettings",
    interactive_mode: bool = False,
    renderer: Optional["SplitDisplayRenderer"] = None,
) -> logging.Logger:
    """Configure the ``termcal`` logger hierarchy from settings.

    In interactive mode with split display enabled, console records go to
    the renderer's log area instead of the terminal so they do not tear the
    calendar drawing.

    Args:
        settings: Application settings
        interactive_mode: Whether the interactive calendar owns the screen
        renderer: Renderer receiving log lines in interactive mode

    Returns:
        The configured ``termcal`` logger
    """
    logger = logging.getLogger("termcal")
    logger.setLevel(logging.DEBUG)  # Handlers filter
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    log_settings = settings.logging

    if log_settings.console_enabled:
        console_level = get_log_level(log_settings.console_level)
        console_formatter = AutoColoredFormatter(
            "%(asctime)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
            enable_colors=log_settings.console_colors,
        )

        console_handler: logging.Handler
        if interactive_mode and log_settings.interactive_split_display and renderer is not None:
            console_handler = SplitDisplayHandler(
                renderer, max_log_lines=log_settings.interactive_log_lines
            )
        elif interactive_mode:
            # Terminal is owned by the calendar; keep the console quiet
            console_handler = logging.NullHandler()
        else:
            console_handler = logging.StreamHandler()

        console_handler.setLevel(console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    if log_settings.file_enabled:
        if log_settings.file_directory:
            log_dir = Path(log_settings.file_directory).expanduser()
        else:
            log_dir = settings.data_dir / "logs"

        file_handler = TimestampedFileHandler(
            log_dir=log_dir,
            prefix=log_settings.file_prefix,
            max_files=log_settings.max_log_files,
        )
        file_handler.setLevel(get_log_level(log_settings.file_level))

        if log_settings.include_function_names:
            file_format = (
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
            )
        else:
            file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_handler.setFormatter(logging.Formatter(file_format, datefmt="%Y-%m-%d %H:%M:%S"))

        logger.addHandler(file_handler)
        logger.debug(f"Logging to file: {file_handler.baseFilename}")

    third_party_level = get_log_level(log_settings.third_party_level)
    for lib in ["asyncio"]:
        logging.getLogger(lib).setLevel(third_party_level)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``termcal`` namespace.

    Example:
        >>> get_logger("ui.keyboard").name
        'termcal.ui.keyboard'
    """
    return logging.getLogger(f"termcal.{name}")


def apply_command_line_overrides(settings: "TermCalSettings", args: Any) -> "TermCalSettings":
    """Apply command-line logging overrides to settings in place.

    Priority: command line > environment > YAML > defaults.

    Args:
        settings: Settings object to modify
        args: Parsed command-line arguments

    Returns:
        The same settings object
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level
        settings.logging.file_level = args.log_level

    if getattr(args, "console_level", None):
        settings.logging.console_level = args.console_level

    if getattr(args, "file_level", None):
        settings.logging.file_level = args.file_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"
        settings.logging.file_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_directory = str(args.log_dir)
        settings.logging.file_enabled = True

    if getattr(args, "no_file_logging", False):
        settings.logging.file_enabled = False

    if getattr(args, "no_console_logging", False):
        settings.logging.console_enabled = False

    if getattr(args, "no_log_colors", False):
        settings.logging.console_colors = False

    if getattr(args, "max_log_files", None):
        settings.logging.max_log_files = args.max_log_files

    return settings
