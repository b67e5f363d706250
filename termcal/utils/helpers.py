"""Terminal helper utilities."""

import logging
import os
import subprocess
import sys
from typing import Optional, TextIO

logger = logging.getLogger(__name__)


def secure_clear_screen() -> bool:
    """Securely clear the console screen using subprocess.

    Uses subprocess.run() with shell=False instead of os.system().

    Returns:
        True if screen was cleared successfully, False otherwise
    """
    try:
        if os.name == "posix":
            subprocess.run(["clear"], check=True, timeout=5)
        else:
            subprocess.run(["cmd.exe", "/c", "cls"], check=True, timeout=5)
        return True
    except (subprocess.CalledProcessError, subprocess.TimeoutExpired, FileNotFoundError) as e:
        logger.warning(f"Failed to clear screen: {e}")
        print("\n" * 50)
        return False


def detect_color_support(stream: Optional[TextIO] = None) -> str:
    """Detect terminal color capabilities.

    Args:
        stream: Stream to inspect, defaults to sys.stdout

    Returns:
        One of ``"truecolor"``, ``"basic"`` or ``"none"``
    """
    stream = stream or sys.stdout
    if not hasattr(stream, "isatty") or not stream.isatty():
        return "none"

    if "NO_COLOR" in os.environ:
        return "none"

    term = os.environ.get("TERM", "").lower()
    colorterm = os.environ.get("COLORTERM", "").lower()

    # Dumb terminal wins over everything else
    if term == "dumb":
        return "none"

    if colorterm in ("truecolor", "24bit") or "256color" in term:
        return "truecolor"

    if term and ("color" in term or term.startswith(("xterm", "screen", "tmux", "vt100"))):
        return "basic"

    # Windows Terminal
    if os.name == "nt" and "WT_SESSION" in os.environ:
        return "truecolor"

    return "none"


def supports_color(stream: Optional[TextIO] = None) -> bool:
    """Return True if the stream can render ANSI colors."""
    return detect_color_support(stream) != "none"
