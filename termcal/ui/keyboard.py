"""Keyboard input handling for interactive navigation."""

import asyncio
import logging
import os
import sys
from collections.abc import Awaitable
from enum import Enum
from typing import Any, Callable, Optional, Union

from ..utils.exceptions import TerminalError

logger = logging.getLogger(__name__)


class KeyCode(Enum):
    """Names of non-printable keys."""

    LEFT_ARROW = "left"
    RIGHT_ARROW = "right"
    UP_ARROW = "up"
    DOWN_ARROW = "down"
    SPACE = "space"
    ESCAPE = "escape"
    HOME = "home"
    END = "end"
    ENTER = "enter"
    UNKNOWN = "unknown"


KeyCallback = Union[Callable[[str], None], Callable[[str], Awaitable[None]]]

# CSI/SS3 final bytes (after "\x1b[" or "\x1bO")
_ESCAPE_SEQUENCES = {
    "A": KeyCode.UP_ARROW,
    "B": KeyCode.DOWN_ARROW,
    "C": KeyCode.RIGHT_ARROW,
    "D": KeyCode.LEFT_ARROW,
    "H": KeyCode.HOME,
    "F": KeyCode.END,
    "1~": KeyCode.HOME,
    "7~": KeyCode.HOME,
    "4~": KeyCode.END,
    "8~": KeyCode.END,
}

# Second byte after a "\x00" or "\xe0" prefix from msvcrt
_WINDOWS_SEQUENCES = {
    "H": KeyCode.UP_ARROW,
    "P": KeyCode.DOWN_ARROW,
    "M": KeyCode.RIGHT_ARROW,
    "K": KeyCode.LEFT_ARROW,
    "G": KeyCode.HOME,
    "O": KeyCode.END,
}

_SINGLE_CHARS = {
    " ": KeyCode.SPACE,
    "\x1b": KeyCode.ESCAPE,
    "\r": KeyCode.ENTER,
    "\n": KeyCode.ENTER,
}

# Words accepted in line-input fallback mode
_FALLBACK_WORDS = {
    "left": KeyCode.LEFT_ARROW,
    "right": KeyCode.RIGHT_ARROW,
    "up": KeyCode.UP_ARROW,
    "down": KeyCode.DOWN_ARROW,
    "space": KeyCode.SPACE,
    "esc": KeyCode.ESCAPE,
    "escape": KeyCode.ESCAPE,
    "exit": KeyCode.ESCAPE,
    "home": KeyCode.HOME,
    "end": KeyCode.END,
    "": KeyCode.ENTER,
}

MAX_ESCAPE_SEQUENCE_LENGTH = 8


class KeyboardHandler:
    """Reads raw key presses and reports them as key names.

    Printable keys are reported as their lowercase character, other keys
    by their :class:`KeyCode` value. When stdin is not a terminal, or raw
    mode cannot be entered, input falls back to one line per key.
    """

    def __init__(self) -> None:
        """Initialize keyboard handler."""
        self._running = False
        self._key_callback: Optional[KeyCallback] = None
        self._old_settings: Optional[list[Any]] = None
        self._fallback_mode = False

        self._setup_platform_input()

        logger.debug("Keyboard handler initialized")

    def _setup_platform_input(self) -> None:
        """Set up platform-specific keyboard input handling."""
        if not sys.stdin.isatty():
            self._setup_fallback_input()
            return

        try:
            if sys.platform == "win32":
                import msvcrt  # noqa: PLC0415

                self._getch = msvcrt.getwch
                self._kbhit = msvcrt.kbhit
            else:
                import select  # noqa: PLC0415

                fd = sys.stdin.fileno()

                def _getch() -> str:
                    """Read one character; empty string on VTIME timeout."""
                    return os.read(fd, 1).decode("utf-8", errors="ignore")

                def _kbhit() -> bool:
                    """Check for available input using select."""
                    return select.select([fd], [], [], 0)[0] != []

                self._getch = _getch
                self._kbhit = _kbhit

        except ImportError as e:
            logger.warning(f"Could not import platform-specific keyboard modules: {e}")
            self._setup_fallback_input()

    def _enter_raw_mode(self) -> None:
        """Disable canonical mode and echo on Unix terminals.

        Raises:
            TerminalError: If the terminal attributes cannot be changed
        """
        try:
            import termios  # noqa: PLC0415
        except ImportError as e:
            raise TerminalError(f"Raw terminal mode not supported: {e}") from e

        try:
            fd = sys.stdin.fileno()
            self._old_settings = termios.tcgetattr(fd)

            new_settings = termios.tcgetattr(fd)
            new_settings[3] &= ~(termios.ICANON | termios.ECHO)
            new_settings[6][termios.VMIN] = 0  # Don't wait for characters
            new_settings[6][termios.VTIME] = 1  # Wait 0.1 seconds for input

            termios.tcsetattr(fd, termios.TCSAFLUSH, new_settings)
        except (termios.error, OSError, ValueError) as e:
            self._old_settings = None
            raise TerminalError(f"Could not set terminal to raw mode: {e}") from e

    def _setup_terminal(self) -> None:
        """Set up terminal for raw input mode on Unix systems."""
        if self._fallback_mode or sys.platform == "win32":
            return

        try:
            self._enter_raw_mode()
            logger.debug("Terminal set to raw input mode with timeout")
        except TerminalError as e:
            logger.warning(str(e))
            self._setup_fallback_input()

    def _setup_fallback_input(self) -> None:
        """Fall back to reading one line per key press."""
        logger.info("Using fallback input method - press Enter after each key")
        self._fallback_mode = True

        def _getch_fallback() -> str:
            try:
                return input("key> ")
            except EOFError:
                return "esc"

        def _kbhit_fallback() -> bool:
            return True

        self._getch = _getch_fallback
        self._kbhit = _kbhit_fallback

    def _restore_terminal(self) -> None:
        """Restore terminal settings on Unix systems."""
        if sys.platform == "win32" or not self._old_settings:
            return

        # Only reached after _enter_raw_mode imported termios successfully
        import termios  # noqa: PLC0415

        try:
            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._old_settings)
            logger.debug("Terminal settings restored")
        except (termios.error, OSError, ValueError) as e:
            logger.warning(f"Could not restore terminal settings: {e}")
        finally:
            self._old_settings = None

    def parse_key_sequence(self, key_data: str) -> str:
        """Translate raw key data into a key name.

        Args:
            key_data: Raw characters read for one key press

        Returns:
            Lowercase character for printable keys, a KeyCode value otherwise
        """
        if self._fallback_mode:
            return self._parse_fallback_mode(key_data)
        if not key_data:
            return KeyCode.UNKNOWN.value
        if len(key_data) == 1:
            return self._parse_single_char(key_data)
        if key_data.startswith(("\x1b[", "\x1bO")):
            return _ESCAPE_SEQUENCES.get(key_data[2:], KeyCode.UNKNOWN).value
        if key_data[0] in ("\x00", "\xe0"):
            return _WINDOWS_SEQUENCES.get(key_data[1:], KeyCode.UNKNOWN).value
        return KeyCode.UNKNOWN.value

    def _parse_fallback_mode(self, key_data: str) -> str:
        """Parse a line typed in fallback mode."""
        if key_data == " ":
            return KeyCode.SPACE.value

        word = key_data.strip().lower()
        if word in _FALLBACK_WORDS:
            return _FALLBACK_WORDS[word].value
        if len(word) == 1:
            return word
        return KeyCode.UNKNOWN.value

    def _parse_single_char(self, char: str) -> str:
        """Parse a single character input."""
        if char in _SINGLE_CHARS:
            return _SINGLE_CHARS[char].value
        if char.isprintable():
            return char.lower()
        return KeyCode.UNKNOWN.value

    def register_key_handler(self, callback: KeyCallback) -> None:
        """Register the callback receiving every recognized key name.

        Args:
            callback: Function (sync or async) called with the key name
        """
        self._key_callback = callback
        logger.debug("Registered key handler")

    async def start_listening(self) -> None:
        """Listen for keys until :meth:`stop_listening` is called."""
        if self._running:
            logger.warning("Keyboard handler already running")
            return

        self._running = True
        self._setup_terminal()

        logger.debug(f"Started keyboard input listening (fallback={self._fallback_mode})")

        try:
            await self._input_loop()
        finally:
            self._restore_terminal()
            self._running = False
            logger.debug("Stopped keyboard input listening")

    def stop_listening(self) -> None:
        """Stop listening for keyboard input."""
        self._running = False
        logger.debug("Keyboard handler stop requested")

    async def _input_loop(self) -> None:
        """Main input loop for capturing keystrokes."""
        while self._running:
            try:
                if not self._kbhit():
                    await asyncio.sleep(0.05)
                    continue

                if self._fallback_mode:
                    key_data = self._getch()
                elif sys.platform == "win32":
                    key_data = self._read_windows_key()
                else:
                    key_data = self._read_key_sequence()

                await self._handle_key_input(key_data)

            except KeyboardInterrupt:
                logger.info("Keyboard interrupt received")
                break
            except Exception:
                logger.exception("Error in keyboard input loop")
                await asyncio.sleep(0.1)

    def _read_key_sequence(self) -> str:
        """Read a complete key press, including multi-byte escape sequences."""
        key_data = self._getch()
        if key_data != "\x1b":
            return key_data

        sequence = key_data
        while len(sequence) < MAX_ESCAPE_SEQUENCE_LENGTH:
            # With VTIME=1 _getch() returns "" once the sequence is complete
            next_char = self._getch()
            if not next_char:
                break
            sequence += next_char
            if len(sequence) > 2 and (next_char.isalpha() or next_char == "~"):
                break

        logger.debug(f"Read escape sequence: {sequence!r}")
        return sequence

    def _read_windows_key(self) -> str:
        """Read one key from msvcrt, joining two-part special key codes."""
        key_data = self._getch()
        if key_data in ("\x00", "\xe0"):
            key_data += self._getch()
        return key_data

    async def _handle_key_input(self, key_data: str) -> None:
        """Parse one key press and hand its name to the registered callback."""
        key_name = self.parse_key_sequence(key_data)
        logger.debug(f"Received key_data={key_data!r}, parsed as={key_name!r}")

        if key_name == KeyCode.UNKNOWN.value or self._key_callback is None:
            return

        result = self._key_callback(key_name)
        if asyncio.iscoroutine(result):
            await result

    @property
    def is_running(self) -> bool:
        """Check if keyboard handler is currently running."""
        return self._running

    @property
    def fallback_mode(self) -> bool:
        """True when keys are read one line at a time."""
        return self._fallback_mode
