"""User interface components for interactive calendar navigation."""

from .help import HelpView
from .interactive import CommandOutcome, InteractiveController
from .keyboard import KeyboardHandler, KeyCode
from .keymap import DEFAULT_BINDINGS, KeyBinding, KeyMap

__all__ = [
    "DEFAULT_BINDINGS",
    "CommandOutcome",
    "HelpView",
    "InteractiveController",
    "KeyBinding",
    "KeyCode",
    "KeyMap",
    "KeyboardHandler",
]
