"""Static key binding table mapping key names to calendar commands."""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple

from ..calendar.state import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyBinding:
    """One command with the keys that trigger it and its help text."""

    command: Command
    keys: Tuple[str, ...]
    help_key: str
    description: str


DEFAULT_BINDINGS: Tuple[KeyBinding, ...] = (
    KeyBinding(Command.NEXT_MONTH, ("n",), "n", "next month"),
    KeyBinding(Command.PREV_MONTH, ("p",), "p", "previous month"),
    KeyBinding(Command.NEXT_DAY, ("l", "right"), "l/→", "next day"),
    KeyBinding(Command.PREV_DAY, ("h", "left"), "h/←", "previous day"),
    KeyBinding(Command.NEXT_WEEK, ("j", "down"), "j/↓", "next week"),
    KeyBinding(Command.PREV_WEEK, ("k", "up"), "k/↑", "previous week"),
    KeyBinding(Command.SELECT_DAY, ("s", "space"), "s/space", "select day"),
    KeyBinding(Command.TODAY, ("t",), "t", "today"),
    KeyBinding(Command.WEEK_START, ("home",), "home", "start of week"),
    KeyBinding(Command.WEEK_END, ("end",), "end", "end of week"),
    KeyBinding(Command.TOGGLE_HELP, ("?",), "?", "toggle help"),
    KeyBinding(Command.QUIT, ("q", "escape"), "q/esc", "quit"),
)

# Commands listed in the one-line help
SHORT_HELP_COMMANDS = (
    Command.NEXT_MONTH,
    Command.PREV_MONTH,
    Command.SELECT_DAY,
    Command.QUIT,
    Command.TOGGLE_HELP,
)


class KeyMap:
    """Lookup table from key names to commands.

    Key names are the lowercase characters and special key names produced
    by :class:`~termcal.ui.keyboard.KeyboardHandler` (``"left"``,
    ``"space"``, ``"escape"`` and so on).
    """

    def __init__(self, bindings: Iterable[KeyBinding] = DEFAULT_BINDINGS) -> None:
        self.bindings: List[KeyBinding] = list(bindings)
        self._lookup: Dict[str, Command] = {}

        for binding in self.bindings:
            for key in binding.keys:
                if key in self._lookup:
                    raise ValueError(
                        f"Key {key!r} is bound to both {self._lookup[key].value} "
                        f"and {binding.command.value}"
                    )
                self._lookup[key] = binding.command

    def command_for(self, key_name: str) -> Optional[Command]:
        """Return the command bound to ``key_name``, or None if unbound."""
        return self._lookup.get(key_name)

    def binding_for(self, command: Command) -> Optional[KeyBinding]:
        """Return the binding for ``command``, or None if it has no keys."""
        for binding in self.bindings:
            if binding.command is command:
                return binding
        return None

    def short_help(self) -> List[KeyBinding]:
        """Bindings shown in the compact help line."""
        return [
            binding for binding in self.bindings if binding.command in SHORT_HELP_COMMANDS
        ]

    def full_help(self) -> List[List[KeyBinding]]:
        """All bindings grouped into navigation and action columns."""
        navigation = [
            binding
            for binding in self.bindings
            if binding.command
            not in (Command.SELECT_DAY, Command.TOGGLE_HELP, Command.QUIT)
        ]
        actions = [
            binding
            for binding in self.bindings
            if binding.command in (Command.SELECT_DAY, Command.TOGGLE_HELP, Command.QUIT)
        ]
        return [navigation, actions]

    @property
    def keys(self) -> List[str]:
        """All bound key names."""
        return list(self._lookup)
