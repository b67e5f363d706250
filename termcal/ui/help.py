"""Key binding help view owned by the interactive controller."""

from itertools import zip_longest
from typing import List

from .keymap import KeyBinding, KeyMap

SEPARATOR = " • "


class HelpView:
    """Renders short or full key binding help for a key map."""

    def __init__(self, keymap: KeyMap, show_all: bool = False) -> None:
        self.keymap = keymap
        self.show_all = show_all

    def toggle(self) -> bool:
        """Switch between short and full help; returns the new ``show_all``."""
        self.show_all = not self.show_all
        return self.show_all

    def render(self) -> str:
        """Render the help text for the current mode."""
        if self.show_all:
            return self.render_full()
        return self.render_short()

    def render_short(self) -> str:
        """One line: ``key description`` pairs joined by bullets."""
        return SEPARATOR.join(_format_binding(binding) for binding in self.keymap.short_help())

    def render_full(self) -> str:
        """One line per binding, columns side by side."""
        columns = [
            [_format_binding(binding) for binding in column]
            for column in self.keymap.full_help()
        ]
        widths = [max((len(entry) for entry in column), default=0) for column in columns]

        lines: List[str] = []
        for row in zip_longest(*columns, fillvalue=""):
            cells = [entry.ljust(width) for entry, width in zip(row, widths)]
            lines.append("    ".join(cells).rstrip())
        return "\n".join(lines)


def _format_binding(binding: KeyBinding) -> str:
    return f"{binding.help_key} {binding.description}"
