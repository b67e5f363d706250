"""termcal - interactive month calendar for the terminal."""

__version__ = "1.0.0"
__description__ = "Interactive month calendar for the terminal with keyboard navigation"

__all__ = [
    "__description__",
    "__version__",
]
