"""Shared test configuration for termcal."""

import io
import logging
from datetime import date

import pytest

from termcal.config.settings import DisplaySettings
from termcal.display.console_renderer import ConsoleRenderer


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user config, .env files and TERMCAL_ variables out of every test."""
    import os  # noqa: PLC0415

    for key in list(os.environ):
        if key.upper().startswith("TERMCAL_"):
            monkeypatch.delenv(key)

    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def reset_termcal_logger():
    """Remove handlers installed by setup_logging between tests."""
    yield
    logger = logging.getLogger("termcal")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def fixed_today() -> date:
    """Deterministic 'today' for state and controller tests."""
    return date(2026, 10, 18)


@pytest.fixture
def plain_renderer() -> ConsoleRenderer:
    """Renderer without ANSI emphasis writing into a StringIO."""
    return ConsoleRenderer(DisplaySettings(colors=False), stream=io.StringIO())


@pytest.fixture
def color_renderer() -> ConsoleRenderer:
    """Renderer with ANSI emphasis forced on."""
    return ConsoleRenderer(DisplaySettings(colors=True), stream=io.StringIO())
