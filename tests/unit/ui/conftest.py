"""Shared fixtures for UI tests."""

from unittest.mock import AsyncMock, Mock

import pytest

from termcal.ui.interactive import InteractiveController


@pytest.fixture
def mock_keyboard_handler():
    """Mock keyboard handler with the methods the controller uses."""
    keyboard = Mock()
    keyboard.register_key_handler = Mock()
    keyboard.start_listening = AsyncMock()
    keyboard.stop_listening = Mock()
    return keyboard


@pytest.fixture
def interactive_controller(plain_renderer, mock_keyboard_handler, fixed_today):
    """Controller on 2026-10-18 rendering without colors."""
    return InteractiveController(
        renderer=plain_renderer, keyboard=mock_keyboard_handler, today=fixed_today
    )
