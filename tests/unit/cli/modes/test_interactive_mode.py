"""Tests for termcal.cli.modes.interactive."""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from termcal.cli.modes.interactive import run_interactive_mode
from termcal.cli.parser import create_parser
from termcal.utils.logging import SplitDisplayHandler


@pytest.fixture
def mock_controller():
    with patch("termcal.cli.modes.interactive.InteractiveController") as controller_cls:
        controller = controller_cls.return_value
        controller.start = AsyncMock()
        controller.selected_date = None
        yield controller_cls


class TestRunInteractiveMode:
    """Interactive mode runner."""

    @pytest.mark.asyncio
    async def test_runs_controller(self, mock_controller, capsys):
        args = create_parser().parse_args(["--date", "2024-02-14"])

        assert await run_interactive_mode(args) == 0

        mock_controller.return_value.start.assert_awaited_once_with(initial_date=date(2024, 2, 14))
        assert capsys.readouterr().out == ""

    @pytest.mark.asyncio
    async def test_prints_selection_on_exit(self, mock_controller, capsys):
        mock_controller.return_value.selected_date = date(2024, 2, 16)

        assert await run_interactive_mode(create_parser().parse_args([])) == 0
        assert capsys.readouterr().out == "2024-02-16\n"

    @pytest.mark.asyncio
    async def test_logging_goes_to_split_display(self, mock_controller):
        import logging  # noqa: PLC0415

        await run_interactive_mode(create_parser().parse_args([]))

        handlers = logging.getLogger("termcal").handlers
        assert any(isinstance(h, SplitDisplayHandler) for h in handlers)

    @pytest.mark.asyncio
    async def test_settings_passed_to_controller(self, mock_controller):
        await run_interactive_mode(create_parser().parse_args(["--week-start", "monday"]))

        settings = mock_controller.call_args.args[0]
        assert settings.week_start == "monday"

    @pytest.mark.asyncio
    async def test_keyboard_interrupt(self, mock_controller, capsys):
        mock_controller.return_value.start = AsyncMock(side_effect=KeyboardInterrupt)

        assert await run_interactive_mode(create_parser().parse_args([])) == 0
        assert "interrupted" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_errors_return_failure(self, mock_controller, capsys):
        mock_controller.return_value.start = AsyncMock(side_effect=RuntimeError("boom"))

        assert await run_interactive_mode(create_parser().parse_args([])) == 1
        assert "Interactive mode error: boom" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_missing_config(self, mock_controller, isolated_environment, capsys):
        args = create_parser().parse_args(["--config", str(isolated_environment / "nope.yaml")])

        assert await run_interactive_mode(args) == 1
        mock_controller.assert_not_called()
