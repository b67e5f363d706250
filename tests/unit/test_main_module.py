"""Tests for termcal/__main__.py."""

from unittest.mock import patch

import pytest

from termcal.__main__ import main


class TestMain:
    """Process exit codes."""

    def test_exit_code_from_cli(self):
        with patch("termcal.__main__.main_entry", return_value=None), patch(
            "termcal.__main__.asyncio.run", return_value=0
        ):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 0

    def test_keyboard_interrupt_exits_130(self, capsys):
        with patch("termcal.__main__.main_entry", return_value=None), patch(
            "termcal.__main__.asyncio.run", side_effect=KeyboardInterrupt
        ):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 130
        assert "cancelled" in capsys.readouterr().out

    def test_unexpected_error_exits_1(self, capsys):
        with patch("termcal.__main__.main_entry", return_value=None), patch(
            "termcal.__main__.asyncio.run", side_effect=RuntimeError("bad")
        ):
            with pytest.raises(SystemExit) as exc_info:
                main()

        assert exc_info.value.code == 1
        assert "Error: bad" in capsys.readouterr().err
