"""Unit tests for termcal.cli.parser."""

import argparse
from datetime import date
from pathlib import Path

import pytest

from termcal import __version__
from termcal.cli.parser import create_parser, parse_date


class TestParseDate:
    """--date values."""

    def test_full_date(self):
        assert parse_date("2024-02-29") == date(2024, 2, 29)

    def test_month_only(self):
        assert parse_date("2024-02") == date(2024, 2, 1)

    def test_extreme_years(self):
        assert parse_date("0001-01-01") == date(1, 1, 1)
        assert parse_date("9999-12") == date(9999, 12, 1)

    @pytest.mark.parametrize("value", ["2023-02-29", "2024-13", "2024/02/01", "february", "", "2024-02-01T00:00"])
    def test_invalid(self, value):
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid date format"):
            parse_date(value)


class TestCreateParser:
    """Parser options."""

    def test_defaults(self):
        args = create_parser().parse_args([])

        assert args.print_month is False
        assert args.date is None
        assert args.week_start is None
        assert args.color is False
        assert args.no_color is False
        assert args.fixed_height is False
        assert args.no_help is False
        assert args.config is None
        assert args.verbose is False

    def test_display_options(self):
        args = create_parser().parse_args(
            ["--print", "--date", "2024-02", "--week-start", "monday", "--no-color", "--fixed-height", "--no-help"]
        )

        assert args.print_month is True
        assert args.date == date(2024, 2, 1)
        assert args.week_start == "monday"
        assert args.no_color is True
        assert args.fixed_height is True
        assert args.no_help is True

    def test_config_path(self):
        args = create_parser().parse_args(["--config", "cal.yaml"])
        assert args.config == Path("cal.yaml")

    def test_logging_options(self):
        args = create_parser().parse_args(
            [
                "--log-level",
                "VERBOSE",
                "--console-level",
                "INFO",
                "--file-level",
                "DEBUG",
                "-q",
                "--log-dir",
                "logs",
                "--max-log-files",
                "3",
                "--no-file-logging",
                "--no-console-logging",
                "--no-log-colors",
            ]
        )

        assert args.log_level == "VERBOSE"
        assert args.console_level == "INFO"
        assert args.file_level == "DEBUG"
        assert args.quiet is True
        assert args.log_dir == Path("logs")
        assert args.max_log_files == 3
        assert args.no_file_logging is True
        assert args.no_console_logging is True
        assert args.no_log_colors is True

    def test_color_flags_are_exclusive(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--color", "--no-color"])
        assert exc_info.value.code == 2

    def test_invalid_week_start(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--week-start", "friday"])
        assert exc_info.value.code == 2

    def test_invalid_date_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--date", "2024-02-30"])

        assert exc_info.value.code == 2
        assert "Invalid date format" in capsys.readouterr().err

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            create_parser().parse_args(["--version"])

        assert exc_info.value.code == 0
        assert capsys.readouterr().out.strip() == f"termcal {__version__}"
