"""Tests for termcal.cli.modes.render."""

from termcal.cli.modes.render import run_render_mode
from termcal.cli.parser import create_parser


def _args(*argv):
    return create_parser().parse_args(["--print", *argv])


class TestRunRenderMode:
    """Single month output."""

    def test_prints_requested_month(self, capsys):
        assert run_render_mode(_args("--date", "2024-02-14", "--no-color")) == 0

        lines = capsys.readouterr().out.split("\n")
        assert lines[0].strip() == "February 2024"
        assert lines[1] == "Sun Mon Tue Wed Thu Fri Sat"
        assert " 11  12  13 [14] 15  16  17" in lines

    def test_monday_start(self, capsys):
        run_render_mode(_args("--date", "2024-02", "--week-start", "monday", "--no-color"))

        out = capsys.readouterr().out
        assert "Mon Tue Wed Thu Fri Sat Sun" in out
        assert "[ 1]" in out

    def test_no_help_line(self, capsys):
        run_render_mode(_args("--date", "2024-02", "--no-color"))
        assert "quit" not in capsys.readouterr().out

    def test_missing_config_returns_error(self, capsys, isolated_environment):
        result = run_render_mode(_args("--config", str(isolated_environment / "nope.yaml")))

        assert result == 1
        assert "Configuration error" in capsys.readouterr().err
