import argparse
import csv

import pytest

from requiredreturn import main, main_cli
from requiredreturn.cli import _number_arg, build_parser, run_cli


def run(argv):
    return run_cli(build_parser().parse_args(argv))


class TestRunCli:

    def test_default_inputs_report(self, capsys):
        assert run(["--cli"]) == 0
        out = capsys.readouterr().out
        assert "Required Return: 16.35%" in out
        assert "PROJECTED CASH FLOWS" in out
        assert "($54.56)" in out

    def test_pure_python_engine(self, capsys):
        assert run(["--cli", "--engine", "python", "--price", "$100", "--dividend", "2", "--growth", "3%"]) == 0
        assert "Required Return: 5.06%" in capsys.readouterr().out

    def test_invalid_input_exit_status(self, capsys):
        assert run(["--cli", "--price", "0.5"]) == 1
        err = capsys.readouterr().err
        assert "Please correct the following:" in err
        assert "Market price must be at least $1" in err

    def test_dividend_too_large(self, capsys):
        assert run(["--cli", "--dividend", "60"]) == 1
        assert "Dividend cannot exceed $50" in capsys.readouterr().err

    def test_model_warning_exit_status(self, capsys):
        assert run(["--cli", "--dividend", "0"]) == 2
        captured = capsys.readouterr()
        assert "Growth rate must be less than required return" in captured.err
        assert "Required Return" not in captured.out

    def test_export_and_chart(self, tmp_path, capsys):
        csv_path = tmp_path / "flows.csv"
        png_path = tmp_path / "chart.png"
        assert run(["--cli", "--export", str(csv_path), "--chart", str(png_path)]) == 0
        with open(csv_path, newline="") as f:
            rows = list(csv.reader(f))
        assert len(rows) == 12
        assert png_path.stat().st_size > 0
        out = capsys.readouterr().out
        assert f"CSV exported to {csv_path}" in out

    def test_bad_number_is_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["--cli", "--price", "abc"])
        assert exc_info.value.code == 2
        assert "is not a number" in capsys.readouterr().err


class TestEntryPoints:

    def test_main_cli_exit_status(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main_cli(["--growth", "30"])
        assert exc_info.value.code == 1

    def test_main_cli_success(self, capsys):
        main_cli([])
        assert "Required Return" in capsys.readouterr().out

    def test_cli_options_require_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--price", "20"])
        assert exc_info.value.code == 2
        assert "require --cli" in capsys.readouterr().err

    def test_log_level_requires_flag(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "DEBUG"])
        assert exc_info.value.code == 2
        assert "require --cli" in capsys.readouterr().err

    def test_bad_number_has_no_chained_traceback(self):
        with pytest.raises(argparse.ArgumentTypeError) as exc_info:
            _number_arg("abc")
        assert exc_info.value.__cause__ is None
        assert exc_info.value.__suppress_context__
