"""
Tests for the calculator shell (run modes, output, history).
"""

import io
import sys
from pathlib import Path

import pytest
from rich.console import Console

sys.path.insert(0, str(Path(__file__).parent.parent))

from calc.config import Config
from calc.shell import Calculator, format_result
from calc.history import default_history_path, write_history


def make_console(width: int = 120) -> Console:
    return Console(file=io.StringIO(), markup=False, highlight=False, width=width)


def feed_input(monkeypatch, *lines):
    """Make input() return the given lines, then raise EOFError."""
    remaining = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


@pytest.fixture
def history_file(tmp_path):
    return tmp_path / "history"


@pytest.fixture
def calculator(history_file):
    config = Config(history_enabled=True, history_file=history_file)
    return Calculator(config, console=make_console(), err_console=make_console())


def out(calculator):
    return calculator.console.file.getvalue()


def err(calculator):
    return calculator.err_console.file.getvalue()


class TestFormatResult:
    """Results print like a C++ stream."""

    @pytest.mark.parametrize("value, expected", [
        (8.0, "8"),
        (-3.0, "-3"),
        (0.5, "0.5"),
        (1 / 3, "0.333333"),
        (1e6, "1e+06"),
        (123456789.0, "1.23457e+08"),
        (float("inf"), "inf"),
        (float("nan"), "nan"),
    ])
    def test_default_precision(self, value, expected):
        assert format_result(value) == expected

    def test_custom_precision(self):
        assert format_result(1 / 3, precision=10) == "0.3333333333"


class TestArgumentMode:
    """Tests for run_argument()."""

    def test_prints_result(self, calculator):
        assert calculator.run_argument("sqrt(16) + 2*(3-1)") is True
        assert out(calculator) == "8\n"
        assert err(calculator) == ""

    def test_prints_error_to_stderr(self, calculator):
        assert calculator.run_argument("10/0") is False
        assert out(calculator) == ""
        assert err(calculator) == "Error: division by zero\n"

    def test_writes_history_before_evaluating(self, calculator, history_file):
        calculator.run_argument("(2+3")
        assert history_file.read_text() == "(2+3\n"
        assert "mismatched parentheses" in err(calculator)

    def test_history_can_be_disabled(self, history_file):
        config = Config(history_enabled=False, history_file=history_file)
        calculator = Calculator(config, console=make_console(), err_console=make_console())
        calculator.run_argument("1+1")
        assert not history_file.exists()

    def test_precision_from_config(self, history_file):
        config = Config(history_file=history_file, precision=3)
        calculator = Calculator(config, console=make_console(), err_console=make_console())
        calculator.run_argument("1/3")
        assert out(calculator) == "0.333\n"

    def test_long_error_stays_on_one_line(self, history_file):
        """A narrow console must not wrap the error message."""
        config = Config(history_file=history_file)
        calculator = Calculator(config, console=make_console(40), err_console=make_console(40))
        name = "a" * 120
        calculator.run_argument(f"{name}(1)")
        assert err(calculator) == f"Error: unknown function '{name}'\n"

    def test_long_result_stays_on_one_line(self, history_file):
        config = Config(history_file=history_file, precision=17)
        calculator = Calculator(config, console=make_console(10), err_console=make_console(10))
        calculator.run_argument("1/3")
        assert out(calculator) == "0.33333333333333331\n"

    def test_default_consoles_do_not_wrap(self, history_file, capsys):
        """The stderr console built by default is not limited to 80 columns."""
        calculator = Calculator(Config(history_file=history_file))
        calculator.run_argument("b" * 120 + "(1)")
        captured = capsys.readouterr()
        assert captured.err.count("\n") == 1
        assert captured.err.startswith("Error: unknown function 'bbb")


class TestSinglePrompt:
    """Tests for run_single()."""

    def test_reads_one_line(self, calculator, monkeypatch, history_file):
        feed_input(monkeypatch, "2^3^2", "1+1")
        assert calculator.run_single() is True
        assert out(calculator) == ">>> 512\n"
        assert history_file.read_text() == "2^3^2\n"

    def test_eof(self, calculator, monkeypatch):
        feed_input(monkeypatch)
        assert calculator.run_single() is False
        assert err(calculator) == ""


class TestRepeatPrompt:
    """Tests for run_repeat() and handle_line()."""

    def test_evaluates_until_eof(self, calculator, monkeypatch, history_file):
        feed_input(monkeypatch, "1+1", "2*3")
        calculator.run_repeat()
        assert "2\n" in out(calculator)
        assert "6\n" in out(calculator)
        assert history_file.read_text() == "1+1\n2*3\n"

    def test_errors_do_not_stop_the_loop(self, calculator, monkeypatch):
        feed_input(monkeypatch, "foo(1)", "2-3-2")
        calculator.run_repeat()
        assert err(calculator) == "Error: unknown function 'foo'\n"
        assert "-3\n" in out(calculator)

    def test_quit_command(self, calculator, monkeypatch):
        feed_input(monkeypatch, "1+1", "quit", "5*5")
        calculator.run_repeat()
        assert "Exiting..." in out(calculator)
        assert "25" not in out(calculator)

    def test_handle_line_returns_loop_signal(self, calculator):
        assert calculator.handle_line("1+2") is True
        assert calculator.handle_line("q") is False

    def test_keyboard_interrupt_ends_loop(self, calculator, monkeypatch):
        def interrupted(prompt=""):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupted)
        calculator.run_repeat()
        assert err(calculator) == ""

    def test_confirm_continue_no(self, history_file, monkeypatch):
        config = Config(history_file=history_file, confirm_continue=True)
        calculator = Calculator(config, console=make_console(), err_console=make_console())
        feed_input(monkeypatch, "1+1", "n", "2+2")
        calculator.run_repeat()
        assert "Continue? (y/n): " in out(calculator)
        assert "Exiting..." in out(calculator)
        assert "4\n" not in out(calculator)

    def test_confirm_continue_yes(self, history_file, monkeypatch):
        config = Config(history_file=history_file, confirm_continue=True)
        calculator = Calculator(config, console=make_console(), err_console=make_console())
        feed_input(monkeypatch, "1+1", "y", "2+2", "N")
        calculator.run_repeat()
        assert "4\n" in out(calculator)
        assert history_file.read_text() == "1+1\n2+2\n"


class TestHistory:
    """Tests for the history file helpers."""

    def test_appends_lines(self, tmp_path):
        path = tmp_path / "hist"
        assert write_history("1+1", path) is True
        assert write_history("2*(3", path) is True
        assert path.read_text() == "1+1\n2*(3\n"

    def test_empty_line_is_not_written(self, tmp_path):
        path = tmp_path / "hist"
        assert write_history("", path) is False
        assert not path.exists()

    def test_unwritable_path_is_skipped(self, tmp_path):
        """A directory can't be opened for append; no exception escapes."""
        assert write_history("1+1", tmp_path) is False

    def test_default_path_uses_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert default_history_path() == tmp_path / ".calchistory"
        assert write_history("3*3") is True
        assert (tmp_path / ".calchistory").read_text() == "3*3\n"

    def test_no_home_skips(self, monkeypatch):
        monkeypatch.delenv("HOME", raising=False)
        assert default_history_path() is None
        assert write_history("1+1") is False
