"""Tests for histconsole.output: CLI status message helpers."""

import pytest

from histconsole.lib.log_lib import init_output
from histconsole.output import (
    print_error, print_ok, print_warn,
    get_output, Hint, register_hint, register_hints,
)


def test_print_ok_format(capsys):
    """print_ok should output '[OK] message' format on stderr."""
    print_ok("it works")
    captured = capsys.readouterr()
    assert "[OK] it works" in captured.err
    assert captured.out == ""


def test_print_warn_format(capsys):
    """print_warn should output '[WARN] message' format on stderr."""
    print_warn("careful")
    assert "[WARN] careful" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Quiet axis suppression tests
# ---------------------------------------------------------------------------
class TestQuietAxisSuppression:
    """print_*() functions respect the THAC0 quiet axis."""

    @pytest.mark.parametrize("verbosity", [0, -1, -2])
    def test_shown_down_to_QQ(self, capsys, verbosity):
        """print_ok/print_warn show at verbosity -2 and above."""
        init_output(verbosity=verbosity)
        print_ok("visible")
        print_warn("visible")
        err = capsys.readouterr().err
        assert "[OK] visible" in err
        assert "[WARN] visible" in err

    def test_quiet_QQQ_suppresses_prints(self, capsys):
        """-QQQ (verbosity -3) suppresses all print_*() except errors."""
        init_output(verbosity=-3)
        print_ok("hidden")
        print_warn("hidden")
        print_error("visible error")
        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "ERROR: visible error" in err

    def test_quiet_QQQQ_suppresses_everything(self, capsys):
        """-QQQQ (verbosity -4) suppresses even errors (hard wall)."""
        init_output(verbosity=-4)
        print_ok("hidden")
        print_error("also hidden")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""


class TestPrintErrorRoutesToManager:
    """print_error() routes through OutputManager.error()."""

    def test_error_goes_to_stderr(self, capsys):
        """print_error() output appears on stderr, not stdout."""
        init_output(verbosity=0)
        print_error("something broke")
        captured = capsys.readouterr()
        assert "ERROR: something broke" in captured.err
        assert captured.out == ""

    def test_error_uses_error_channel(self, capsys):
        init_output(verbosity=0, channels=['error:-4'])
        print_error("silenced")
        assert capsys.readouterr().err == ""


class TestReExports:
    """output.py re-exports the log_lib public API."""

    def test_get_output_exported(self):
        assert callable(get_output)

    def test_hint_exported(self):
        assert Hint is not None

    def test_register_hint_exported(self):
        assert callable(register_hint)
        assert callable(register_hints)
