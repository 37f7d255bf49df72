"""Tests for the output system.

Covers:
- NO_COLOR / TERM=dumb color disabling
- stdout vs stderr discipline
- Quiet mode suppression rules
- Verbose mode debug output
- Elapsed indicator gating
- Global instance management
"""

from __future__ import annotations

import pytest

from lolarchiver import output as output_module
from lolarchiver.output import (
    OutputManager,
    _should_disable_color,
    get_output,
    reset_output,
    set_output,
)


@pytest.fixture(autouse=True)
def _reset_global_output():
    """Ensure the global output instance is reset between tests."""
    reset_output()
    yield
    reset_output()


# ------------------------------------------------------------------ #
# Color control
# ------------------------------------------------------------------ #


class TestColorControl:
    def test_no_color_env_disables(self, monkeypatch):
        monkeypatch.setenv("NO_COLOR", "")
        assert _should_disable_color() is True

    def test_term_dumb_disables(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "dumb")
        assert _should_disable_color() is True

    def test_color_enabled_by_default(self, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.setenv("TERM", "xterm-256color")
        assert _should_disable_color() is False


# ------------------------------------------------------------------ #
# Stream discipline
# ------------------------------------------------------------------ #


class TestStreams:
    def test_print_data_goes_to_stdout(self, capsys):
        OutputManager(no_color=True).print_data('{"a": 1}')
        captured = capsys.readouterr()
        assert captured.out == '{"a": 1}\n'
        assert captured.err == ""

    def test_print_lines(self, capsys):
        OutputManager(no_color=True).print_lines(["one", "two"])
        assert capsys.readouterr().out == "one\ntwo\n"

    def test_error_goes_to_stderr(self, capsys):
        OutputManager(no_color=True).error("bad thing")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: bad thing\n"

    def test_only_used_diagnostics_are_exposed(self):
        mgr = OutputManager(no_color=True)
        for name in ("warning", "is_quiet", "is_verbose"):
            assert not hasattr(mgr, name)
        assert not hasattr(output_module, "warning")

    def test_info_and_success_go_to_stderr(self, capsys):
        mgr = OutputManager(no_color=True)
        mgr.info("note")
        mgr.success("done")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "note\ndone\n"

    def test_markup_in_messages_is_not_interpreted(self, capsys, monkeypatch):
        monkeypatch.delenv("NO_COLOR", raising=False)
        monkeypatch.delenv("TERM", raising=False)
        OutputManager().error("value [bold]x[/bold]")
        assert "[bold]x[/bold]" in capsys.readouterr().err


# ------------------------------------------------------------------ #
# Quiet / verbose
# ------------------------------------------------------------------ #


class TestQuietAndVerbose:
    def test_quiet_suppresses_info_and_success(self, capsys):
        mgr = OutputManager(no_color=True, quiet=True)
        mgr.info("note")
        mgr.success("done")
        assert capsys.readouterr().err == ""

    def test_quiet_keeps_errors(self, capsys):
        mgr = OutputManager(no_color=True, quiet=True)
        mgr.error("e")
        assert capsys.readouterr().err == "Error: e\n"

    def test_quiet_keeps_data(self, capsys):
        OutputManager(no_color=True, quiet=True).print_data("body")
        assert capsys.readouterr().out == "body\n"

    def test_debug_hidden_by_default(self, capsys):
        OutputManager(no_color=True).debug("details")
        assert capsys.readouterr().err == ""

    def test_debug_shown_when_verbose(self, capsys):
        OutputManager(no_color=True, verbose=True).debug("details")
        assert capsys.readouterr().err == "[debug] details\n"


# ------------------------------------------------------------------ #
# Elapsed indicator gating
# ------------------------------------------------------------------ #


class TestShowProgress:
    def test_shown_on_tty(self, monkeypatch):
        monkeypatch.setattr("lolarchiver.output._is_stderr_tty", lambda: True)
        assert OutputManager().show_progress is True

    def test_hidden_when_not_tty(self, monkeypatch):
        monkeypatch.setattr("lolarchiver.output._is_stderr_tty", lambda: False)
        assert OutputManager().show_progress is False

    def test_hidden_when_quiet(self, monkeypatch):
        monkeypatch.setattr("lolarchiver.output._is_stderr_tty", lambda: True)
        assert OutputManager(quiet=True).show_progress is False


# ------------------------------------------------------------------ #
# Global instance
# ------------------------------------------------------------------ #


class TestGlobalInstance:
    def test_get_output_creates_default(self):
        mgr = get_output()
        assert isinstance(mgr, OutputManager)
        assert get_output() is mgr

    def test_set_output_replaces_instance(self):
        mgr = OutputManager(quiet=True)
        set_output(mgr)
        assert get_output() is mgr

    def test_convenience_functions_delegate(self, capsys):
        set_output(OutputManager(no_color=True, verbose=True))
        output_module.print_data("data")
        output_module.info("info")
        output_module.debug("dbg")
        output_module.error("err")
        captured = capsys.readouterr()
        assert captured.out == "data\n"
        assert captured.err == "info\n[debug] dbg\nError: err\n"
