"""Tests for CLI output rendering."""

import json

import pytest
import typer

from torctl.output import Output
from torctl.signal import Signal


class TestJsonMode:
    """JSON envelopes."""

    def test_signal_sent(self, capsys: pytest.CaptureFixture[str]):
        """Signal confirmation carries the keyword."""
        Output(json_mode=True).print_signal_sent(Signal.NEW_CIRCUIT)
        assert json.loads(capsys.readouterr().out) == {"ok": True, "data": {"signal": "NEWNYM"}}

    def test_traffic(self, capsys: pytest.CaptureFixture[str]):
        """Traffic counters are numbers."""
        Output(json_mode=True).print_traffic(read=1, written=2)
        assert json.loads(capsys.readouterr().out)["data"] == {"read": 1, "written": 2}

    def test_error(self, capsys: pytest.CaptureFixture[str]):
        """Errors print an envelope and exit with code 1."""
        with pytest.raises(typer.Exit) as exc_info:
            Output(json_mode=True).print_error_and_exit("not_found", "missing not found")
        assert exc_info.value.exit_code == 1
        obj = json.loads(capsys.readouterr().out)
        assert obj == {"ok": False, "error": "not_found", "message": "missing not found"}


class TestTextMode:
    """Human-readable output."""

    def test_info_prints_bare_value(self, capsys: pytest.CaptureFixture[str]):
        """Info values are printed alone for easy scripting."""
        Output(json_mode=False).print_info("version", "0.4.8.1")
        assert capsys.readouterr().out == "0.4.8.1\n"

    def test_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]):
        """Human-readable errors go to stderr."""
        with pytest.raises(typer.Exit):
            Output(json_mode=False).print_error_and_exit("transport", "connection closed")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == "Error: connection closed\n"
