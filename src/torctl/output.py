"""Structured output for CLI and JSON modes."""

# ruff: noqa: T201 — this module is the output layer; print() is its sole mechanism for producing CLI output.

import json
import sys
from typing import NoReturn

import typer

from torctl.signal import Signal


class Output:
    """Handles all CLI output in JSON or human-readable format."""

    def __init__(self, *, json_mode: bool) -> None:
        """Initialize output handler.

        Args:
            json_mode: If True, output JSON envelopes; otherwise human-readable text.

        """
        self._json_mode = json_mode

    def _success(self, data: dict[str, object], message: str) -> None:
        """Print a success result in JSON or human-readable format."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": data}))
        else:
            print(message)

    def print_error_and_exit(self, code: str, message: str) -> NoReturn:
        """Print an error in JSON or human-readable format and exit with code 1.

        Raises:
            typer.Exit: Always, with code 1.

        """
        if self._json_mode:
            print(json.dumps({"ok": False, "error": code, "message": message}))
        else:
            print(f"Error: {message}", file=sys.stderr)
        raise typer.Exit(code=1)

    def print_signal_sent(self, sig: Signal) -> None:
        """Print signal dispatch confirmation."""
        self._success({"signal": sig.keyword}, f"Signal {sig.keyword} sent.")

    def print_info(self, key: str, value: str | int) -> None:
        """Print a single info value."""
        if self._json_mode:
            print(json.dumps({"ok": True, "data": {"key": key, "value": value}}))
        else:
            print(value)

    def print_traffic(self, *, read: int, written: int) -> None:
        """Print traffic counters."""
        self._success({"read": read, "written": written}, f"Read: {read} bytes, written: {written} bytes.")
