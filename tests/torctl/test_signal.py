"""Tests for the Signal enumeration."""

import pytest

from torctl.signal import Signal


class TestKeywords:
    """Wire keyword mapping."""

    def test_ten_signals(self):
        """The enumeration is closed at ten members."""
        assert len(Signal) == 10

    @pytest.mark.parametrize(
        ("sig", "keyword"),
        [
            (Signal.RELOAD, "RELOAD"),
            (Signal.SHUTDOWN, "SHUTDOWN"),
            (Signal.DUMP, "DUMP"),
            (Signal.DEBUG, "DEBUG"),
            (Signal.HALT, "HALT"),
            (Signal.NEW_CIRCUIT, "NEWNYM"),
            (Signal.CLEAR_CIRCUIT, "CLEARDNSCACHE"),
            (Signal.HEARTBEAT, "HEARTBEAT"),
            (Signal.DORMANT, "DORMANT"),
            (Signal.ACTIVE, "ACTIVE"),
        ],
    )
    def test_keyword(self, sig: Signal, keyword: str):
        """Each signal maps to its protocol keyword."""
        assert sig.keyword == keyword


class TestParse:
    """Name and keyword lookup."""

    @pytest.mark.parametrize("text", ["newnym", "NEWNYM", "new_circuit", "new-circuit", "NewCircuit"])
    def test_aliases(self, text: str):
        """Names and keywords resolve case-insensitively."""
        assert Signal.parse(text) is Signal.NEW_CIRCUIT

    def test_keyword_differs_from_name(self):
        """CLEARDNSCACHE resolves to ClearCircuit."""
        assert Signal.parse("cleardnscache") is Signal.CLEAR_CIRCUIT

    def test_unknown(self):
        """Unknown text raises ValueError."""
        with pytest.raises(ValueError, match="Unknown signal"):
            Signal.parse("reboot")
