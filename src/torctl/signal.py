"""Signals accepted by the daemon's SIGNAL command."""

from enum import Enum


class Signal(Enum):
    """Process-control signal; the value is its wire keyword."""

    RELOAD = "RELOAD"
    SHUTDOWN = "SHUTDOWN"
    DUMP = "DUMP"
    DEBUG = "DEBUG"
    HALT = "HALT"
    NEW_CIRCUIT = "NEWNYM"
    CLEAR_CIRCUIT = "CLEARDNSCACHE"
    HEARTBEAT = "HEARTBEAT"
    DORMANT = "DORMANT"
    ACTIVE = "ACTIVE"

    @property
    def keyword(self) -> str:
        """Wire keyword sent after SIGNAL."""
        return self.value

    @staticmethod
    def parse(text: str) -> "Signal":
        """Resolve a member name or wire keyword, case-insensitively.

        Accepts ``new_circuit``, ``NewCircuit``, ``new-circuit`` and ``newnym`` alike.

        Raises:
            ValueError: No signal matches.

        """
        normalized = text.strip().replace("-", "_").upper()
        for sig in Signal:
            if normalized in (sig.name, sig.name.replace("_", ""), sig.value):
                return sig
        msg = f"Unknown signal: {text}"
        raise ValueError(msg)
