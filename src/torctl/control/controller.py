"""Synchronous controller for the daemon's control port.

One lock serializes every exchange, so a Controller can be shared between threads.
"""

import logging
import threading
import time
from collections.abc import Callable

from torctl.control.protocol import Reply, parse_info, read_reply
from torctl.control.transport import LineTransport, Transport
from torctl.errors import AuthenticationError, NotFoundError, ParseError, ProtocolError
from torctl.signal import Signal

logger = logging.getLogger(__name__)

# Identical signals within this window are dropped. The daemon treats repeats inside
# 10 seconds as redundant; the extra 0.5s absorbs scheduling jitter.
SIGNAL_DEBOUNCE_SECONDS = 10.5


class Controller:
    """Authenticated command channel to a running daemon."""

    def __init__(self, transport: LineTransport, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize the controller over an already connected transport.

        Args:
            transport: Connected line transport. The controller is its only user.
            clock: Monotonic time source in seconds, used for signal debouncing.

        """
        self._transport = transport
        self._clock = clock
        self._lock = threading.Lock()
        self._last_signal: Signal | None = None  # None until the first signal is sent
        self._last_signal_time = 0.0

    @staticmethod
    def connect(address: str | None = None, timeout: float | None = None) -> "Controller":
        """Dial ``host:port`` (default 127.0.0.1:9051) and wrap the connection.

        Raises:
            TransportError: Connection failed.

        """
        return Controller(Transport.connect(address, timeout=timeout))

    @property
    def last_signal(self) -> Signal | None:
        """Last successfully dispatched signal, or None."""
        return self._last_signal

    @property
    def last_signal_time(self) -> float:
        """Clock reading at the last successful dispatch."""
        return self._last_signal_time

    def close(self) -> None:
        """Close the transport if it supports closing."""
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "Controller":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # --- Commands ---

    def execute(self, command: str) -> Reply:
        """Send one command line and return its successful reply.

        Raises:
            TransportError: Write or read failed.
            ReplyFormatError: The reply violates the line grammar.
            ProtocolError: Status code is not 250.

        """
        with self._lock:
            return self._request(command)

    def authenticate(self, password: str | None = None) -> None:
        """Authenticate the connection, with or without a password.

        The password is sent verbatim, without quoting.

        Raises:
            AuthenticationError: The daemon rejected the credential.

        """
        command = f"AUTHENTICATE {password}" if password else "AUTHENTICATE"
        with self._lock:
            try:
                self._request(command)
            except ProtocolError as e:
                raise AuthenticationError(e.status, e.body) from e

    def get_info(self, key: str) -> str:
        """Query a single info key.

        Raises:
            NotFoundError: The reply does not contain the key.

        """
        with self._lock:
            return self._get_info(key)

    def get_info_int(self, key: str) -> int:
        """Query an info key holding a base-10 integer.

        Raises:
            NotFoundError: The reply does not contain the key.
            ParseError: The value is not an integer.

        """
        with self._lock:
            return self._get_info_int(key)

    def get_address(self) -> str:
        """Daemon's best guess of its external IP address."""
        return self.get_info("address")

    def get_bytes_read(self) -> int:
        """Total bytes read by the daemon."""
        return self.get_info_int("traffic/read")

    def get_bytes_written(self) -> int:
        """Total bytes written by the daemon."""
        return self.get_info_int("traffic/written")

    def get_version(self) -> str:
        """Daemon version string."""
        return self.get_info("version")

    def signal(self, sig: Signal) -> None:
        """Send a signal, skipping it if the same one was sent less than 10.5s ago.

        A skipped signal is a successful no-op. Debounce state only advances after
        the daemon accepts the signal, so a failed send can be retried immediately.

        Raises:
            ProtocolError: The daemon rejected the signal.

        """
        with self._lock:
            now = self._clock()
            if sig == self._last_signal and now - self._last_signal_time < SIGNAL_DEBOUNCE_SECONDS:
                logger.debug("Signal %s debounced", sig.keyword)
                return
            self._request(f"SIGNAL {sig.keyword}")
            self._last_signal = sig
            self._last_signal_time = self._clock()

    # --- Private helpers (caller holds the lock) ---

    def _request(self, command: str) -> Reply:
        """Perform one exchange and check the status code."""
        logger.debug("Command: %s", _mask(command))
        self._transport.write_line(command)
        reply = read_reply(self._transport.read_line)
        logger.debug("Reply status: %d", reply.status)
        if not reply.ok:
            raise ProtocolError(reply.status, reply.body)
        return reply

    def _get_info(self, key: str) -> str:
        reply = self._request(f"GETINFO {key}")
        value = parse_info(reply.body, key)
        if value is None:
            raise NotFoundError(key)
        return value

    def _get_info_int(self, key: str) -> int:
        value = self._get_info(key)
        # int() alone would also accept whitespace and underscores
        digits = value[1:] if value[:1] in ("+", "-") else value
        if not digits.isascii() or not digits.isdigit():
            raise ParseError(key, value)
        return int(value)


def _mask(command: str) -> str:
    """Hide credentials in a command line before logging."""
    if command.startswith("AUTHENTICATE "):
        return "AUTHENTICATE ***"
    return command
