"""Line-oriented TCP transport to the daemon's control port."""

import socket
from typing import Protocol

from torctl.control.protocol import encode_command
from torctl.errors import TransportError

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 9051
DEFAULT_ADDRESS = f"{DEFAULT_HOST}:{DEFAULT_PORT}"

# Upper bound on a single reply line
_MAX_LINE = 1024 * 1024


class LineTransport(Protocol):
    """Duplex line stream the controller talks through."""

    def write_line(self, line: str) -> None:
        """Send one command line (terminator appended by the transport)."""
        ...

    def read_line(self) -> str:
        """Return the next line without its terminator."""
        ...


def parse_address(address: str | None) -> tuple[str, int]:
    """Split ``host:port`` into its parts, defaulting to 127.0.0.1:9051 when empty.

    IPv6 hosts are written in brackets: ``[::1]:9051``.

    Raises:
        ValueError: Missing or non-numeric port.

    """
    if not address:
        return DEFAULT_HOST, DEFAULT_PORT
    host, sep, port = address.rpartition(":")
    if not sep or not host or not port.isdigit() or not 0 < int(port) < 65536:
        msg = f"Invalid address (expected host:port): {address}"
        raise ValueError(msg)
    return host.removeprefix("[").removesuffix("]"), int(port)


class Transport:
    """Blocking line transport over a connected stream socket."""

    def __init__(self, sock: socket.socket) -> None:
        """Wrap a connected socket.

        Args:
            sock: Connected stream socket. Ownership passes to the transport.

        """
        self._sock = sock
        self._reader = sock.makefile("rb")

    @staticmethod
    def connect(address: str | None = None, timeout: float | None = None) -> "Transport":
        """Dial the control port.

        Raises:
            TransportError: Connection failed.

        """
        host, port = parse_address(address)
        try:
            sock = socket.create_connection((host, port), timeout=timeout)
        except OSError as e:
            raise TransportError(f"connect to {host}:{port} failed: {e}") from e
        return Transport(sock)

    def write_line(self, line: str) -> None:
        """Send one command line terminated by CRLF.

        Raises:
            TransportError: Write failed.

        """
        data = encode_command(line)
        try:
            self._sock.sendall(data)
        except OSError as e:
            raise TransportError(f"write failed: {e}") from e

    def read_line(self) -> str:
        """Read one line, stripping CRLF or LF.

        Raises:
            TransportError: Read failed or the peer closed the connection.

        """
        try:
            raw = self._reader.readline(_MAX_LINE + 1)
        except OSError as e:
            raise TransportError(f"read failed: {e}") from e
        if not raw:
            raise TransportError("connection closed")
        if not raw.endswith(b"\n"):
            if len(raw) > _MAX_LINE:
                raise TransportError("reply line too long")
            raise TransportError("connection closed mid-line")
        return raw.decode(errors="replace").removesuffix("\n").removesuffix("\r")

    def close(self) -> None:
        """Close the reader and the socket."""
        self._reader.close()
        self._sock.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
