"""Errors raised by controller operations."""


class ControllerError(Exception):
    """Base error for all control-port failures."""

    code = "controller_error"

    def __init__(self, message: str) -> None:
        """Initialize with a human-readable message; the machine-readable code comes from the class."""
        super().__init__(message)


class TransportError(ControllerError):
    """The underlying connection failed (dial, write, read, or peer closed)."""

    code = "transport"


class ReplyFormatError(ControllerError):
    """A reply line does not follow the reply grammar."""

    code = "malformed_reply"


class ProtocolError(ControllerError):
    """The daemon answered with a non-success status code."""

    code = "protocol"

    def __init__(self, status: int, body: str) -> None:
        """Initialize with the final status code and the reply body.

        Args:
            status: Three-digit status code of the final reply line.
            body: Reply body as sent by the daemon (reason text on failure).

        """
        super().__init__(f"{status} {body}")
        self.status = status
        self.body = body


class AuthenticationError(ProtocolError):
    """The daemon rejected AUTHENTICATE."""

    code = "auth_failed"


class NotFoundError(ControllerError):
    """A successful GETINFO reply did not contain the requested key."""

    code = "not_found"

    def __init__(self, key: str) -> None:
        """Initialize with the requested key."""
        super().__init__(f"{key} not found")
        self.key = key


class ParseError(ControllerError):
    """An info value expected to be an integer is not."""

    code = "parse_error"

    def __init__(self, key: str, value: str) -> None:
        """Initialize with the key and its raw value."""
        super().__init__(f"{key}: invalid integer {value!r}")
        self.key = key
        self.value = value
