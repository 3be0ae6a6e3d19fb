"""Control-port wire format: command framing and reply parsing.

Commands are single CRLF-terminated lines. Replies are one or more lines, each
starting with a 3-digit status code and a separator:

    250-version=0.4.8.1      more lines follow
    250+config-text=         data block follows, terminated by a lone "."
    250 OK                   final line; its code is the reply status

The body of a reply is the text of every line joined with newlines.
"""

from collections.abc import Callable
from dataclasses import dataclass

from torctl.errors import ReplyFormatError

STATUS_OK = 250

# Reply line separators
SEP_MORE = "-"
SEP_DATA = "+"
SEP_END = " "


@dataclass(frozen=True)
class Reply:
    """One complete reply: final status code and newline-joined body."""

    status: int
    body: str

    @property
    def ok(self) -> bool:
        """Check if the status code denotes success."""
        return self.status == STATUS_OK


@dataclass(frozen=True)
class ReplyLine:
    """A single parsed reply line."""

    status: int
    separator: str
    text: str


def encode_command(line: str) -> bytes:
    """Frame a command line for the wire: UTF-8 with a CRLF terminator.

    Raises:
        ValueError: The command contains a line break.

    """
    if "\r" in line or "\n" in line:
        msg = f"Command must be a single line: {line!r}"
        raise ValueError(msg)
    return line.encode() + b"\r\n"


def parse_reply_line(line: str) -> ReplyLine:
    """Split a reply line into status code, separator and text.

    Raises:
        ReplyFormatError: Line is too short, has no numeric code, or an unknown separator.

    """
    if len(line) < 4 or not line[:3].isdigit() or not line[:3].isascii():
        raise ReplyFormatError(f"short response: {line!r}")
    separator = line[3]
    if separator not in (SEP_MORE, SEP_DATA, SEP_END):
        raise ReplyFormatError(f"invalid separator in response: {line!r}")
    return ReplyLine(status=int(line[:3]), separator=separator, text=line[4:])


def read_data_block(read_line: Callable[[], str]) -> list[str]:
    """Read data lines up to the terminating "." line, undoing dot-stuffing."""
    lines: list[str] = []
    while True:
        line = read_line()
        if line == ".":
            return lines
        lines.append(line[1:] if line.startswith("..") else line)


def read_reply(read_line: Callable[[], str]) -> Reply:
    """Consume exactly one reply from a line source.

    Only the first line must parse. A later line that is malformed or carries a
    different status code is kept as raw body text and reading continues until
    a final line with the reply's own status, so the stream stays in step.

    Args:
        read_line: Returns the next line with its terminator stripped. Transport
            failures raised by it propagate unchanged.

    Raises:
        ReplyFormatError: The first line is malformed.

    """
    first = parse_reply_line(read_line())
    status = first.status
    texts = [first.text]
    separator = first.separator
    if separator == SEP_DATA:
        texts.extend(read_data_block(read_line))
    while separator != SEP_END:
        line = read_line()
        try:
            parsed = parse_reply_line(line)
        except ReplyFormatError:
            parsed = None
        if parsed is None or parsed.status != status:
            texts.append(line)
            separator = SEP_MORE
            continue
        texts.append(parsed.text)
        separator = parsed.separator
        if separator == SEP_DATA:
            texts.extend(read_data_block(read_line))
    return Reply(status=status, body="\n".join(texts))


def parse_info(body: str, key: str) -> str | None:
    """Return the value of the first ``key=value`` line matching key exactly, or None."""
    for line in body.splitlines():
        name, sep, value = line.partition("=")
        if sep and name == key:
            return value
    return None
