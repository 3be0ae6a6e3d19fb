"""Control-port subsystem: wire protocol, transport, and controller."""

from torctl.control.controller import Controller as Controller
from torctl.control.protocol import Reply as Reply
from torctl.control.transport import DEFAULT_ADDRESS as DEFAULT_ADDRESS
from torctl.control.transport import Transport as Transport
