"""Client for the Tor control protocol: signals, info queries, authentication."""

from torctl.control import Controller as Controller
from torctl.signal import Signal as Signal
