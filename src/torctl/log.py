"""Logging configuration for torctl.

Library modules log at DEBUG (commands sent, reply status, debounced signals).
The CLI routes those records to a rotating file and, with --verbose, to stderr.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(log_path: Path, level: str = "DEBUG", *, verbose: bool = False) -> None:
    """Attach a rotating file handler (and optionally a stderr handler) to the torctl logger.

    Args:
        log_path: Log file; rotated at 1 MB, three backups kept.
        level: Minimum level for the file handler.
        verbose: Also echo DEBUG and above to stderr.

    Idempotent: skips if handlers are already attached.
    """
    logger = logging.getLogger("torctl")
    if logger.handlers:
        return

    formatter = logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT)

    file_handler = RotatingFileHandler(log_path, maxBytes=1_000_000, backupCount=3)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    if verbose:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(logging.DEBUG)
        stderr_handler.setFormatter(formatter)
        logger.addHandler(stderr_handler)

    logger.setLevel(logging.DEBUG if verbose else level)
