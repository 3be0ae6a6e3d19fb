"""Tests for logging setup."""

import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from torctl.log import setup_logging


@pytest.fixture
def torctl_logger() -> Iterator[logging.Logger]:
    """The package logger, stripped of handlers before and after each test."""
    logger = logging.getLogger("torctl")
    saved_handlers, saved_level = logger.handlers[:], logger.level
    logger.handlers.clear()
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    """Handler wiring on the torctl logger."""

    def test_file_handler(self, torctl_logger: logging.Logger, tmp_path: Path):
        """A rotating file handler at the configured level is attached."""
        setup_logging(tmp_path / "torctl.log", "WARNING")
        [handler] = torctl_logger.handlers
        assert isinstance(handler, RotatingFileHandler)
        assert handler.level == logging.WARNING
        assert torctl_logger.level == logging.WARNING

    def test_writes_records(self, torctl_logger: logging.Logger, tmp_path: Path):
        """Records from submodules end up in the file."""
        log_path = tmp_path / "torctl.log"
        setup_logging(log_path)
        logging.getLogger("torctl.control.controller").debug("Command: GETINFO version")
        torctl_logger.handlers[0].flush()
        assert "Command: GETINFO version" in log_path.read_text()

    def test_verbose_adds_stderr(self, torctl_logger: logging.Logger, tmp_path: Path):
        """--verbose adds a DEBUG stderr handler and opens the logger to DEBUG."""
        setup_logging(tmp_path / "torctl.log", "ERROR", verbose=True)
        assert len(torctl_logger.handlers) == 2
        assert torctl_logger.level == logging.DEBUG
        assert torctl_logger.handlers[0].level == logging.ERROR

    def test_idempotent(self, torctl_logger: logging.Logger, tmp_path: Path):
        """A second call leaves the existing handlers alone."""
        setup_logging(tmp_path / "torctl.log")
        setup_logging(tmp_path / "other.log", verbose=True)
        assert len(torctl_logger.handlers) == 1
