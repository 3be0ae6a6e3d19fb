"""Application context shared across CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

import typer

from torctl.config import Config
from torctl.control.controller import Controller
from torctl.output import Output


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared application state passed through Typer context."""

    out: Output
    cfg: Config

    @contextmanager
    def controller(self) -> Iterator[Controller]:
        """Connect and authenticate with the configured address and password; close on exit."""
        with Controller.connect(self.cfg.address, timeout=self.cfg.timeout) as ctl:
            ctl.authenticate(self.cfg.password or None)
            yield ctl


def use_context(ctx: typer.Context) -> AppContext:
    """Extract application context from Typer context."""
    result: AppContext = ctx.obj
    return result
