"""Send a signal to the daemon."""

import typer

from torctl.app_context import use_context
from torctl.errors import ControllerError
from torctl.signal import Signal


def signal(ctx: typer.Context, name: str = typer.Argument(help="Signal name or keyword, e.g. newnym, reload, shutdown")) -> None:
    """Send a signal (RELOAD, SHUTDOWN, DUMP, DEBUG, HALT, NEWNYM, CLEARDNSCACHE, HEARTBEAT, DORMANT, ACTIVE)."""
    app = use_context(ctx)
    try:
        sig = Signal.parse(name)
    except ValueError as e:
        app.out.print_error_and_exit("unknown_signal", str(e))
    try:
        with app.controller() as ctl:
            ctl.signal(sig)
    except ControllerError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_signal_sent(sig)
