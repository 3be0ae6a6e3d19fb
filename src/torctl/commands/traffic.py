"""Show traffic counters."""

import typer

from torctl.app_context import use_context
from torctl.errors import ControllerError


def traffic(ctx: typer.Context) -> None:
    """Show total bytes read and written by the daemon."""
    app = use_context(ctx)
    try:
        with app.controller() as ctl:
            read = ctl.get_bytes_read()
            written = ctl.get_bytes_written()
    except ControllerError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_traffic(read=read, written=written)
