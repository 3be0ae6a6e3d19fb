"""Show the daemon's external address."""

import typer

from torctl.app_context import use_context
from torctl.errors import ControllerError


def address(ctx: typer.Context) -> None:
    """Show the daemon's best guess of its external IP address."""
    app = use_context(ctx)
    try:
        with app.controller() as ctl:
            value = ctl.get_address()
    except ControllerError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_info("address", value)
