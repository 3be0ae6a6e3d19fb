"""Show the daemon version."""

import typer

from torctl.app_context import use_context
from torctl.errors import ControllerError


def version(ctx: typer.Context) -> None:
    """Show the daemon version."""
    app = use_context(ctx)
    try:
        with app.controller() as ctl:
            value = ctl.get_version()
    except ControllerError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_info("version", value)
