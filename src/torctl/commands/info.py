"""Query a single info key."""

import typer

from torctl.app_context import use_context
from torctl.errors import ControllerError


def info(ctx: typer.Context, key: str = typer.Argument(help="Info key, e.g. version or traffic/read")) -> None:
    """Print the value of an info key."""
    app = use_context(ctx)
    try:
        with app.controller() as ctl:
            value = ctl.get_info(key)
    except ControllerError as e:
        app.out.print_error_and_exit(e.code, str(e))
    app.out.print_info(key, value)
