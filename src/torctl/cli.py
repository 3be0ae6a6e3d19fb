"""CLI entry point for torctl."""

from pathlib import Path
from typing import Annotated

import typer
from mm_clikit import TyperPlus

from torctl.app_context import AppContext
from torctl.commands.address import address
from torctl.commands.info import info
from torctl.commands.signal import signal
from torctl.commands.traffic import traffic
from torctl.commands.version import version
from torctl.config import Config
from torctl.log import setup_logging
from torctl.output import Output

app = TyperPlus(package_name="torctl")


@app.callback()
def callback(
    ctx: typer.Context,
    *,
    json_output: Annotated[bool, typer.Option("--json", help="Output results as JSON.")] = False,
    data_dir: Annotated[Path | None, typer.Option("--data-dir", help="Data directory path.")] = None,
    address_: Annotated[str | None, typer.Option("--address", help="Control port as host:port.")] = None,
    password: Annotated[
        str | None, typer.Option("--password", envvar="TORCTL_PASSWORD", help="Control port password.")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Echo debug log to stderr.")] = False,
) -> None:
    """Control a running Tor daemon through its control port."""
    cfg = Config.build(data_dir, address=address_, password=password)
    cfg.data_dir.mkdir(parents=True, exist_ok=True)
    setup_logging(cfg.log_path, cfg.log_level, verbose=verbose)
    ctx.obj = AppContext(out=Output(json_mode=json_output), cfg=cfg)


# Actions
app.command(aliases=["s"])(signal)

# Queries
app.command(aliases=["i"])(info)
app.command()(version)
app.command()(address)
app.command()(traffic)
