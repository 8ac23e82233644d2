"""CLI entry point: registers all subcommands."""

from pathlib import Path
from typing import Optional

import typer

from ..exceptions import InventoryError
from ..logging_config import setup_logging
from ._common import console, fail, resolve_config

app = typer.Typer(
    name="capture-inventory",
    help="Capture Inventory - components and styles derived from captured UI evidence",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "-c",
        "--config",
        help="Configuration file (TOML)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
    project: Optional[str] = typer.Option(
        None,
        "--project",
        "-p",
        help="Only use evidence captured for this project",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
    ),
):
    """
    Derive a component and style inventory from capture evidence.

    Global options apply to every subcommand and go before its name.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory components evidence.json

      capture-inventory --project audit-1 styles evidence.json --format json

      capture-inventory groups evidence.json --mode namePlusType
    """
    if version:
        from .. import __version__

        console.print(
            f"[bold cyan]Capture Inventory[/bold cyan] version [green]{__version__}[/green]"
        )
        raise typer.Exit(0)

    try:
        cfg = resolve_config(config=config, project=project, verbose=verbose, quiet=quiet)
    except InventoryError as e:
        fail(e)

    setup_logging(verbose=cfg.verbosity == "verbose", quiet=cfg.verbosity == "quiet")

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())
        raise typer.Exit(0)


# Import subcommands to register them
from .inventory import components as _components, styles as _styles  # noqa: F401, E402
from .drilldown import (  # noqa: F401, E402
    captures as _captures,
    essentials as _essentials,
    locations as _locations,
    related as _related,
)
from .groups import explain as _explain, groups as _groups, variants as _variants  # noqa: F401, E402
from .export import export as _export  # noqa: F401, E402
