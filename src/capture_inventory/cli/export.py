"""Export command: write derived data to JSON."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..exceptions import InventoryError
from ..export import build_capture_export, build_inventory_export, write_export
from ..variants import GroupingMode
from . import app
from ._common import EVIDENCE_ARGUMENT, console, fail, get_config, load_scoped


@app.command()
def export(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    output: Path = typer.Option(
        ...,
        "--output",
        "-o",
        help="File to write",
        dir_okay=False,
    ),
    inventory: bool = typer.Option(
        False,
        "--inventory",
        help="Export aggregated components and styles instead of per-capture keys",
    ),
    mode: Optional[GroupingMode] = typer.Option(
        None,
        "--mode",
        "-m",
        help="Grouping mode for per-capture keys (default: from config)",
    ),
):
    """
    Export captures with their group and variant keys, or the full inventory.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory export evidence.json -o captures.json

      capture-inventory export evidence.json --inventory -o inventory.json
    """
    cfg = get_config(ctx)
    try:
        records = load_scoped(ctx, evidence)
        if inventory:
            payload = build_inventory_export(
                records, stable_representatives=cfg.stable_representatives
            )
            count = f"{len(payload['components'])} components, {len(payload['styles'])} styles"
        else:
            payload = build_capture_export(records, mode or cfg.mode)
            count = f"{len(payload['captures'])} captures"
        target = write_export(payload, output)
    except InventoryError as e:
        fail(e)

    console.print(f"[green]Exported {count} to[/green] [blue]{escape(str(target))}[/blue]")
