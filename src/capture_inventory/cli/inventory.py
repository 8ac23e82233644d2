"""Inventory listing commands: components and styles."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import InventoryError
from ..inventory import aggregate_components, aggregate_styles
from . import app
from ._common import (
    EVIDENCE_ARGUMENT,
    FORMAT_OPTION,
    OutputFormat,
    console,
    fail,
    get_config,
    load_scoped,
    print_json,
)


@app.command()
def components(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    List components, most captured first.

    A component is every capture sharing one structural signature (tag,
    role, name, colours, radius, padding).

    [bold cyan]Examples:[/bold cyan]

      capture-inventory components evidence.json

      capture-inventory components evidence.json --format json
    """
    try:
        records = load_scoped(ctx, evidence)
        result = aggregate_components(
            records, stable_representatives=get_config(ctx).stable_representatives
        )
    except InventoryError as e:
        fail(e)

    if output_format is OutputFormat.JSON:
        print_json([c.to_dict() for c in result])
        return

    if not result:
        console.print("[yellow]No components in scope.[/yellow]")
        return

    table = Table(title=f"Components ({len(result)})", show_lines=False, pad_edge=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Type")
    table.add_column("Source", style="green")
    table.add_column("Captures", justify="right", style="yellow")

    for c in result:
        table.add_row(
            c.id, escape(c.name), c.category, escape(c.type), c.source, str(c.captures_count)
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def styles(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    List distinct style values, most used first.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory styles evidence.json

      capture-inventory --project audit-1 styles evidence.json --format json
    """
    try:
        result = aggregate_styles(load_scoped(ctx, evidence))
    except InventoryError as e:
        fail(e)

    if output_format is OutputFormat.JSON:
        print_json([s.to_dict() for s in result])
        return

    if not result:
        console.print("[yellow]No styles in scope.[/yellow]")
        return

    table = Table(title=f"Styles ({len(result)})", show_lines=False, pad_edge=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Kind", style="cyan")
    table.add_column("Property")
    table.add_column("Value", style="bold")
    table.add_column("Token", style="magenta")
    table.add_column("Source", style="green")
    table.add_column("Uses", justify="right", style="yellow")

    for s in result:
        table.add_row(
            s.id, s.kind, s.property, escape(s.value), escape(s.token), s.source, str(s.usage_count)
        )

    console.print()
    console.print(table)
    console.print()
