"""Drill-down commands: from a component or style back to its evidence."""

from pathlib import Path

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import InventoryError
from ..inventory import (
    aggregate_components,
    aggregate_styles,
    component_captures,
    derive_visual_essentials,
    related_components,
    representative_record,
    style_locations,
)
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
def captures(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    component_id: str = typer.Argument(..., help="Component id (comp_...)"),
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    List the captures behind a component.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory captures evidence.json comp_1a2b3c4d
    """
    try:
        result = component_captures(component_id, load_scoped(ctx, evidence))
    except InventoryError as e:
        fail(e)

    if output_format is OutputFormat.JSON:
        print_json([c.to_dict() for c in result])
        return

    if not result:
        console.print(f"[yellow]No captures for {escape(component_id)}.[/yellow]")
        return

    table = Table(title=f"Captures of {escape(component_id)}", show_lines=False, pad_edge=True)
    table.add_column("Capture", style="bold", no_wrap=True)
    table.add_column("Source", style="green")
    table.add_column("URL", style="blue")
    table.add_column("Screenshot", style="dim")

    for c in result:
        table.add_row(
            escape(c.id), escape(c.source_label), escape(c.url), escape(c.screenshot_blob_id or "-")
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def locations(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    style_id: str = typer.Argument(..., help="Style id (style_...)"),
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    List the pages a style appears on, busiest first.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory locations evidence.json style_0f1e2d3c
    """
    try:
        records = load_scoped(ctx, evidence)
        result = style_locations(style_id, records, aggregate_styles(records))
    except InventoryError as e:
        fail(e)

    if output_format is OutputFormat.JSON:
        print_json([loc.to_dict() for loc in result])
        return

    if not result:
        console.print(f"[yellow]No locations for {escape(style_id)}.[/yellow]")
        return

    table = Table(title=f"Locations of {escape(style_id)}", show_lines=False, pad_edge=True)
    table.add_column("Source", style="green")
    table.add_column("URL", style="blue")
    table.add_column("Uses", justify="right", style="yellow")
    table.add_column("Capture", style="dim", no_wrap=True)

    for loc in result:
        table.add_row(
            escape(loc.source_label),
            escape(loc.url),
            str(loc.uses),
            escape(loc.representative_capture_id),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def related(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    style_id: str = typer.Argument(..., help="Style id (style_...)"),
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    List components whose captures use a style (at most 12).

    [bold cyan]Examples:[/bold cyan]

      capture-inventory related evidence.json style_0f1e2d3c
    """
    try:
        records = load_scoped(ctx, evidence)
        comps = aggregate_components(
            records, stable_representatives=get_config(ctx).stable_representatives
        )
        result = related_components(style_id, records, comps, aggregate_styles(records))
    except InventoryError as e:
        fail(e)

    if output_format is OutputFormat.JSON:
        print_json([r.to_dict() for r in result])
        return

    if not result:
        console.print(f"[yellow]No components use {escape(style_id)}.[/yellow]")
        return

    table = Table(title=f"Components using {escape(style_id)}", show_lines=False, pad_edge=True)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Category", style="cyan")
    table.add_column("Captures", justify="right", style="yellow")

    for r in result:
        table.add_row(r.id, escape(r.name), r.category, str(r.captures_count))

    console.print()
    console.print(table)
    console.print()


@app.command()
def essentials(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    component_id: str = typer.Argument(..., help="Component id (comp_...)"),
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    Show the visual essentials of a component's representative capture.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory essentials evidence.json comp_1a2b3c4d
    """
    try:
        record = representative_record(
            component_id,
            load_scoped(ctx, evidence),
            stable_representatives=get_config(ctx).stable_representatives,
        )
    except InventoryError as e:
        fail(e)

    result = derive_visual_essentials(record)

    if output_format is OutputFormat.JSON:
        print_json(result.to_dict())
        return

    if not result.rows:
        console.print(f"[yellow]No captures for {escape(component_id)}.[/yellow]")
        return

    table = Table(
        title=f"Visual essentials (capture {escape(result.derived_from_capture_id)})",
        show_lines=False,
        pad_edge=True,
    )
    table.add_column("Section", style="cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    previous = None
    for row in result.rows:
        # Section label only on its first row
        section = row.section if row.section != previous else ""
        previous = row.section
        value = escape(row.value)
        if row.hex8:
            value += f" [dim]{escape(row.hex8)}[/dim]"
        table.add_row(section, row.label, value)

    console.print()
    console.print(table)
    console.print()
