"""Exploratory grouping commands: groups, variants and key explanation."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..exceptions import InventoryError
from ..variants import GroupExplanation, GroupingMode, derive_variants, explain_group_key, group_records
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

MODE_OPTION = typer.Option(
    None,
    "--mode",
    "-m",
    help="Grouping mode (default: from config)",
)


def _describe(explanation: GroupExplanation) -> str:
    parts = [explanation.tag]
    if explanation.role:
        parts.append(f"role={explanation.role}")
    if explanation.name:
        parts.append(f'"{explanation.name}"')
    prims = explanation.primitives
    if prims is not None:
        parts.extend(p for p in (prims.padding, prims.colors, prims.shadow) if p)
    return escape(" ".join(parts))


@app.command()
def groups(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    mode: Optional[GroupingMode] = MODE_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    Group captures by name, type and bucketed primitives.

    Coarser than components: values are rounded before comparison, so
    near-duplicates land together.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory groups evidence.json

      capture-inventory groups evidence.json --mode nameTypePrimitives
    """
    mode = mode or get_config(ctx).mode
    try:
        result = group_records(load_scoped(ctx, evidence), mode)
    except InventoryError as e:
        fail(e)

    if output_format is OutputFormat.JSON:
        print_json({"groupingMode": mode.value, "groups": [g.to_dict() for g in result]})
        return

    if not result:
        console.print("[yellow]No captures in scope.[/yellow]")
        return

    table = Table(title=f"Groups ({mode.value}, {len(result)})", show_lines=False, pad_edge=True)
    table.add_column("Key", style="dim")
    table.add_column("Explanation", style="bold")
    table.add_column("Captures", justify="right", style="yellow")
    table.add_column("Variants", justify="right", style="cyan")

    for g in result:
        table.add_row(
            escape(g.key),
            _describe(g.explanation),
            str(g.count),
            str(len(derive_variants(g.members))),
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def variants(
    ctx: typer.Context,
    evidence: Path = EVIDENCE_ARGUMENT,
    group_key: str = typer.Argument(..., help="Group key as printed by 'groups'"),
    mode: Optional[GroupingMode] = MODE_OPTION,
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    Split one group into variants by full bucketed fingerprint.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory variants evidence.json "BUTTON::save"
    """
    mode = mode or get_config(ctx).mode
    try:
        all_groups = group_records(load_scoped(ctx, evidence), mode)
    except InventoryError as e:
        fail(e)

    members = next((g.members for g in all_groups if g.key == group_key), ())
    result = derive_variants(members)

    if output_format is OutputFormat.JSON:
        print_json({"groupKey": group_key, "variants": [v.to_dict() for v in result]})
        return

    if not result:
        console.print(f"[yellow]No captures in group {escape(group_key)}.[/yellow]")
        return

    table = Table(title=f"Variants of {escape(group_key)}", show_lines=False, pad_edge=True)
    table.add_column("#", justify="right", style="bold")
    table.add_column("Key", style="dim")
    table.add_column("Captures", justify="right", style="yellow")

    for v in result:
        table.add_row(str(v.index), escape(v.key), str(v.count))

    console.print()
    console.print(table)
    console.print()


@app.command()
def explain(
    group_key: str = typer.Argument(..., help="Group key to explain"),
    output_format: OutputFormat = FORMAT_OPTION,
):
    """
    Read a group key back into tag, role, name and primitives.

    [bold cyan]Examples:[/bold cyan]

      capture-inventory explain "BUTTON::button::save::p8-16-8-16::bgnone::bdnone::cnone::shnoshadow"
    """
    result = explain_group_key(group_key)

    if output_format is OutputFormat.JSON:
        print_json(result.to_dict())
        return

    console.print(f"[bold cyan]Tag:[/bold cyan] {escape(result.tag)}")
    console.print(f"[bold cyan]Role:[/bold cyan] {escape(result.role or '-')}")
    console.print(f"[bold cyan]Name:[/bold cyan] {escape(result.name or '-')}")
    prims = result.primitives
    if prims is not None:
        console.print(f"[bold cyan]Padding:[/bold cyan] {escape(prims.padding or '-')}")
        console.print(f"[bold cyan]Colors:[/bold cyan] {escape(prims.colors or '-')}")
        console.print(f"[bold cyan]Shadow:[/bold cyan] {escape(prims.shadow or '-')}")
