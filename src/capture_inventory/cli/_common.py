"""Shared CLI helpers."""

import json
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import InventoryConfig, load_config
from ..evidence import EvidenceRecord, filter_by_project, load_evidence
from ..exceptions import InventoryError
from ..logging_config import get_logger

console = Console()

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    RICH = "rich"
    JSON = "json"


EVIDENCE_ARGUMENT = typer.Argument(
    ...,
    help="Evidence export (JSON array of capture records, or an object with 'captures')",
    exists=True,
    file_okay=True,
    dir_okay=False,
    readable=True,
)

FORMAT_OPTION = typer.Option(
    OutputFormat.RICH,
    "--format",
    "-f",
    help="Output format: rich table or machine-readable JSON",
    case_sensitive=False,
)


def resolve_config(
    config: Optional[Path] = None,
    project: Optional[str] = None,
    verbose: bool = False,
    quiet: bool = False,
) -> InventoryConfig:
    """Build config from CLI options. Unset options leave file/env values alone."""
    return load_config(
        config_file=config,
        project_id=project,
        verbose=verbose or None,
        quiet=quiet or None,
    )


def get_config(ctx: typer.Context) -> InventoryConfig:
    """Config resolved by the root callback, or defaults when invoked bare."""
    obj = ctx.find_root().obj or {}
    cfg = obj.get("config")
    if cfg is None:
        cfg = resolve_config()
    return cfg


def load_scoped(ctx: typer.Context, evidence: Path) -> list[EvidenceRecord]:
    """Load evidence and restrict it to the configured project."""
    cfg = get_config(ctx)
    records = load_evidence(evidence)
    scoped = filter_by_project(records, cfg.project_id)
    logger.debug(
        "Loaded %d records from %s, %d in scope (project=%s)",
        len(records),
        evidence,
        len(scoped),
        cfg.project_id,
    )
    return scoped


def print_json(payload: Any) -> None:
    """Machine-readable JSON output on stdout."""
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def fail(error: InventoryError) -> None:
    """Report an inventory error and exit with status 1."""
    logger.debug("%s: %s", error.__class__.__name__, error)
    console.print(f"[red]Error:[/red] {escape(str(error))}", highlight=False)
    raise typer.Exit(1)
