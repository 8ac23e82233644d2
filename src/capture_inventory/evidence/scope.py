"""Project scoping: restrict evidence to one audit project before derivation."""

from __future__ import annotations

from typing import Iterable, Optional

from .models import EvidenceRecord


def in_project(record: EvidenceRecord, project_id: Optional[str]) -> bool:
    """Return True if *record* belongs to *project_id*.

    Records that predate project scoping (no ``project_id``) always pass, and
    ``project_id=None`` means no scoping at all.
    """
    if project_id is None or record.project_id is None:
        return True
    return record.project_id == project_id


def filter_by_project(
    records: Iterable[EvidenceRecord], project_id: Optional[str]
) -> list[EvidenceRecord]:
    """Return the records in scope for *project_id*, preserving input order."""
    return [r for r in records if in_project(r, project_id)]
