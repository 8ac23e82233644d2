"""Component aggregation: group evidence records by signature.

Grouping is order-independent: the same records always produce the same
component ids with the same members. Only the representative record (which
supplies name, category, type and source) depends on input order, because
the first-encountered record wins. Pass ``stable_representatives=True`` to
pick the record with the smallest id instead.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..classify import component_name, component_type, infer_category, infer_source
from ..evidence.models import EvidenceRecord
from ..identity.signature import component_id_for
from ..logging_config import get_logger
from .models import Component

logger = get_logger(__name__)


def name_sort_key(name: str) -> tuple[str, str]:
    """Case-insensitive ordering with a case-sensitive tie-break."""
    return (name.casefold(), name)


def group_by_component(records: Iterable[EvidenceRecord]) -> dict[str, list[EvidenceRecord]]:
    """Map component id -> member records, in first-seen order."""
    groups: dict[str, list[EvidenceRecord]] = {}
    for record in records:
        groups.setdefault(component_id_for(record), []).append(record)
    return groups


def _representative(members: Sequence[EvidenceRecord], stable: bool) -> EvidenceRecord:
    if stable:
        return min(members, key=lambda r: r.id)
    return members[0]


def aggregate_components(
    records: Sequence[EvidenceRecord], stable_representatives: bool = False
) -> list[Component]:
    """Aggregate evidence records into components.

    Parameters
    ----------
    records:
        The already-scoped evidence set. It is read, never modified.
    stable_representatives:
        Choose each group's representative by smallest record id rather
        than first-encountered.

    Returns
    -------
    list[Component]
        Sorted by ``captures_count`` descending, then name, then id.
    """
    if not records:
        return []

    components: list[Component] = []
    for comp_id, members in group_by_component(records).items():
        rep = _representative(members, stable_representatives)
        components.append(
            Component(
                id=comp_id,
                name=component_name(rep.element),
                category=infer_category(rep.element),
                type=component_type(rep.element),
                source=infer_source(rep.url),
                captures_count=len(members),
            )
        )

    components.sort(key=lambda c: (-c.captures_count, name_sort_key(c.name), c.id))
    logger.debug("Aggregated %d components from %d records", len(components), len(records))
    return components


def representative_record(
    component_id: str,
    records: Iterable[EvidenceRecord],
    stable_representatives: bool = False,
) -> Optional[EvidenceRecord]:
    """Return the record a component's display fields come from, or None."""
    members = [r for r in records if component_id_for(r) == component_id]
    if not members:
        return None
    return _representative(members, stable_representatives)
