"""Drill-down resolvers for a selected component or style.

Every resolver re-scans the full evidence set against a previously derived
id; nothing is cached between calls. An id that matches nothing yields an
empty list.

A record "uses" a style when one of its style facts has the style's kind
and exactly its value. A ``color`` style therefore matches background,
text or border colour, and an ``8px`` spacing style matches any padding side.
"""

from __future__ import annotations

from typing import Optional, Sequence

from ..classify import infer_source
from ..evidence.models import EvidenceRecord
from ..identity.hashing import location_id
from ..identity.signature import component_id_for
from ..logging_config import get_logger
from .components import name_sort_key
from .models import (
    Component,
    ComponentCapture,
    RelatedComponent,
    Style,
    StyleLocation,
)
from .styles import extract_style_facts

logger = get_logger(__name__)

# Drawer shows at most this many related components.
RELATED_COMPONENTS_LIMIT = 12


def _find_style(style_id: str, styles: Sequence[Style]) -> Optional[Style]:
    for style in styles:
        if style.id == style_id:
            return style
    logger.debug("Style %s not found among %d styles", style_id, len(styles))
    return None


def count_style_matches(record: EvidenceRecord, style: Style) -> int:
    """Number of facts in *record* with the style's kind and value."""
    return sum(
        1
        for fact in extract_style_facts(record)
        if fact.kind == style.kind and fact.value == style.value
    )


def component_captures(
    component_id: str, records: Sequence[EvidenceRecord]
) -> list[ComponentCapture]:
    """List the captures that aggregate into *component_id*.

    Sorted by source label, then url, then capture id.
    """
    captures = [
        ComponentCapture(
            id=record.id,
            url=record.url,
            source_label=infer_source(record.url),
            screenshot_blob_id=record.screenshot_blob_id,
        )
        for record in records
        if component_id_for(record) == component_id
    ]
    captures.sort(key=lambda c: (c.source_label, c.url, c.id))
    return captures


def style_locations(
    style_id: str, records: Sequence[EvidenceRecord], styles: Sequence[Style]
) -> list[StyleLocation]:
    """List the pages a style appears on, busiest first.

    Matches are grouped by (source label, url). ``uses`` counts matching
    facts, so a record using ``8px`` on all four padding sides counts four
    times. The first matching record on each page is kept for its thumbnail.
    """
    style = _find_style(style_id, styles)
    if style is None:
        return []

    uses: dict[tuple[str, str], int] = {}
    representatives: dict[tuple[str, str], EvidenceRecord] = {}
    for record in records:
        matches = count_style_matches(record, style)
        if not matches:
            continue
        key = (infer_source(record.url), record.url)
        uses[key] = uses.get(key, 0) + matches
        representatives.setdefault(key, record)

    locations = [
        StyleLocation(
            id=location_id(f"{label}|{url}"),
            source_label=label,
            url=url,
            uses=count,
            representative_capture_id=representatives[(label, url)].id,
            screenshot_blob_id=representatives[(label, url)].screenshot_blob_id,
        )
        for (label, url), count in uses.items()
    ]
    locations.sort(key=lambda loc: (-loc.uses, loc.source_label, loc.url))
    return locations


def related_components(
    style_id: str,
    records: Sequence[EvidenceRecord],
    components: Sequence[Component],
    styles: Sequence[Style],
) -> list[RelatedComponent]:
    """List components whose captures use a style, capped at 12.

    Sorted by ``captures_count`` descending, then name.
    """
    style = _find_style(style_id, styles)
    if style is None:
        return []

    using = {
        component_id_for(record)
        for record in records
        if count_style_matches(record, style)
    }
    matched = [c for c in components if c.id in using]
    matched.sort(key=lambda c: (-c.captures_count, name_sort_key(c.name), c.id))

    return [
        RelatedComponent(
            id=c.id,
            name=c.name,
            category=c.category,
            captures_count=c.captures_count,
        )
        for c in matched[:RELATED_COMPONENTS_LIMIT]
    ]
