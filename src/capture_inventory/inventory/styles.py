"""Style extraction and aggregation.

Each record is flattened into a fixed, enumerated list of style facts. Not
every primitive is scanned (margin, border width and gap are not); only:

    backgroundColor, color, borderColor      if present
    paddingTop/Right/Bottom/Left             always
    fontSize, fontWeight, fontFamily,
    lineHeight                               if typography present
    boxShadow                                always
    radiusTopLeft/TopRight/BottomRight/
    BottomLeft                               if radius present

Facts group by exact ``property|value`` string equality. There is no numeric
tolerance here; approximate grouping lives in :mod:`capture_inventory.variants`.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..classify import extract_token, infer_style_kind, infer_style_source
from ..evidence.models import EvidenceRecord
from ..identity.hashing import style_id
from ..logging_config import get_logger
from .models import Style, StyleFact

logger = get_logger(__name__)


def _property_values(record: EvidenceRecord) -> list[tuple[str, str]]:
    prims = record.primitives
    pairs: list[tuple[str, str]] = []

    if prims.background_color is not None:
        pairs.append(("backgroundColor", prims.background_color.raw))
    if prims.color is not None:
        pairs.append(("color", prims.color.raw))
    if prims.border_color is not None:
        pairs.append(("borderColor", prims.border_color.raw))

    spacing = prims.spacing
    pairs.extend(
        [
            ("paddingTop", spacing.padding_top),
            ("paddingRight", spacing.padding_right),
            ("paddingBottom", spacing.padding_bottom),
            ("paddingLeft", spacing.padding_left),
        ]
    )

    if prims.typography is not None:
        typo = prims.typography
        pairs.extend(
            [
                ("fontSize", typo.font_size),
                ("fontWeight", typo.font_weight),
                ("fontFamily", typo.font_family),
                ("lineHeight", typo.line_height),
            ]
        )

    pairs.append(("boxShadow", prims.shadow.box_shadow_raw))

    if prims.radius is not None:
        radius = prims.radius
        pairs.extend(
            [
                ("radiusTopLeft", radius.top_left),
                ("radiusTopRight", radius.top_right),
                ("radiusBottomRight", radius.bottom_right),
                ("radiusBottomLeft", radius.bottom_left),
            ]
        )

    return pairs


def extract_style_facts(record: EvidenceRecord) -> list[StyleFact]:
    """Flatten one record into its style facts.

    Every fact from a record carries the same token: the first CSS variable
    found anywhere in the record's sources, not one tied to the property.
    """
    sources = record.primitives.sources
    token = extract_token(sources)
    return [
        StyleFact(
            property=prop,
            kind=infer_style_kind(prop),
            value=value,
            token=token,
            url=record.url,
            record_id=record.id,
            sources=sources,
        )
        for prop, value in _property_values(record)
    ]


def iter_style_facts(records: Iterable[EvidenceRecord]) -> Iterable[StyleFact]:
    for record in records:
        yield from extract_style_facts(record)


def aggregate_styles(records: Sequence[EvidenceRecord]) -> list[Style]:
    """Aggregate evidence records into distinct styles.

    The first fact seen for each ``property|value`` group supplies the
    token and source label.

    Returns
    -------
    list[Style]
        Sorted by ``usage_count`` descending, then kind, value and property.
    """
    if not records:
        return []

    groups: dict[str, list[StyleFact]] = {}
    for fact in iter_style_facts(records):
        groups.setdefault(f"{fact.property}|{fact.value}", []).append(fact)

    styles: list[Style] = []
    for facts in groups.values():
        first = facts[0]
        styles.append(
            Style(
                id=style_id(f"{first.property}|{first.token}|{first.value}"),
                token=first.token,
                value=first.value,
                kind=first.kind,
                usage_count=len(facts),
                source=infer_style_source(first.sources, first.url),
                property=first.property,
            )
        )

    styles.sort(key=lambda s: (-s.usage_count, s.kind, s.value, s.property))
    logger.debug("Aggregated %d styles from %d records", len(styles), len(records))
    return styles
