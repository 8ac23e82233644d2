"""Bucketed variant grouping: an exploratory alternative to exact-match styles.

Group keys are ``::``-delimited and self-describing, so a key can be
explained without the records that produced it:

    nameOnly            button::save
    namePlusType        button::button::save
    nameTypePrimitives  button::button::save::p8-16-8-16::bg32,112,208,1::bdnone::c240,240,240,1::shnoshadow

Primitive segments are prefixed ``p`` (padding T-R-B-L), ``bg``/``bd``
(background/border colour), ``c`` (text colour) and ``sh`` (shadow). A
name containing ``::`` cannot be told apart from a segment boundary. The tag
keeps the case it was captured with (``BUTTON::save`` for DOM-reported tags),
unlike the lowercased tag of the component signature.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence, Union

from ..evidence.models import EvidenceRecord
from ..logging_config import get_logger
from .buckets import bucket_px, bucket_rgba, bucket_shadow, normalize_name
from .models import CaptureGroup, GroupExplanation, GroupingMode, PrimitiveExplanation, Variant

logger = get_logger(__name__)

SEPARATOR = "::"
NO_ROLE = "norole"
NO_NAME = "(no name)"
UNKNOWN_TAG = "unknown"
VARIANT_PREFIX = "v"

_PADDING_TOKEN_RE = re.compile(r"^p(\d+)-(\d+)-(\d+)-(\d+)$")
_TEXT_COLOR_TOKEN_RE = re.compile(r"^c\d")


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


def primitive_segments(record: EvidenceRecord) -> list[str]:
    """The bucketed fingerprint of a record as key segments."""
    prims = record.primitives
    pt, pr, pb, pl = (bucket_px(side) for side in prims.spacing.sides())

    def channels(color):
        return bucket_rgba(color.rgba if color is not None else None)

    shadow = bucket_shadow(prims.shadow.shadow_presence, prims.shadow.shadow_layer_count)
    return [
        f"p{pt}-{pr}-{pb}-{pl}",
        f"bg{channels(prims.background_color)}",
        f"bd{channels(prims.border_color)}",
        f"c{channels(prims.color)}",
        f"sh{shadow}",
    ]


def compute_group_key(record: EvidenceRecord, mode: Union[GroupingMode, str]) -> str:
    """Build the group key for *record* under *mode*."""
    mode = GroupingMode(mode)
    element = record.element
    tag = element.tag_name or UNKNOWN_TAG
    name = normalize_name(element.accessible_name)
    role = element.role or NO_ROLE

    if mode is GroupingMode.NAME_ONLY:
        parts = [tag, name]
    elif mode is GroupingMode.NAME_PLUS_TYPE:
        parts = [tag, role, name]
    else:
        parts = [tag, role, name, *primitive_segments(record)]
    return SEPARATOR.join(parts)


def compute_variant_key(record: EvidenceRecord) -> str:
    """Full bucketed fingerprint, independent of the grouping mode."""
    return SEPARATOR.join([VARIANT_PREFIX, *primitive_segments(record)])


# ---------------------------------------------------------------------------
# Grouping
# ---------------------------------------------------------------------------


def group_records(
    records: Iterable[EvidenceRecord], mode: Union[GroupingMode, str]
) -> list[CaptureGroup]:
    """Group records under *mode*, largest group first (ties by key)."""
    buckets: dict[str, list[EvidenceRecord]] = {}
    for record in records:
        buckets.setdefault(compute_group_key(record, mode), []).append(record)

    groups = [
        CaptureGroup(key=key, members=tuple(members), explanation=explain_group_key(key))
        for key, members in buckets.items()
    ]
    groups.sort(key=lambda g: (-g.count, g.key))
    logger.debug("Grouped records into %d groups (mode=%s)", len(groups), GroupingMode(mode).value)
    return groups


def derive_variants(members: Sequence[EvidenceRecord]) -> list[Variant]:
    """Split a group's members by full bucketed fingerprint.

    Variants are ordered by member count descending, then key, and numbered
    from 1 in that order.
    """
    by_key: dict[str, list[EvidenceRecord]] = {}
    for record in members:
        by_key.setdefault(compute_variant_key(record), []).append(record)

    ordered = sorted(by_key.items(), key=lambda item: (-len(item[1]), item[0]))
    return [
        Variant(key=key, members=tuple(items), index=position)
        for position, (key, items) in enumerate(ordered, start=1)
    ]


# ---------------------------------------------------------------------------
# Explanation
# ---------------------------------------------------------------------------


def _explain_primitives(tokens: Sequence[str]) -> PrimitiveExplanation:
    padding: list[str] = []
    colors: list[str] = []
    shadow: list[str] = []

    for token in tokens:
        if token.startswith("p"):
            match = _PADDING_TOKEN_RE.match(token)
            if match:
                top, right, bottom, left = match.groups()
                padding.append(f"pt{top} pr{right} pb{bottom} pl{left}")
        elif token.startswith("bg") or token.startswith("bd"):
            colors.append(token)
        elif token == "cnone" or _TEXT_COLOR_TOKEN_RE.match(token):
            colors.append(token)
        elif token.startswith("sh"):
            shadow.append(token)

    return PrimitiveExplanation(
        padding=" ".join(padding) or None,
        colors=" ".join(colors) or None,
        shadow=" ".join(shadow) or None,
    )


def explain_group_key(group_key: str) -> GroupExplanation:
    """Read a group key back into tag, role, name and primitive descriptions."""
    parts = group_key.split(SEPARATOR)

    if len(parts) == 2:
        return GroupExplanation(tag=parts[0], name=parts[1] or NO_NAME)

    if len(parts) >= 3:
        role = None if parts[1] == NO_ROLE else parts[1]
        primitives = _explain_primitives(parts[3:]) if len(parts) > 3 else None
        return GroupExplanation(
            tag=parts[0],
            role=role,
            name=parts[2] or NO_NAME,
            primitives=primitives,
        )

    return GroupExplanation(tag=parts[0] or UNKNOWN_TAG)
