"""Visual essentials: a sectioned, human-readable property table for one capture.

Sections and rows, in order:

    Text     Text color, then Font family/size/weight, Line height (typography only)
    Surface  Background, Border width*, Border color*, Radius, Shadow
    Spacing  Padding, Margin*, Gap*
    State    Disabled

Rows marked * appear only when the primitive exists. Any other missing
value renders as ``"—"``. Colour rows show the captured value and carry the
resolved ``#RRGGBBAA`` form separately as ``hex8`` when the capture has one.
"""

from __future__ import annotations

import re
from typing import Optional

from ..evidence.models import ColorPrimitive, EvidenceRecord
from .models import VisualEssentials, VisualEssentialsRow

MISSING = "—"

_PX_RE = re.compile(r"^(-?\d+(?:\.\d+)?)px$")


def format_4_sided(top: str, right: str, bottom: str, left: str) -> str:
    """Collapse a four-sided value to CSS shorthand.

    >>> format_4_sided("8px", "8px", "8px", "8px")
    '8px'
    >>> format_4_sided("8px", "16px", "8px", "16px")
    '8px 16px'
    >>> format_4_sided("1px", "2px", "3px", "4px")
    '1px 2px 3px 4px'
    """
    if top == right == bottom == left:
        return top
    if top == bottom and right == left:
        return f"{top} {right}"
    return f"{top} {right} {bottom} {left}"


def _px(value: str) -> float:
    match = _PX_RE.match(value.strip())
    return float(match.group(1)) if match else 0.0


def _color(color: Optional[ColorPrimitive]) -> str:
    return (color.raw if color else "") or MISSING


def _text(value: Optional[str]) -> str:
    return value if value else MISSING


def _four(values: tuple[str, str, str, str]) -> str:
    top, right, bottom, left = (_text(v) for v in values)
    return format_4_sided(top, right, bottom, left)


def _disabled(record: EvidenceRecord) -> str:
    # An explicit disabled flag wins over aria-disabled.
    element = record.element
    flag = element.disabled if element.disabled is not None else element.aria_disabled
    if flag is None:
        return MISSING
    return "true" if flag else "false"


def derive_visual_essentials(record: Optional[EvidenceRecord]) -> VisualEssentials:
    """Build the visual essentials table for *record*.

    With no record, returns no rows and a ``None`` capture reference.
    """
    if record is None:
        return VisualEssentials()

    prims = record.primitives
    rows: list[VisualEssentialsRow] = []

    def add(section: str, label: str, value: str, hex8: Optional[str] = None) -> None:
        rows.append(VisualEssentialsRow(section=section, label=label, value=value, hex8=hex8))

    def add_color(section: str, label: str, color: Optional[ColorPrimitive]) -> None:
        add(section, label, _color(color), hex8=color.hex8 if color else None)

    add_color("Text", "Text color", prims.color)
    if prims.typography is not None:
        typo = prims.typography
        add("Text", "Font family", _text(typo.font_family))
        add("Text", "Font size", _text(typo.font_size))
        add("Text", "Font weight", _text(typo.font_weight))
        add("Text", "Line height", _text(typo.line_height))

    add_color("Surface", "Background", prims.background_color)
    if prims.border_width is not None and any(_px(w) > 0 for w in prims.border_width.sides()):
        add("Surface", "Border width", _four(prims.border_width.sides()))
    if prims.border_color is not None:
        add_color("Surface", "Border color", prims.border_color)
    add(
        "Surface",
        "Radius",
        _four(prims.radius.corners()) if prims.radius is not None else MISSING,
    )
    shadow = prims.shadow
    has_shadow = shadow.shadow_presence != "none" and shadow.box_shadow_raw != "none"
    add("Surface", "Shadow", "Yes" if has_shadow else MISSING)

    add("Spacing", "Padding", _four(prims.spacing.sides()))
    if prims.margin is not None:
        add("Spacing", "Margin", _four(prims.margin.sides()))
    if prims.gap is not None:
        add("Spacing", "Gap", f"{_text(prims.gap.row_gap)} / {_text(prims.gap.column_gap)}")

    add("State", "Disabled", _disabled(record))

    return VisualEssentials(rows=tuple(rows), derived_from_capture_id=record.id)
