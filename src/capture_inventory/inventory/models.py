"""Derived inventory values: components, styles and their drill-down projections.

None of these are persisted. They are recomputed from the evidence set on
every call and handed to the caller, who owns them. ``to_dict`` renders the
camelCase field names the viewer and export tooling consume.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

UNKNOWN_STATUS = "Unknown"


@dataclass(frozen=True)
class Component:
    """A de-duplicated UI component: every capture sharing one signature."""

    id: str  # comp_<hash of signature>
    name: str
    category: str
    type: str
    source: str
    captures_count: int
    status: str = UNKNOWN_STATUS

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "type": self.type,
            "status": self.status,
            "source": self.source,
            "capturesCount": self.captures_count,
        }


@dataclass(frozen=True)
class StyleFact:
    """One (record, property) observation; transient input to style grouping."""

    property: str  # e.g. "paddingTop"
    kind: str
    value: str
    token: str
    url: str
    record_id: str
    sources: Optional[Mapping[str, str]] = field(default=None, compare=False)


@dataclass(frozen=True)
class Style:
    """A distinct (property, value) pair and how often it was observed."""

    id: str  # style_<hash of property|token|value>
    token: str
    value: str
    kind: str
    usage_count: int
    source: str
    property: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "token": self.token,
            "value": self.value,
            "kind": self.kind,
            "usageCount": self.usage_count,
            "source": self.source,
            "property": self.property,
        }


@dataclass(frozen=True)
class ComponentCapture:
    id: str
    url: str
    source_label: str
    screenshot_blob_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "url": self.url,
            "sourceLabel": self.source_label,
            "screenshotBlobId": self.screenshot_blob_id,
        }


@dataclass(frozen=True)
class StyleLocation:
    """Where a style appears: one page (label + url) and how often."""

    id: str  # loc_<hash of sourceLabel|url>
    source_label: str
    url: str
    uses: int
    representative_capture_id: str
    screenshot_blob_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sourceLabel": self.source_label,
            "url": self.url,
            "uses": self.uses,
            "representativeCaptureId": self.representative_capture_id,
            "screenshotBlobId": self.screenshot_blob_id,
        }


@dataclass(frozen=True)
class RelatedComponent:
    id: str
    name: str
    category: str
    captures_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "capturesCount": self.captures_count,
        }


@dataclass(frozen=True)
class VisualEssentialsRow:
    section: str  # Text | Surface | Spacing | State
    label: str
    value: str
    hex8: Optional[str] = None  # colour rows only, when the capture resolved one

    def to_dict(self) -> dict[str, Any]:
        data = {"section": self.section, "label": self.label, "value": self.value}
        if self.hex8:
            data["hex8"] = self.hex8
        return data


@dataclass(frozen=True)
class VisualEssentials:
    rows: tuple[VisualEssentialsRow, ...] = ()
    derived_from_capture_id: Optional[str] = None

    def section(self, name: str) -> list[VisualEssentialsRow]:
        """Rows belonging to one section, in display order."""
        return [row for row in self.rows if row.section == name]

    def to_dict(self) -> dict[str, Any]:
        return {
            "rows": [row.to_dict() for row in self.rows],
            "derivedFromCaptureId": self.derived_from_capture_id,
        }
