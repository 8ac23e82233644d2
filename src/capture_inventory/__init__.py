"""
Capture Inventory - component and style inventory from captured UI evidence

Turns raw per-element capture records into a deduplicated inventory of
components and design-system style values, with drill-downs back to the
captures, pages and related components behind each entry, and a bucketed
variant view for exploring near-duplicates.
"""

__version__ = "0.1.0"

from .evidence import EvidenceRecord, filter_by_project, load_evidence
from .export import build_capture_export, build_inventory_export, write_export
from .inventory import (
    Component,
    Style,
    aggregate_components,
    aggregate_styles,
    component_captures,
    derive_visual_essentials,
    related_components,
    style_locations,
)
from .variants import GroupingMode, derive_variants, explain_group_key, group_records

__all__ = [
    "EvidenceRecord",  # Input record
    "load_evidence",
    "filter_by_project",
    "Component",
    "Style",
    "aggregate_components",  # Inventory derivation
    "aggregate_styles",
    "component_captures",  # Drill-downs
    "style_locations",
    "related_components",
    "derive_visual_essentials",
    "GroupingMode",  # Exploratory variant view
    "group_records",
    "derive_variants",
    "explain_group_key",
    "build_capture_export",
    "build_inventory_export",
    "write_export",
]
