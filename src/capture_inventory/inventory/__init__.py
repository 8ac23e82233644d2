"""Component and style inventory derived from evidence records."""

from .components import aggregate_components, group_by_component, representative_record
from .drilldown import (
    RELATED_COMPONENTS_LIMIT,
    component_captures,
    related_components,
    style_locations,
)
from .essentials import derive_visual_essentials, format_4_sided
from .models import (
    Component,
    ComponentCapture,
    RelatedComponent,
    Style,
    StyleFact,
    StyleLocation,
    VisualEssentials,
    VisualEssentialsRow,
)
from .styles import aggregate_styles, extract_style_facts

__all__ = [
    "RELATED_COMPONENTS_LIMIT",
    "Component",
    "ComponentCapture",
    "RelatedComponent",
    "Style",
    "StyleFact",
    "StyleLocation",
    "VisualEssentials",
    "VisualEssentialsRow",
    "aggregate_components",
    "aggregate_styles",
    "component_captures",
    "derive_visual_essentials",
    "extract_style_facts",
    "format_4_sided",
    "group_by_component",
    "related_components",
    "representative_record",
    "style_locations",
]
