"""Evidence records, loading and project scoping."""

from .loader import load_evidence, parse_evidence
from .models import (
    BorderWidthPrimitive,
    ColorPrimitive,
    ElementCore,
    EvidenceRecord,
    GapPrimitive,
    MarginPrimitive,
    RadiusPrimitive,
    Rgba,
    ShadowPrimitive,
    SpacingPrimitive,
    StylePrimitives,
    TypographyPrimitive,
)
from .scope import filter_by_project, in_project

__all__ = [
    "BorderWidthPrimitive",
    "ColorPrimitive",
    "ElementCore",
    "EvidenceRecord",
    "GapPrimitive",
    "MarginPrimitive",
    "RadiusPrimitive",
    "Rgba",
    "ShadowPrimitive",
    "SpacingPrimitive",
    "StylePrimitives",
    "TypographyPrimitive",
    "filter_by_project",
    "in_project",
    "load_evidence",
    "parse_evidence",
]
