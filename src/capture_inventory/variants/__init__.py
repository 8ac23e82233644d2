"""Bucketed, exploratory grouping of captures into groups and variants."""

from .buckets import bucket_px, bucket_rgba, bucket_shadow, normalize_name
from .grouping import (
    compute_group_key,
    compute_variant_key,
    derive_variants,
    explain_group_key,
    group_records,
)
from .models import CaptureGroup, GroupExplanation, GroupingMode, PrimitiveExplanation, Variant

__all__ = [
    "CaptureGroup",
    "GroupExplanation",
    "GroupingMode",
    "PrimitiveExplanation",
    "Variant",
    "bucket_px",
    "bucket_rgba",
    "bucket_shadow",
    "compute_group_key",
    "compute_variant_key",
    "derive_variants",
    "explain_group_key",
    "group_records",
    "normalize_name",
]
