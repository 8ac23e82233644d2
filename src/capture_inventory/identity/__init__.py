"""Stable hashing and component signatures."""

from .hashing import (
    COMPONENT_PREFIX,
    LOCATION_PREFIX,
    STYLE_PREFIX,
    component_id,
    djb2,
    location_id,
    stable_id,
    style_id,
)
from .signature import (
    MISSING,
    SIGNATURE_VERSION,
    build_signature,
    component_id_for,
    infer_role_from_tag,
)

__all__ = [
    "COMPONENT_PREFIX",
    "LOCATION_PREFIX",
    "MISSING",
    "SIGNATURE_VERSION",
    "STYLE_PREFIX",
    "build_signature",
    "component_id",
    "component_id_for",
    "djb2",
    "infer_role_from_tag",
    "location_id",
    "stable_id",
    "style_id",
]
