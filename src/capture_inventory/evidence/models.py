"""Evidence records: immutable captures of one UI element.

Records arrive from the capture store as camelCase JSON. Every optional
primitive is an explicit ``Optional`` field rather than a loose dict so the
style extractor can enumerate exactly what may be absent.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from ..exceptions import EvidenceFormatError


# ---------------------------------------------------------------------------
# Style primitives
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Rgba:
    """Parsed colour channels: r/g/b in 0-255, a in 0-1."""

    r: float
    g: float
    b: float
    a: float = 1.0


@dataclass(frozen=True)
class ColorPrimitive:
    raw: str
    rgba: Optional[Rgba] = None
    hex8: Optional[str] = None


@dataclass(frozen=True)
class SpacingPrimitive:
    padding_top: str
    padding_right: str
    padding_bottom: str
    padding_left: str

    def sides(self) -> tuple[str, str, str, str]:
        return (self.padding_top, self.padding_right, self.padding_bottom, self.padding_left)


@dataclass(frozen=True)
class MarginPrimitive:
    margin_top: str
    margin_right: str
    margin_bottom: str
    margin_left: str

    def sides(self) -> tuple[str, str, str, str]:
        return (self.margin_top, self.margin_right, self.margin_bottom, self.margin_left)


@dataclass(frozen=True)
class BorderWidthPrimitive:
    top: str
    right: str
    bottom: str
    left: str

    def sides(self) -> tuple[str, str, str, str]:
        return (self.top, self.right, self.bottom, self.left)


@dataclass(frozen=True)
class GapPrimitive:
    row_gap: str
    column_gap: str


@dataclass(frozen=True)
class ShadowPrimitive:
    box_shadow_raw: str
    shadow_presence: str  # "none" | "some"
    shadow_layer_count: Optional[int] = None


@dataclass(frozen=True)
class TypographyPrimitive:
    font_family: str
    font_size: str
    font_weight: str
    line_height: str


@dataclass(frozen=True)
class RadiusPrimitive:
    top_left: str
    top_right: str
    bottom_right: str
    bottom_left: str

    def corners(self) -> tuple[str, str, str, str]:
        """Corners in top-left, top-right, bottom-right, bottom-left order."""
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)


@dataclass(frozen=True)
class StylePrimitives:
    """The primitive style bag captured for one element.

    ``spacing`` and ``shadow`` are always present. Background and text colour
    are optional only so that records predating them still load.
    """

    spacing: SpacingPrimitive
    shadow: ShadowPrimitive
    background_color: Optional[ColorPrimitive] = None
    color: Optional[ColorPrimitive] = None
    border_color: Optional[ColorPrimitive] = None
    margin: Optional[MarginPrimitive] = None
    border_width: Optional[BorderWidthPrimitive] = None
    gap: Optional[GapPrimitive] = None
    typography: Optional[TypographyPrimitive] = None
    radius: Optional[RadiusPrimitive] = None
    # property name -> authored value, e.g. {"backgroundColor": "var(--brand)"}
    sources: Optional[Mapping[str, str]] = None


# ---------------------------------------------------------------------------
# Element identity and the record itself
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ElementCore:
    tag_name: str
    role: Optional[str] = None
    accessible_name: Optional[str] = None
    text_preview: Optional[str] = None
    element_id: Optional[str] = None
    disabled: Optional[bool] = None
    aria_disabled: Optional[bool] = None


@dataclass(frozen=True)
class EvidenceRecord:
    """One immutable capture of a UI element's identity, style and screenshot."""

    id: str
    url: str
    element: ElementCore
    primitives: StylePrimitives
    scope_landmark_role: Optional[str] = None
    screenshot_blob_id: Optional[str] = None
    project_id: Optional[str] = None
    created_at: Optional[int] = None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "EvidenceRecord":
        """Build a record from the capture store's JSON shape.

        Raises
        ------
        EvidenceFormatError
            If a required field (id, url, element.tagName, primitive spacing
            or shadow) is missing or has the wrong shape.
        """
        if not isinstance(payload, Mapping):
            raise EvidenceFormatError(f"record must be an object, got {type(payload).__name__}")

        record_id = payload.get("id")
        if not isinstance(record_id, str) or not record_id:
            raise EvidenceFormatError("record is missing 'id'")
        url = payload.get("url")
        if not isinstance(url, str):
            raise EvidenceFormatError("record is missing 'url'", source=record_id)

        element = _parse_element(payload.get("element"), record_id)
        styles = payload.get("styles") or {}
        primitives = _parse_primitives(_as_mapping(styles).get("primitives"), record_id)

        scope = _as_mapping(payload.get("scope"))
        screenshot = _as_mapping(payload.get("screenshot"))
        created_at = payload.get("createdAt")

        return cls(
            id=record_id,
            url=url,
            element=element,
            primitives=primitives,
            scope_landmark_role=scope.get("nearestLandmarkRole"),
            screenshot_blob_id=screenshot.get("screenshotBlobId"),
            project_id=payload.get("projectId"),
            created_at=int(created_at) if isinstance(created_at, (int, float)) else None,
        )


# ---------------------------------------------------------------------------
# Parsing helpers
# ---------------------------------------------------------------------------


def _as_mapping(value: Any) -> Mapping[str, Any]:
    return value if isinstance(value, Mapping) else {}


def _opt_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _parse_element(raw: Any, record_id: str) -> ElementCore:
    element = _as_mapping(raw)
    tag_name = element.get("tagName")
    if not isinstance(tag_name, str) or not tag_name:
        raise EvidenceFormatError("element is missing 'tagName'", source=record_id)
    intent = _as_mapping(element.get("intent"))
    return ElementCore(
        tag_name=tag_name,
        role=element.get("role") or None,
        accessible_name=intent.get("accessibleName") or element.get("accessibleName") or None,
        text_preview=element.get("textPreview") or None,
        element_id=element.get("id") or None,
        disabled=_opt_bool(intent.get("disabled")),
        aria_disabled=_opt_bool(intent.get("ariaDisabled")),
    )


def _parse_rgba(raw: Any) -> Optional[Rgba]:
    channels = _as_mapping(raw)
    try:
        return Rgba(
            r=float(channels["r"]),
            g=float(channels["g"]),
            b=float(channels["b"]),
            a=float(channels.get("a", 1.0)),
        )
    except (KeyError, TypeError, ValueError):
        return None


def _parse_color(raw: Any) -> Optional[ColorPrimitive]:
    color = _as_mapping(raw)
    if not color:
        return None
    # Per-side border colour shape collapses to its top side.
    if "raw" not in color and isinstance(color.get("top"), Mapping):
        color = color["top"]
    value = color.get("raw")
    if not isinstance(value, str):
        return None
    return ColorPrimitive(raw=value, rgba=_parse_rgba(color.get("rgba")), hex8=color.get("hex8"))


def _require_sides(raw: Any, keys: tuple[str, ...], what: str, record_id: str) -> list[str]:
    block = _as_mapping(raw)
    try:
        return [str(block[k]) for k in keys]
    except KeyError as e:
        raise EvidenceFormatError(f"{what} is missing {e.args[0]!r}", source=record_id)


def _optional_sides(raw: Any, keys: tuple[str, ...]) -> Optional[list[str]]:
    block = _as_mapping(raw)
    if not block or not all(k in block for k in keys):
        return None
    return [str(block[k]) for k in keys]


def _parse_primitives(raw: Any, record_id: str) -> StylePrimitives:
    prims = _as_mapping(raw)
    if not prims:
        raise EvidenceFormatError("styles.primitives is missing", source=record_id)

    spacing = SpacingPrimitive(
        *_require_sides(
            prims.get("spacing"),
            ("paddingTop", "paddingRight", "paddingBottom", "paddingLeft"),
            "spacing",
            record_id,
        )
    )

    shadow_raw = _as_mapping(prims.get("shadow"))
    if "boxShadowRaw" not in shadow_raw:
        raise EvidenceFormatError("shadow is missing 'boxShadowRaw'", source=record_id)
    layer_count = shadow_raw.get("shadowLayerCount")
    shadow = ShadowPrimitive(
        box_shadow_raw=str(shadow_raw["boxShadowRaw"]),
        shadow_presence=str(shadow_raw.get("shadowPresence") or "none"),
        shadow_layer_count=int(layer_count) if isinstance(layer_count, (int, float)) else None,
    )

    margin = _optional_sides(prims.get("margin"), ("marginTop", "marginRight", "marginBottom", "marginLeft"))
    border_width = _optional_sides(prims.get("borderWidth"), ("top", "right", "bottom", "left"))
    gap = _optional_sides(prims.get("gap"), ("rowGap", "columnGap"))
    typography = _optional_sides(
        prims.get("typography"), ("fontFamily", "fontSize", "fontWeight", "lineHeight")
    )
    radius = _optional_sides(
        prims.get("radius"), ("topLeft", "topRight", "bottomRight", "bottomLeft")
    )

    sources_raw = _as_mapping(prims.get("sources"))
    sources = (
        MappingProxyType({str(k): v for k, v in sources_raw.items() if isinstance(v, str)})
        if sources_raw
        else None
    )

    return StylePrimitives(
        spacing=spacing,
        shadow=shadow,
        background_color=_parse_color(prims.get("backgroundColor")),
        color=_parse_color(prims.get("color")),
        border_color=_parse_color(prims.get("borderColor")),
        margin=MarginPrimitive(*margin) if margin else None,
        border_width=BorderWidthPrimitive(*border_width) if border_width else None,
        gap=GapPrimitive(*gap) if gap else None,
        typography=TypographyPrimitive(*typography) if typography else None,
        radius=RadiusPrimitive(*radius) if radius else None,
        sources=sources,
    )
