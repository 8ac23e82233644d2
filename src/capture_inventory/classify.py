"""Classification helpers: categories, page labels, tokens and style kinds.

Every helper here is total. Unparseable input degrades to a sentinel
(``"Unknown"``, ``"—"``, ``"unknown"``) rather than raising.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional
from urllib.parse import urlsplit

from .evidence.models import ElementCore

NO_TOKEN = "—"
UNKNOWN_SOURCE = "Unknown"
HOMEPAGE = "Homepage"
DESIGN_SYSTEM = "Design System"

STYLE_KINDS = ("color", "spacing", "typography", "shadow", "border", "unknown")

_TOKEN_RE = re.compile(r"var\((--[^)]+)\)")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")

# Schemes a WHATWG URL parser refuses without a host.
_HOST_REQUIRED = frozenset({"http", "https", "ws", "wss", "ftp"})
# Special schemes: a backslash before the query reads as a slash.
_SPECIAL_SCHEMES = _HOST_REQUIRED | {"file"}
_SCHEME_PREFIX_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")

_FORM_TAGS = frozenset({"input", "select", "textarea"})
_FORM_ROLES = frozenset({"textbox", "combobox", "checkbox", "radio"})
_FEEDBACK_ROLES = frozenset({"alert", "status"})
_MEDIA_TAGS = frozenset({"img", "video", "svg"})

_COLOR_KEYS = frozenset({"backgroundcolor", "color", "bordercolor"})
_TYPOGRAPHY_KEYS = frozenset({"fontsize", "fontweight", "fontfamily", "lineheight"})


# ---------------------------------------------------------------------------
# Components
# ---------------------------------------------------------------------------


def infer_category(element: ElementCore) -> str:
    """Place an element in the fixed component taxonomy (first match wins).

    Actions -> Forms -> Navigation -> Feedback -> Media -> Layout.
    """
    tag = element.tag_name.lower()
    role = (element.role or "").lower()

    if tag in ("button", "a") or role in ("button", "link"):
        return "Actions"
    if tag in _FORM_TAGS or role in _FORM_ROLES:
        return "Forms"
    if tag == "nav" or role == "navigation":
        return "Navigation"
    if role in _FEEDBACK_ROLES:
        return "Feedback"
    if tag in _MEDIA_TAGS or role == "img":
        return "Media"
    return "Layout"


def component_type(element: ElementCore) -> str:
    """Display type: explicit role, else the lowercased tag."""
    return element.role or element.tag_name.lower()


def component_name(element: ElementCore) -> str:
    """Display name: accessible name, text preview, else ``tag (role)``."""
    if element.accessible_name:
        return element.accessible_name
    if element.text_preview:
        return element.text_preview
    tag = element.tag_name.lower()
    return f"{tag} ({element.role})" if element.role else tag


# ---------------------------------------------------------------------------
# Page labels
# ---------------------------------------------------------------------------


def _backslashes_as_slashes(url: str) -> str:
    match = _SCHEME_PREFIX_RE.match(url)
    if not match or match.group(1).lower() not in _SPECIAL_SCHEMES:
        return url
    cut = min((i for i in (url.find("?"), url.find("#")) if i != -1), default=len(url))
    return url[:cut].replace("\\", "/") + url[cut:]


def _pathname(url: str) -> Optional[str]:
    """Return the URL's path, or None where a browser URL parser would throw."""
    try:
        parts = urlsplit(_backslashes_as_slashes(url.strip()))
        # A bad port only raises when accessed.
        _ = parts.port
    except ValueError:
        return None

    scheme = parts.scheme.lower()
    if not scheme or not _SCHEME_RE.match(scheme):
        return None
    if scheme in _HOST_REQUIRED:
        host = parts.hostname or ""
        if not host or any(ch.isspace() for ch in host):
            return None
    return parts.path


def infer_source(url: str) -> str:
    """Derive a page label from *url*.

    ``/`` or an empty path is ``"Homepage"``; otherwise the first non-empty
    path segment with its first letter capitalized (``/dashboard/x`` ->
    ``"Dashboard"``). Unparseable URLs are ``"Unknown"``.
    """
    path = _pathname(url)
    if path is None:
        return UNKNOWN_SOURCE

    segments = [seg for seg in path.split("/") if seg]
    if not segments:
        return HOMEPAGE
    first = segments[0]
    return first[:1].upper() + first[1:]


# ---------------------------------------------------------------------------
# Styles
# ---------------------------------------------------------------------------


def extract_token(sources: Optional[Mapping[str, str]]) -> str:
    """Return the first CSS custom property referenced in *sources*.

    Scans the authored values in mapping order for ``var(--name)`` and
    returns ``--name``. The result is never empty: no sources or no match
    yields ``"—"``.
    """
    if not sources:
        return NO_TOKEN
    for value in sources.values():
        if isinstance(value, str):
            match = _TOKEN_RE.search(value)
            if match:
                return match.group(1)
    return NO_TOKEN


def infer_style_kind(property_name: str) -> str:
    """Map a primitive property name to a style kind (case-insensitive)."""
    key = property_name.lower()
    if key in _COLOR_KEYS:
        return "color"
    if key.startswith("padding") or key.startswith("margin"):
        return "spacing"
    if key in _TYPOGRAPHY_KEYS:
        return "typography"
    if key == "boxshadow":
        return "shadow"
    if key.startswith("radius"):
        return "border"
    return "unknown"


def infer_style_source(sources: Optional[Mapping[str, str]], url: str) -> str:
    """``"Design System"`` when any authored value uses a CSS variable, else the page label."""
    if sources:
        for value in sources.values():
            if isinstance(value, str) and "var(--" in value:
                return DESIGN_SYSTEM
    return infer_source(url)
