"""Component signatures: the identity two captures must share to group.

A signature is a pure function of one record:

    tag | role | name | bg:<bg> | bd:<border> | br:<radius> | pd:<padding> | c:<text>

* ``tag``     lowercased tag name
* ``role``    explicit role, else the tag's implicit ARIA role
* ``name``    accessible name, else text preview, else empty
* ``br``      the four radius corners joined with ``|`` (TL, TR, BR, BL)
* ``pd``      the four padding sides joined with ``|`` (T, R, B, L)

Absent colours and radius render as ``"—"``. Changing any of this changes
every component id, so exports stamp ``SIGNATURE_VERSION`` alongside it.
"""

from ..evidence.models import EvidenceRecord
from .hashing import component_id

SIGNATURE_VERSION = 1

MISSING = "—"

# Implicit ARIA roles for tags that carry no explicit role.
_IMPLICIT_ROLES = {
    "button": "button",
    "a": "link",
    "input": "textbox",
    "select": "combobox",
    "textarea": "textbox",
    "img": "img",
    "nav": "navigation",
    "main": "main",
    "header": "banner",
    "footer": "contentinfo",
    "aside": "complementary",
    "form": "form",
    "article": "article",
    "section": "region",
    "h1": "heading",
    "h2": "heading",
    "h3": "heading",
    "h4": "heading",
    "h5": "heading",
    "h6": "heading",
}


def infer_role_from_tag(tag_name: str) -> str:
    """Return the implicit ARIA role for *tag_name*, ``"generic"`` if none."""
    return _IMPLICIT_ROLES.get(tag_name.lower(), "generic")


def build_signature(record: EvidenceRecord) -> str:
    """Build the grouping signature for *record*."""
    element = record.element
    prims = record.primitives

    tag = element.tag_name.lower()
    role = element.role or infer_role_from_tag(tag)
    name = element.accessible_name or element.text_preview or ""

    bg = (prims.background_color.raw if prims.background_color else "") or MISSING
    border = (prims.border_color.raw if prims.border_color else "") or MISSING
    radius = "|".join(prims.radius.corners()) if prims.radius else MISSING
    padding = "|".join(prims.spacing.sides())
    color = (prims.color.raw if prims.color else "") or MISSING

    return f"{tag}|{role}|{name}|bg:{bg}|bd:{border}|br:{radius}|pd:{padding}|c:{color}"


def component_id_for(record: EvidenceRecord) -> str:
    """Return the component id *record* aggregates under."""
    return component_id(build_signature(record))
