"""Shared builders and fixtures for Capture Inventory tests."""

import json

import pytest

from capture_inventory.evidence import EvidenceRecord

WHITE = {"raw": "rgb(255, 255, 255)", "rgba": {"r": 255, "g": 255, "b": 255, "a": 1}}
BLUE = {"raw": "#1976D2", "rgba": {"r": 25, "g": 118, "b": 210, "a": 1}}
BLACK = {"raw": "rgb(0, 0, 0)", "rgba": {"r": 0, "g": 0, "b": 0, "a": 1}}


def build_payload(
    record_id="cap-1",
    url="https://shop.test/dashboard",
    tag="button",
    role="button",
    name="Save",
    text=None,
    padding=("8px", "16px", "8px", "16px"),
    background=BLUE,
    color=WHITE,
    border=None,
    radius=None,
    typography=None,
    margin=None,
    border_width=None,
    gap=None,
    shadow="none",
    shadow_presence="none",
    shadow_layers=None,
    sources=None,
    project_id=None,
    screenshot=None,
    disabled=None,
    aria_disabled=None,
):
    """Capture store JSON for one element. Pass ``None`` to drop an optional primitive."""
    top, right, bottom, left = padding
    intent = {}
    if name is not None:
        intent["accessibleName"] = name
    if disabled is not None:
        intent["disabled"] = disabled
    if aria_disabled is not None:
        intent["ariaDisabled"] = aria_disabled

    element = {"tagName": tag, "intent": intent}
    if role is not None:
        element["role"] = role
    if text is not None:
        element["textPreview"] = text

    primitives = {
        "spacing": {
            "paddingTop": top,
            "paddingRight": right,
            "paddingBottom": bottom,
            "paddingLeft": left,
        },
        "shadow": {"boxShadowRaw": shadow, "shadowPresence": shadow_presence},
    }
    if shadow_layers is not None:
        primitives["shadow"]["shadowLayerCount"] = shadow_layers
    if background is not None:
        primitives["backgroundColor"] = background
    if color is not None:
        primitives["color"] = color
    if border is not None:
        primitives["borderColor"] = border
    if radius is not None:
        primitives["radius"] = dict(zip(("topLeft", "topRight", "bottomRight", "bottomLeft"), radius))
    if typography is not None:
        primitives["typography"] = dict(
            zip(("fontFamily", "fontSize", "fontWeight", "lineHeight"), typography)
        )
    if margin is not None:
        primitives["margin"] = dict(
            zip(("marginTop", "marginRight", "marginBottom", "marginLeft"), margin)
        )
    if border_width is not None:
        primitives["borderWidth"] = dict(zip(("top", "right", "bottom", "left"), border_width))
    if gap is not None:
        primitives["gap"] = {"rowGap": gap[0], "columnGap": gap[1]}
    if sources is not None:
        primitives["sources"] = sources

    payload = {
        "id": record_id,
        "url": url,
        "element": element,
        "styles": {"primitives": primitives},
    }
    if project_id is not None:
        payload["projectId"] = project_id
    if screenshot is not None:
        payload["screenshot"] = {"screenshotBlobId": screenshot}
    return payload


def build_record(**kwargs):
    return EvidenceRecord.from_dict(build_payload(**kwargs))


@pytest.fixture
def make_payload():
    """Factory for capture store JSON payloads."""
    return build_payload


@pytest.fixture
def make_record():
    """Factory for parsed evidence records."""
    return build_record


# Mixed evidence across three pages and two projects (a1/a2 are unscoped).
SAMPLE = [
    dict(record_id="a1", url="https://shop.test/"),
    dict(record_id="a2", url="https://shop.test/dashboard"),
    dict(
        record_id="b1",
        url="https://shop.test/dashboard",
        tag="a",
        role=None,
        name="Docs",
        background=WHITE,
        color=BLACK,
        padding=("0px", "0px", "0px", "0px"),
        project_id="audit-2",
    ),
    dict(
        record_id="c1",
        url="https://shop.test/settings/profile",
        tag="input",
        role="textbox",
        name="Email",
        background=WHITE,
        color=BLACK,
        border=BLACK,
        radius=("4px", "4px", "4px", "4px"),
        sources={"borderColor": "var(--border-strong)"},
        project_id="audit-1",
    ),
]


@pytest.fixture
def sample_records():
    return [build_record(**kwargs) for kwargs in SAMPLE]


@pytest.fixture
def evidence_file(tmp_path):
    """SAMPLE written in the capture store's export shape."""
    path = tmp_path / "evidence.json"
    payload = {"captures": [build_payload(**kwargs) for kwargs in SAMPLE]}
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
