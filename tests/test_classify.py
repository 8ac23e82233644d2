"""Tests for classify.py - categories, page labels, tokens and style kinds."""

import pytest

from capture_inventory.classify import (
    DESIGN_SYSTEM,
    NO_TOKEN,
    component_name,
    component_type,
    extract_token,
    infer_category,
    infer_source,
    infer_style_kind,
    infer_style_source,
)
from capture_inventory.evidence import ElementCore


class TestInferCategory:
    @pytest.mark.parametrize(
        "tag,role,expected",
        [
            ("button", None, "Actions"),
            ("a", None, "Actions"),
            ("div", "link", "Actions"),
            ("input", None, "Forms"),
            ("div", "combobox", "Forms"),
            ("nav", None, "Navigation"),
            ("ul", "navigation", "Navigation"),
            ("div", "alert", "Feedback"),
            ("p", "status", "Feedback"),
            ("svg", None, "Media"),
            ("span", "img", "Media"),
            ("div", None, "Layout"),
        ],
    )
    def test_taxonomy(self, tag, role, expected):
        assert infer_category(ElementCore(tag_name=tag, role=role)) == expected

    def test_first_match_wins(self):
        # An input with a button role is an action, not a form field
        assert infer_category(ElementCore(tag_name="input", role="button")) == "Actions"

    def test_case_insensitive(self):
        assert infer_category(ElementCore(tag_name="BUTTON")) == "Actions"
        assert infer_category(ElementCore(tag_name="div", role="Alert")) == "Feedback"


class TestDisplayFields:
    def test_type_prefers_role(self):
        assert component_type(ElementCore(tag_name="DIV", role="tab")) == "tab"
        assert component_type(ElementCore(tag_name="DIV")) == "div"

    def test_name_fallbacks(self):
        assert component_name(ElementCore(tag_name="a", accessible_name="Docs", text_preview="x")) == "Docs"
        assert component_name(ElementCore(tag_name="a", text_preview="Read more")) == "Read more"
        assert component_name(ElementCore(tag_name="DIV", role="tab")) == "div (tab)"
        assert component_name(ElementCore(tag_name="Section")) == "section"


class TestInferSource:
    """Page labels from URLs, with unparseable input degrading to Unknown."""

    def test_not_a_url(self):
        assert infer_source("not a url") == "Unknown"

    def test_root_is_homepage(self):
        assert infer_source("https://x.test/") == "Homepage"
        assert infer_source("https://x.test") == "Homepage"

    def test_first_segment_capitalized(self):
        assert infer_source("https://x.test/dashboard") == "Dashboard"
        assert infer_source("https://x.test/settings/profile?tab=1") == "Settings"
        assert infer_source("https://x.test//docs/") == "Docs"

    def test_only_first_letter_changes(self):
        assert infer_source("https://x.test/myAccount") == "MyAccount"

    def test_backslash_is_a_separator_for_web_urls(self):
        assert infer_source("https://x.test\\dashboard") == "Dashboard"
        assert infer_source("https:\\\\x.test\\settings\\profile") == "Settings"
        assert infer_source("https://x.test\\") == "Homepage"

    def test_backslash_after_query_is_kept(self):
        assert infer_source("https://x.test/?next=\\admin") == "Homepage"

    @pytest.mark.parametrize("url", ["", "https://", "http://exa mple.test/a", "https://x.test:99999/a"])
    def test_unparseable(self, url):
        assert infer_source(url) == "Unknown"


class TestTokens:
    def test_sentinel_never_empty(self):
        assert extract_token(None) == NO_TOKEN
        assert extract_token({}) == NO_TOKEN
        assert extract_token({"color": "red"}) == NO_TOKEN
        assert NO_TOKEN == "—"

    def test_first_variable_in_mapping_order(self):
        sources = {
            "color": "#000",
            "backgroundColor": "var(--surface)",
            "borderColor": "var(--border)",
        }
        assert extract_token(sources) == "--surface"

    def test_variable_inside_expression(self):
        assert extract_token({"padding": "calc(var(--space-2) * 2)"}) == "--space-2"


class TestStyleKinds:
    @pytest.mark.parametrize(
        "prop,kind",
        [
            ("backgroundColor", "color"),
            ("COLOR", "color"),
            ("borderColor", "color"),
            ("paddingTop", "spacing"),
            ("marginLeft", "spacing"),
            ("fontSize", "typography"),
            ("lineHeight", "typography"),
            ("boxShadow", "shadow"),
            ("radiusTopLeft", "border"),
            ("opacity", "unknown"),
        ],
    )
    def test_kind_table(self, prop, kind):
        assert infer_style_kind(prop) == kind

    def test_design_system_source(self):
        assert infer_style_source({"color": "var(--ink)"}, "https://x.test/a") == DESIGN_SYSTEM

    def test_source_falls_back_to_page(self):
        assert infer_style_source({"color": "#000"}, "https://x.test/pricing") == "Pricing"
        assert infer_style_source(None, "not a url") == "Unknown"
