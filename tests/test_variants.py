"""Tests for variants/ - bucketing, group keys, variants and key explanation."""

import pytest

from capture_inventory.evidence import Rgba
from capture_inventory.variants import (
    GroupingMode,
    bucket_px,
    bucket_rgba,
    bucket_shadow,
    compute_group_key,
    compute_variant_key,
    derive_variants,
    explain_group_key,
    group_records,
    normalize_name,
)

FULL_KEY = "button::button::save::p8-16-8-16::bg32,112,208,1::bdnone::c240,240,240,1::shnoshadow"


# ---------------------------------------------------------------------------
# Buckets
# ---------------------------------------------------------------------------


class TestBucketPx:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("10px", "8"),
            ("14px", "16"),
            ("6px", "8"),
            ("13px", "12"),
            ("12.5px", "12"),
            ("0px", "0"),
            ("0", "0"),
            ("", "0"),
            (None, "0"),
            ("auto", "0"),
            ("1.5em", "0"),
        ],
    )
    def test_buckets(self, value, expected):
        assert bucket_px(value) == expected


class TestBucketRgba:
    def test_boundary(self):
        assert bucket_rgba(Rgba(250, 8, 127, 1)) == "240,0,128,1"

    def test_clamped_to_240(self):
        assert bucket_rgba(Rgba(255, 255, 255, 1)) == "240,240,240,1"

    def test_alpha_to_tenths(self):
        assert bucket_rgba(Rgba(0, 0, 0, 0.5)) == "0,0,0,0.5"
        assert bucket_rgba(Rgba(0, 0, 0, 0.04)) == "0,0,0,0"

    def test_absent(self):
        assert bucket_rgba(None) == "none"

    def test_legacy_strings(self):
        assert bucket_rgba("rgb(16, 32, 48)") == "16,32,48,1"
        assert bucket_rgba("rgba(250, 8, 127, 0.5)") == "240,0,128,0.5"
        assert bucket_rgba("12,24,36") == "16,32,32,1"

    def test_unrecognized_string(self):
        assert bucket_rgba("hsl(10, 50%, 50%)") == "none"
        assert bucket_rgba("#1976D2") == "none"


class TestBucketShadow:
    def test_none(self):
        assert bucket_shadow("none", None) == "noshadow"
        assert bucket_shadow(None, 3) == "noshadow"

    def test_presence_and_layers(self):
        assert bucket_shadow("some", 2) == "some-2"
        assert bucket_shadow("some", None) == "some-0"


class TestNormalizeName:
    def test_lowercase_and_collapse(self):
        assert normalize_name("  Save   Changes! ") == "save changes"

    def test_strips_edge_punctuation_only(self):
        assert normalize_name("...Sign-in!") == "sign-in"
        assert normalize_name("Save ->") == "save "
        assert normalize_name("«Résumé»") == "résumé"
        assert normalize_name("¿Qué?") == "qué"

    def test_empty(self):
        assert normalize_name(None) == ""
        assert normalize_name("") == ""
        assert normalize_name("!!!") == ""


# ---------------------------------------------------------------------------
# Keys
# ---------------------------------------------------------------------------


class TestGroupKeys:
    def test_name_only(self, make_record):
        assert compute_group_key(make_record(), GroupingMode.NAME_ONLY) == "button::save"

    def test_name_plus_type(self, make_record):
        assert compute_group_key(make_record(), GroupingMode.NAME_PLUS_TYPE) == "button::button::save"

    def test_name_type_primitives(self, make_record):
        assert compute_group_key(make_record(), GroupingMode.NAME_TYPE_PRIMITIVES) == FULL_KEY

    def test_mode_accepts_wire_value(self, make_record):
        assert compute_group_key(make_record(), "nameOnly") == "button::save"

    def test_tag_keeps_captured_case(self, make_record):
        record = make_record(tag="BUTTON")
        assert compute_group_key(record, GroupingMode.NAME_ONLY) == "BUTTON::save"
        assert explain_group_key(compute_group_key(record, "nameOnly")).tag == "BUTTON"

    def test_missing_role_and_name(self, make_record):
        record = make_record(tag="DIV", role=None, name=None)
        assert compute_group_key(record, GroupingMode.NAME_PLUS_TYPE) == "DIV::norole::"

    def test_shadow_segment(self, make_record):
        record = make_record(shadow="0 1px 2px black", shadow_presence="some", shadow_layers=2)
        assert compute_group_key(record, GroupingMode.NAME_TYPE_PRIMITIVES).endswith("::shsome-2")

    def test_variant_key(self, make_record):
        assert compute_variant_key(make_record()) == (
            "v::p8-16-8-16::bg32,112,208,1::bdnone::c240,240,240,1::shnoshadow"
        )

    def test_near_duplicates_share_a_bucket(self, make_record):
        a = make_record(record_id="a", padding=("8px", "16px", "8px", "16px"))
        b = make_record(record_id="b", padding=("9px", "15px", "7px", "17px"), name=" save! ")
        assert compute_group_key(a, GroupingMode.NAME_TYPE_PRIMITIVES) == compute_group_key(
            b, GroupingMode.NAME_TYPE_PRIMITIVES
        )


# ---------------------------------------------------------------------------
# Grouping and variants
# ---------------------------------------------------------------------------


class TestGroupRecords:
    def test_groups_sorted_by_count_then_key(self, make_record):
        records = [
            make_record(record_id="s1"),
            make_record(record_id="c1", name="Cancel"),
            make_record(record_id="s2", name="SAVE"),
            make_record(record_id="a1", name="Apply"),
        ]

        groups = group_records(records, GroupingMode.NAME_ONLY)

        assert [(g.key, g.count) for g in groups] == [
            ("button::save", 2),
            ("button::apply", 1),
            ("button::cancel", 1),
        ]
        assert [m.id for m in groups[0].members] == ["s1", "s2"]
        assert groups[0].explanation.name == "save"

    def test_every_record_in_exactly_one_group(self, sample_records):
        for mode in GroupingMode:
            groups = group_records(sample_records, mode)
            ids = [m.id for g in groups for m in g.members]
            assert sorted(ids) == sorted(r.id for r in sample_records)

    def test_empty(self):
        assert group_records([], GroupingMode.NAME_ONLY) == []


class TestDeriveVariants:
    def test_indices_follow_size_then_key(self, make_record):
        members = [
            make_record(record_id="plain-1"),
            make_record(record_id="wide", padding=("8px", "32px", "8px", "32px")),
            make_record(record_id="plain-2"),
            make_record(record_id="flat", background=None),
        ]

        variants = derive_variants(members)

        assert [v.index for v in variants] == [1, 2, 3]
        assert variants[0].count == 2
        assert [m.id for m in variants[0].members] == ["plain-1", "plain-2"]
        assert variants[1].key < variants[2].key
        assert sum(v.count for v in variants) == len(members)

    def test_to_dict(self, make_record):
        data = derive_variants([make_record(record_id="x")])[0].to_dict()
        assert data == {
            "key": compute_variant_key(make_record(record_id="x")),
            "index": 1,
            "count": 1,
            "captureIds": ["x"],
        }

    def test_empty(self):
        assert derive_variants([]) == []


# ---------------------------------------------------------------------------
# Explanation
# ---------------------------------------------------------------------------


class TestExplainGroupKey:
    def test_name_only(self):
        explanation = explain_group_key("button::save")
        assert explanation.tag == "button"
        assert explanation.role is None
        assert explanation.name == "save"
        assert explanation.primitives is None

    def test_norole_is_none(self):
        explanation = explain_group_key("div::norole::card")
        assert explanation.role is None
        assert explanation.name == "card"

    def test_empty_name(self):
        assert explain_group_key("div::norole::").name == "(no name)"
        assert explain_group_key("div::").name == "(no name)"

    def test_primitives(self):
        explanation = explain_group_key(FULL_KEY)
        assert explanation.role == "button"
        assert explanation.primitives.padding == "pt8 pr16 pb8 pl16"
        assert explanation.primitives.colors == "bg32,112,208,1 bdnone c240,240,240,1"
        assert explanation.primitives.shadow == "shnoshadow"

    def test_single_segment(self):
        assert explain_group_key("").tag == "unknown"
        explanation = explain_group_key("span")
        assert explanation.tag == "span"
        assert explanation.name is None
        assert explanation.primitives is None

    def test_round_trip_from_records(self, make_record):
        record = make_record(name="Save", role=None, tag="a")
        key = compute_group_key(record, GroupingMode.NAME_PLUS_TYPE)
        assert explain_group_key(key).to_dict() == {
            "tag": "a",
            "role": None,
            "name": "save",
            "primitives": None,
        }
