"""Tests for export.py - capture and inventory exports."""

import json
from datetime import datetime, timezone

import pytest

from capture_inventory.evidence import EvidenceRecord
from capture_inventory.exceptions import InventoryError
from capture_inventory.export import build_capture_export, build_inventory_export, write_export
from capture_inventory.variants import GroupingMode, compute_group_key, compute_variant_key

STAMP = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


class TestCaptureExport:
    def test_stamps_each_capture(self, sample_records):
        payload = build_capture_export(sample_records, GroupingMode.NAME_PLUS_TYPE, exported_at=STAMP)

        assert payload["exportedAt"] == "2026-01-02T03:04:05+00:00"
        assert payload["signatureVersion"] == 1
        assert [c["captureId"] for c in payload["captures"]] == ["a1", "a2", "b1", "c1"]

        entry = payload["captures"][3]
        record = sample_records[3]
        assert entry["url"] == record.url
        assert entry["projectId"] == "audit-1"
        assert entry["viewerDerived"] == {
            "groupingMode": "namePlusType",
            "groupKey": compute_group_key(record, GroupingMode.NAME_PLUS_TYPE),
            "variantKey": compute_variant_key(record),
            "signatureVersion": 1,
        }

    def test_carries_capture_context(self, make_payload):
        payload = make_payload(record_id="ctx")
        payload["element"]["id"] = "save-btn"
        payload["scope"] = {"nearestLandmarkRole": "main"}
        payload["createdAt"] = 1700000000000
        record = EvidenceRecord.from_dict(payload)

        entry = build_capture_export([record], "nameOnly", exported_at=STAMP)["captures"][0]

        assert entry["elementId"] == "save-btn"
        assert entry["landmarkRole"] == "main"
        assert entry["createdAt"] == 1700000000000

    def test_missing_context_is_null(self, make_record):
        entry = build_capture_export([make_record()], "nameOnly", exported_at=STAMP)["captures"][0]
        assert entry["elementId"] is None
        assert entry["landmarkRole"] is None
        assert entry["createdAt"] is None

    def test_accepts_wire_mode(self, sample_records):
        payload = build_capture_export(sample_records, "nameOnly", exported_at=STAMP)
        assert payload["captures"][0]["viewerDerived"]["groupKey"] == "button::save"

    def test_default_timestamp(self, sample_records):
        payload = build_capture_export(sample_records, GroupingMode.NAME_ONLY)
        assert datetime.fromisoformat(payload["exportedAt"]).tzinfo is not None


class TestInventoryExport:
    def test_components_and_styles(self, sample_records):
        payload = build_inventory_export(sample_records, exported_at=STAMP)

        assert payload["signatureVersion"] == 1
        assert sum(c["capturesCount"] for c in payload["components"]) == len(sample_records)
        assert payload["components"][0]["capturesCount"] == 2
        assert all("usageCount" in s for s in payload["styles"])


class TestWriteExport:
    def test_writes_indented_json(self, tmp_path, sample_records):
        payload = build_inventory_export(sample_records, exported_at=STAMP)
        target = write_export(payload, tmp_path / "out" / "inventory.json")

        assert target.exists()
        text = target.read_text(encoding="utf-8")
        assert text.startswith("{\n  ")
        assert json.loads(text) == payload

    def test_keeps_non_ascii(self, tmp_path):
        target = write_export({"name": "Résumé —"}, tmp_path / "x.json")
        assert "Résumé —" in target.read_text(encoding="utf-8")

    def test_unwritable_target(self, tmp_path):
        with pytest.raises(InventoryError, match="Cannot write export"):
            write_export({}, tmp_path)
