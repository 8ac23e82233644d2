"""Tests for the exception hierarchy."""

import pytest

from capture_inventory.exceptions import (
    ConfigurationError,
    EvidenceFormatError,
    InvalidConfigError,
    InventoryError,
)


class TestInventoryError:
    def test_message_only(self):
        error = InventoryError("something broke")
        assert str(error) == "something broke"
        assert error.details == {}

    def test_details_rendered(self):
        error = InventoryError("bad input", details={"file": "a.json", "line": "3"})
        assert str(error) == "bad input (file=a.json, line=3)"


class TestHierarchy:
    @pytest.mark.parametrize("cls", [ConfigurationError, InvalidConfigError, EvidenceFormatError])
    def test_all_are_inventory_errors(self, cls):
        assert issubclass(cls, InventoryError)

    def test_invalid_config_fields(self):
        error = InvalidConfigError("verbosity", "loud", "must be one of: quiet, normal, verbose")
        assert isinstance(error, ConfigurationError)
        assert error.key == "verbosity"
        assert error.details["value"] == "loud"
        assert "Invalid configuration for verbosity" in str(error)

    def test_evidence_format_source_optional(self):
        assert "source" not in EvidenceFormatError("bad").details
        error = EvidenceFormatError("bad", source="x.json")
        assert error.details == {"reason": "bad", "source": "x.json"}
        assert str(error).startswith("Malformed evidence: bad")
