"""
Tests for data models: UnitReference, ExtractorConfig, UnitAnalysisResult
and WarningCollector.
"""

import json

import pytest

from unitref_analyzer import (
    ConfigurationError,
    ExtractorConfig,
    Relationship,
    ScanWarning,
    UnitAnalysisResult,
    UnitReference,
    WarningCollector,
)


class TestUnitReference:
    """Tests for UnitReference."""

    def test_equality_by_fields(self):
        assert UnitReference("a", Relationship.AFTER) == UnitReference(
            "a", Relationship.AFTER
        )
        assert UnitReference("a", Relationship.AFTER) != UnitReference(
            "a", Relationship.BEFORE
        )

    def test_frozen(self):
        ref = UnitReference("a", Relationship.AFTER)
        with pytest.raises(AttributeError):
            ref.unit_name = "b"

    def test_to_and_from_dict(self):
        ref = UnitReference("network.target", Relationship.REQUIRES)
        data = ref.to_dict()

        assert data == {"unit_name": "network.target", "relationship": "Requires"}
        assert UnitReference.from_dict(data) == ref

    def test_from_dict_unknown_relationship(self):
        with pytest.raises(ValueError):
            UnitReference.from_dict({"unit_name": "a", "relationship": "Conflicts"})


class TestExtractorConfig:
    """Tests for ExtractorConfig validation."""

    def test_defaults(self):
        config = ExtractorConfig()

        assert config.references_enabled is True
        assert config.encoding == "utf-8"
        assert config.relationships is None
        assert config.keeps(Relationship.WANTS)

    def test_relationship_filter(self):
        config = ExtractorConfig(relationships={"After", "Before"})

        assert isinstance(config.relationships, frozenset)
        assert config.keeps(Relationship.AFTER)
        assert not config.keeps(Relationship.REQUIRES)

    def test_unknown_relationship_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ExtractorConfig(relationships=frozenset({"after"}))

        assert exc_info.value.field_name == "relationships"

    def test_non_bool_toggle_rejected(self):
        with pytest.raises(ConfigurationError, match="references_enabled"):
            ExtractorConfig(references_enabled="yes")

    def test_empty_encoding_rejected(self):
        with pytest.raises(ConfigurationError):
            ExtractorConfig(encoding="")


class TestUnitAnalysisResult:
    """Tests for UnitAnalysisResult helpers."""

    def setup_method(self):
        self.result = UnitAnalysisResult(
            path="/etc/systemd/system/sshd.service",
            references=[
                UnitReference("network.target", Relationship.AFTER),
                UnitReference("sshd-keygen.target", Relationship.WANTS),
                UnitReference("network.target", Relationship.WANTS),
            ],
        )

    def test_unit_name(self):
        assert self.result.unit_name == "sshd.service"
        assert UnitAnalysisResult().unit_name is None

    def test_get_by_relationship(self):
        wants = self.result.get_by_relationship(Relationship.WANTS)

        assert [ref.unit_name for ref in wants] == [
            "sshd-keygen.target",
            "network.target",
        ]

    def test_referenced_units_unique_in_order(self):
        assert self.result.referenced_units() == [
            "network.target",
            "sshd-keygen.target",
        ]

    def test_to_json(self):
        data = json.loads(self.result.to_json())

        assert data["path"] == "/etc/systemd/system/sshd.service"
        assert len(data["references"]) == 3
        assert data["warnings"] == []


class TestWarningCollector:
    """Tests for WarningCollector."""

    def test_add_keeps_order(self):
        collector = WarningCollector()
        collector.add("INFO", "a")
        collector.add_skipped_line_warning(2, "=x", "missing key")

        warnings = collector.get_all()
        assert [w.level for w in warnings] == ["INFO", "WARNING"]
        assert warnings[1].message == "Skipped line (missing key)"
        assert warnings[1].context == "=x"
        assert len(collector) == 2

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid warning level"):
            ScanWarning(level="DEBUG", message="x")

    def test_str_includes_line(self):
        assert str(ScanWarning("WARNING", "Skipped", line_number=4)) == (
            "line 4: Skipped"
        )

