"""Tests for the field rule registry."""

from pathlib import Path

import pytest

from campaign_insights.exceptions import FieldRegistryError
from campaign_insights.extraction import (
    DEFAULT_REGISTRY_PATH,
    ReportExtractor,
    load_field_rules,
)
from campaign_insights.extraction.rules import build_rule, label_pattern
from campaign_insights.models import CampaignReport


class TestLabelPattern:
    def test_word_initials_case_tolerant(self) -> None:
        assert label_pattern("Cliques no link") == r"[Cc]liques\s+[Nn]o\s+[Ll]ink"

    def test_accented_initial(self) -> None:
        assert label_pattern("Únicos") == "[Úú]nicos"

    def test_non_letters_escaped(self) -> None:
        assert label_pattern("Até 25%") == r"[Aa]té\s+25%"
        assert label_pattern("CPM (R$)") == r"[Cc]PM\s+\(R\$\)"


class TestBuildRule:
    def test_unknown_shape(self) -> None:
        with pytest.raises(FieldRegistryError, match="Unknown shape"):
            build_rule("x", {"shape": "date", "labels": ["X"], "value": "(?P<value>.)"})

    def test_missing_value(self) -> None:
        with pytest.raises(FieldRegistryError, match="Invalid rule"):
            build_rule("x", {"shape": "number", "labels": ["X"]})

    def test_bad_regex(self) -> None:
        with pytest.raises(FieldRegistryError, match="Invalid regex"):
            build_rule("x", {"shape": "number", "labels": ["X"], "value": "(?P<value>["})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(FieldRegistryError, match="must be a mapping"):
            build_rule("x", "number")  # type: ignore[arg-type]

    def test_qualifier_disabled(self) -> None:
        rule = build_rule(
            "x",
            {"shape": "number", "labels": ["Gasto"], "qualifier": False, "value": r"(?P<value>\d+)"},
        )
        assert rule.pattern.search("Gasto: 10")
        assert rule.pattern.search("Gasto total: 10") is None

    def test_path(self) -> None:
        rule = build_rule(
            "results.video_views",
            {"shape": "cost_pair", "labels": ["V"], "value": r"(?P<count>\d+) (?P<cost>\d+)"},
        )
        assert rule.path == ("results", "video_views")


class TestLoadFieldRules:
    def test_bundled_registry_covers_record(self) -> None:
        """Every leaf of the record has a rule."""
        names = {rule.name for rule in load_field_rules()}
        assert "campaign_name" in names
        assert "results.total_engagements" in names
        assert "video_performance.at_end" in names
        assert len(names) == 30

    def test_default_path_exists(self) -> None:
        assert DEFAULT_REGISTRY_PATH.exists()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FieldRegistryError, match="Failed to load"):
            load_field_rules(tmp_path / "nope.yaml")

    def test_malformed_registry(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        with pytest.raises(FieldRegistryError, match="no 'fields' mapping"):
            load_field_rules(path)

    def test_custom_registry(self, tmp_path: Path) -> None:
        """A partial registry still yields a fully populated record."""
        path = tmp_path / "registry.yaml"
        path.write_text(
            "fields:\n"
            "  campaign_name:\n"
            "    shape: text\n"
            "    labels: [\"Nome do anúncio\"]\n"
            "    value: '(?P<value>[^\\n]+)'\n"
            "    default: Sem nome\n",
            encoding="utf-8",
        )
        extractor = ReportExtractor(registry_path=path)
        report = extractor.parse("Nome do anúncio: Lançamento\nGasto Total: R$ 10,00")
        assert report.campaign_name == "Lançamento"
        assert report.investment == CampaignReport().investment

        assert extractor.parse("").campaign_name == "Sem nome"
