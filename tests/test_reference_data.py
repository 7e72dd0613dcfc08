"""
Tests for the ingredient & brand knowledge base.

Usage:
    pytest tests/test_reference_data.py -v
"""

import json

import pytest

from unhyped.scoring.reference_data import (
    DEFAULT_ISSUES,
    IngredientKnowledgeBase,
    IngredientReferenceEntry,
    KnowledgeBaseError,
    Severity,
    default_knowledge_base,
    load_knowledge_base,
    parse_issue_table,
)


class TestDefaultKnowledgeBase:

    def setup_method(self):
        self.kb = default_knowledge_base()

    def test_all_bundled_issues_loaded(self):
        assert len(self.kb.issues) == len(DEFAULT_ISSUES)

    def test_lookup_is_case_insensitive(self):
        entry = self.kb.lookup("  Coconut Oil ")
        assert entry == IngredientReferenceEntry(issue="Comedogenic", severity=Severity.HIGH)

    def test_lookup_unknown_returns_none(self):
        assert self.kb.lookup("niacinamide") is None

    def test_issue_table_is_read_only(self):
        with pytest.raises(TypeError):
            self.kb.issues["new"] = IngredientReferenceEntry("Irritant", Severity.LOW)

    def test_custom_issue_table_keys_are_normalized(self):
        custom = IngredientKnowledgeBase(issues={
            "Snail Mucin": IngredientReferenceEntry("Irritant", Severity.LOW),
        })
        assert custom.lookup(" SNAIL MUCIN ") is not None
        assert self.kb.lookup("snail mucin") is None
        assert custom.beneficial == self.kb.beneficial


class TestParseIssueTable:

    def test_parse_valid_table(self):
        table = parse_issue_table({"Fragrance": {"issue": "Irritant", "severity": "HIGH"}})
        assert table == {"fragrance": IngredientReferenceEntry("Irritant", Severity.HIGH)}

    def test_missing_severity_defaults_low(self):
        table = parse_issue_table({"lanolin": {"issue": "Comedogenic"}})
        assert table["lanolin"].severity == Severity.LOW

    def test_unknown_severity_rejected(self):
        with pytest.raises(KnowledgeBaseError, match="severity"):
            parse_issue_table({"fragrance": {"issue": "Irritant", "severity": "extreme"}})

    def test_non_object_entry_rejected(self):
        with pytest.raises(KnowledgeBaseError):
            parse_issue_table({"fragrance": "Irritant"})


class TestLoadKnowledgeBase:

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text(json.dumps({
            "bakuchiol": {"issue": "Sensitizer", "severity": "medium"},
            "_well_known_brands": ["Acme Labs"],
        }))

        kb = load_knowledge_base(path)

        assert kb.lookup("bakuchiol").severity == Severity.MEDIUM
        assert kb.well_known_brands == ("acme labs",)
        # lists without an override keep the bundled values
        assert kb.beneficial == IngredientKnowledgeBase().beneficial

    def test_missing_file(self, tmp_path):
        with pytest.raises(KnowledgeBaseError, match="Cannot read"):
            load_knowledge_base(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text("{not json")
        with pytest.raises(KnowledgeBaseError, match="Invalid JSON"):
            load_knowledge_base(path)

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text("[]")
        with pytest.raises(KnowledgeBaseError):
            load_knowledge_base(path)

    def test_list_override_must_be_list(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text(json.dumps({"_beneficial": "niacinamide"}))
        with pytest.raises(KnowledgeBaseError, match="_beneficial"):
            load_knowledge_base(path)
