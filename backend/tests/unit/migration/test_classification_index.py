"""
Unit tests for classification code parsing and catalog lookup
"""

import pytest

from fdk_migration.services.classification_index import (
    ClassificationIndex,
    normalize_system_name,
    parse_classification_code,
)
from fdk_shared.models.catalog import ClassificationEntry, ClassificationRef


def _entry(system, code, clf_id):
    return ClassificationEntry(system=system, code=code, id=clf_id)


@pytest.fixture
def index():
    return ClassificationIndex.from_catalog([
        _entry("eBKP-H", "100", "ebkp-100"),
        _entry("KBOB", "D 0165", "kbob-d0165"),
        _entry("Uniformat II", "B2010", "uf-b2010"),
        _entry("DIN276", "300", "din-300"),
    ])


class TestParseClassificationCode:

    @pytest.mark.parametrize("raw, expected", [
        ("100 – Immobilienmanagement", "100"),
        ("D 0165 – Dokumentation Hochbau", "D 0165"),
        ("B2010 - Exterior Walls", "B2010"),
        ("1.2.3 – Planung", "1.2.3"),
        ("C2.1-Innenwände", "C2.1"),
    ])
    def test_prefix_before_dash(self, raw, expected):
        assert parse_classification_code(raw) == expected

    def test_without_separator_uses_first_token(self):
        assert parse_classification_code("300 Bauwerk") == "300"
        assert parse_classification_code("  300 Bauwerk") == "300"
        assert parse_classification_code("ABC") == "ABC"

    def test_blank(self):
        assert parse_classification_code("") == ""
        assert parse_classification_code("   ") == ""


class TestNormalizeSystemName:

    def test_aliases(self):
        assert normalize_system_name("Uniformat II 2010") == "Uniformat II"
        assert normalize_system_name("Uniformat II") == "Uniformat II"
        assert normalize_system_name("eBKP-H") == "eBKP-H"

    def test_unknown_passes_through(self):
        assert normalize_system_name("OmniClass") == "OmniClass"


class TestClassificationIndex:

    def test_lookup(self, index):
        assert len(index) == 4
        assert index.lookup("eBKP-H", "100 – Foo") == "ebkp-100"
        assert index.lookup("Uniformat II 2010", "B2010 – Exterior Walls") == "uf-b2010"
        assert index.lookup("eBKP-H", "999 – Unknown") is None
        assert index.lookup("SIA", "100 – Foo") is None

    def test_later_duplicate_wins(self):
        index = ClassificationIndex.from_catalog([
            _entry("GEFMA", "100", "first"),
            _entry("GEFMA", "100", "second"),
        ])
        assert index.lookup("GEFMA", "100 – Grundlagen") == "second"

    def test_catalog_system_names_are_normalized(self):
        index = ClassificationIndex.from_catalog([_entry("Uniformat II 2010", "A10", "uf-a10")])
        assert ("Uniformat II", "A10") in index
        assert index.lookup("Uniformat II", "A10 – Foundations") == "uf-a10"

    def test_resolve_references_drops_misses_and_keeps_order(self, index):
        refs = index.resolve_references({
            "KBOB": ["D 0165 – Dokumentation Hochbau", "X 1 – Unbekannt"],
            "eBKP-H": ["100 – Immobilienmanagement", "100 – Immobilienmanagement"],
            "Unknown": ["100 – Foo"],
        })
        assert refs == [
            ClassificationRef(id="kbob-d0165"),
            ClassificationRef(id="ebkp-100"),
            ClassificationRef(id="ebkp-100"),
        ]

    def test_resolve_references_skips_malformed_values(self, index):
        refs = index.resolve_references({
            "eBKP-H": "100 – Immobilienmanagement",
            "DIN276": [None, 300, "300 – Bauwerk"],
        })
        assert refs == [ClassificationRef(id="din-300")]

    def test_resolve_references_empty(self, index):
        assert index.resolve_references({}) == []
