"""
Unit tests for the localized-string resolver
"""

import pytest

from fdk_shared.i18n import (
    from_single_value,
    from_value_list,
    is_localized_text,
    language_scope,
    resolve,
    resolve_list,
    set_language,
)
from fdk_shared.value_objects import LocalizedText

WALL = {"de": "Wand", "fr": "Mur", "it": "Parete", "en": "Wall"}


class TestResolve:
    """resolve() lookups and fallbacks"""

    def test_none_and_plain_string(self):
        assert resolve(None) == ""
        assert resolve("plain") == "plain"
        assert resolve("") == ""

    @pytest.mark.parametrize("lang", ["de", "fr", "it", "en"])
    def test_current_language_wins_when_present(self, lang):
        set_language(lang)
        assert resolve(WALL) == WALL[lang]
        assert resolve(LocalizedText(**WALL)) == WALL[lang]

    def test_falls_back_to_fallback_language(self):
        set_language("fr")
        assert resolve({"de": "Wand", "fr": "", "en": "Wall"}) == "Wand"
        assert resolve({"de": "Wand", "fr": "", "en": "Wall"}, "en") == "Wall"

    def test_scans_languages_in_fixed_order(self):
        assert resolve({"de": "", "fr": "Mur"}) == "Mur"
        assert resolve({"en": "Wall", "it": "Parete"}) == "Parete"

    def test_nothing_available(self):
        assert resolve({"de": "", "fr": "", "it": "", "en": ""}) == ""
        assert resolve({}) == ""
        assert resolve(LocalizedText()) == ""

    def test_unusable_input_degrades_to_empty_string(self):
        assert resolve(["Wand"]) == ""
        assert resolve(42) == ""
        assert resolve({"de": None, "fr": 3}) == ""

    def test_explicit_language_overrides_context(self):
        set_language("de")
        assert resolve(WALL, lang="it") == "Parete"

    def test_language_scope_restores_previous_language(self):
        with language_scope("en"):
            assert resolve(WALL) == "Wall"
        assert resolve(WALL) == "Wand"


class TestResolveList:
    def test_maps_each_record(self):
        tags = [{"de": "Betrieb", "fr": "Exploitation"}, {"de": "Koordination", "fr": "Coordination"}]
        assert resolve_list(tags) == ["Betrieb", "Koordination"]
        set_language("fr")
        assert resolve_list(tags) == ["Exploitation", "Coordination"]

    def test_non_list_gives_empty_list(self):
        assert resolve_list(None) == []
        assert resolve_list({"de": "Betrieb"}) == []
        assert resolve_list("Betrieb") == []


class TestIsLocalizedText:
    def test_recognizes_language_maps(self):
        assert is_localized_text({"de": "Wand"})
        assert is_localized_text({"en": "", "other": 1})
        assert is_localized_text(LocalizedText(de="Wand"))

    def test_rejects_other_values(self):
        assert not is_localized_text(None)
        assert not is_localized_text("Wand")
        assert not is_localized_text(["de"])
        assert not is_localized_text({})
        assert not is_localized_text({"ko": "벽"})


class TestBuilders:
    def test_from_single_value(self):
        assert from_single_value("Wand").to_dict() == {"de": "Wand", "fr": "", "it": "", "en": ""}

    def test_from_single_value_falsy(self):
        assert from_single_value(None).to_dict() == {"de": "", "fr": "", "it": "", "en": ""}
        assert from_single_value("") == LocalizedText()

    def test_from_value_list(self):
        records = from_value_list(["Betrieb", "Koordination"])
        assert [r.to_dict() for r in records] == [
            {"de": "Betrieb", "fr": "", "it": "", "en": ""},
            {"de": "Koordination", "fr": "", "it": "", "en": ""},
        ]

    def test_from_value_list_non_list(self):
        assert from_value_list(None) == []
        assert from_value_list("Betrieb") == []
