"""
Helpers for reading and building localized strings.

Localized values come in two explicit shapes:
- a plain ``str`` (already resolved, passed through unchanged)
- a ``LocalizedText`` record (a ``{"de": ..., "fr": ...}`` mapping is
  converted to one at the boundary)

Lookups never raise; anything unusable resolves to an empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional

from fdk_shared.i18n.context import get_language
from fdk_shared.models.i18n import LocalizedTextLike
from fdk_shared.utils.language import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from fdk_shared.value_objects.localized_text import LocalizedText


def as_localized_text(value: Any) -> Optional[LocalizedText]:
    """Convert a localized record (value object or language map) to ``LocalizedText``."""
    if isinstance(value, LocalizedText):
        return value
    if isinstance(value, Mapping):
        return LocalizedText.from_dict(value)
    return None


def resolve(value: LocalizedTextLike, fallback_lang: str = DEFAULT_LANGUAGE, *, lang: Optional[str] = None) -> str:
    """
    Get the display string of a localized value.

    Args:
        value: Plain string, ``LocalizedText`` or language map
        fallback_lang: Tried when the selected language has no value
        lang: Explicit language; defaults to the current display language

    Returns:
        The localized string, or "" if nothing is available

    Example:
        >>> resolve({"de": "Wand", "fr": "Mur", "it": "Parete", "en": "Wall"})
        'Wand'
        >>> resolve(None)
        ''
    """
    if value is None:
        return ""

    if isinstance(value, str):
        return value

    record = as_localized_text(value)
    if record is None:
        return ""

    selected = lang or get_language()
    return record.get(selected, fallback_lang)


def resolve_list(values: Any, *, lang: Optional[str] = None) -> List[str]:
    """
    Resolve a list of localized values (tags, for instance).

    Example:
        >>> resolve_list([{"de": "Betrieb", "fr": "Exploitation"}, {"de": "Koordination"}])
        ['Betrieb', 'Koordination']
    """
    if not isinstance(values, list):
        return []
    return [resolve(value, lang=lang) for value in values]


def is_localized_text(value: Any) -> bool:
    """True for a localized record carrying at least one recognized language key."""
    if isinstance(value, LocalizedText):
        return True
    if not isinstance(value, Mapping):
        return False
    return any(lang in value for lang in SUPPORTED_LANGUAGES)


def from_single_value(value: Optional[str]) -> LocalizedText:
    """
    Create a localized record with the German value and empty placeholders.

    Example:
        >>> from_single_value("Wand").to_dict()
        {'de': 'Wand', 'fr': '', 'it': '', 'en': ''}
    """
    return LocalizedText.from_value(value, DEFAULT_LANGUAGE)


def from_value_list(values: Any) -> List[LocalizedText]:
    """Create localized records from a list of German strings; non-lists give []."""
    if not isinstance(values, list):
        return []
    return LocalizedText.from_values(values, DEFAULT_LANGUAGE)
