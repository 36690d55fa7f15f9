"""
Language utilities for the Fachdatenkatalog
"""

from __future__ import annotations

from typing import Any, List, Optional, Tuple

SUPPORTED_LANGUAGES: Tuple[str, ...] = ("de", "fr", "it", "en")

DEFAULT_LANGUAGE = "de"


def get_supported_languages() -> List[str]:
    """
    Get list of supported languages.

    Returns:
        List of language codes in scan order
    """
    return list(SUPPORTED_LANGUAGES)


def get_default_language() -> str:
    """
    Get default language.

    Returns:
        Default language code
    """
    return DEFAULT_LANGUAGE


def is_supported_language(lang: Any) -> bool:
    """
    Check if language is supported.

    Only the exact lowercase codes are accepted; region variants or
    language names are not.
    """
    return isinstance(lang, str) and lang in SUPPORTED_LANGUAGES


def normalize_language(lang: Optional[str]) -> Optional[str]:
    """
    Normalize a language code.

    Supports region codes (de-CH -> de, fr_CH -> fr) and surrounding
    whitespace. Unknown codes return None instead of a default so callers
    can decide whether to ignore them.
    """
    if not lang:
        return None

    raw = str(lang).strip().lower()
    if not raw:
        return None

    if "-" in raw:
        raw = raw.split("-", 1)[0].strip()
    if "_" in raw:
        raw = raw.split("_", 1)[0].strip()

    if raw in SUPPORTED_LANGUAGES:
        return raw
    return None


def fallback_languages(lang: str, fallback_lang: str = DEFAULT_LANGUAGE) -> List[str]:
    """
    Languages to try in order when a translation is missing.

    The requested language comes first, then the fallback language,
    then the remaining supported languages in scan order.
    """
    out: List[str] = []
    for candidate in (lang, fallback_lang, *SUPPORTED_LANGUAGES):
        if candidate and candidate not in out:
            out.append(candidate)
    return out


def get_language_name(lang: str) -> str:
    """
    Get human-readable name for language code.

    Args:
        lang: Language code

    Returns:
        Human-readable language name (German)
    """
    language_names = {"de": "Deutsch", "fr": "Französisch", "it": "Italienisch", "en": "Englisch"}

    return language_names.get(lang.lower(), lang)
