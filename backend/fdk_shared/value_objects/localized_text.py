"""
Localized text value object
Immutable so that migrated records can share instances safely
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from fdk_shared.utils.language import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, fallback_languages


@dataclass(frozen=True)
class LocalizedText:
    """
    Text in the four catalog languages

    A language counts as missing when its value is empty.
    """

    de: str = ""
    fr: str = ""
    it: str = ""
    en: str = ""

    def value(self, lang: str) -> str:
        """Raw value for one language ("" for unknown codes)"""
        if lang not in SUPPORTED_LANGUAGES:
            return ""
        return getattr(self, lang) or ""

    def get(self, lang: str, fallback_lang: str = DEFAULT_LANGUAGE) -> str:
        """
        Text for a language with fallback

        Args:
            lang: Preferred language code
            fallback_lang: Tried when the preferred language is empty

        Returns:
            First non-empty value along lang -> fallback_lang -> de, fr, it, en, or ""
        """
        for candidate in fallback_languages(lang, fallback_lang):
            value = self.value(candidate)
            if value:
                return value
        return ""

    def has_value(self, lang: str) -> bool:
        """True when the language has a non-empty value"""
        return bool(self.value(lang))

    def has_any_value(self) -> bool:
        return any(self.value(lang) for lang in SUPPORTED_LANGUAGES)

    def get_available_languages(self) -> List[str]:
        """Languages with a non-empty value, in scan order"""
        return [lang for lang in SUPPORTED_LANGUAGES if self.value(lang)]

    def to_dict(self) -> Dict[str, str]:
        """All four languages, empty ones included"""
        return {lang: self.value(lang) for lang in SUPPORTED_LANGUAGES}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LocalizedText":
        """Build from a language map; unknown keys and non-string values are dropped"""
        kwargs = {}
        for lang in SUPPORTED_LANGUAGES:
            raw = data.get(lang)
            kwargs[lang] = raw if isinstance(raw, str) else ""
        return cls(**kwargs)

    @classmethod
    def from_value(cls, value: Optional[str], lang: str = DEFAULT_LANGUAGE) -> "LocalizedText":
        """Single value stored under one language, the others left empty"""
        if lang not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {lang!r}")
        return cls(**{lang: str(value) if value else ""})

    @classmethod
    def from_values(cls, values: Iterable[Optional[str]], lang: str = DEFAULT_LANGUAGE) -> List["LocalizedText"]:
        return [cls.from_value(value, lang) for value in values]

    def __str__(self) -> str:
        return self.get(DEFAULT_LANGUAGE)

    def __bool__(self) -> bool:
        return self.has_any_value()
