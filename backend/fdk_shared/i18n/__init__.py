"""
Shared i18n helpers (DE/FR/IT/EN).

Design goals:
- Current display language via ContextVar, overridable per call
- German is the source language and the default fallback
- Lookups degrade to "" instead of raising
"""

from .context import get_language, language_scope, reset_language, set_language
from .resolver import (
    as_localized_text,
    from_single_value,
    from_value_list,
    is_localized_text,
    resolve,
    resolve_list,
)

__all__ = [
    "get_language",
    "set_language",
    "reset_language",
    "language_scope",
    "resolve",
    "resolve_list",
    "is_localized_text",
    "as_localized_text",
    "from_single_value",
    "from_value_list",
]
