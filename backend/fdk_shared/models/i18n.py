"""
Localized-text primitives (model layer).

Kept dependency-light so both the resolver helpers and the pydantic record
models can import it.
"""

from __future__ import annotations

from typing import Mapping, Optional, Union

from fdk_shared.value_objects.localized_text import LocalizedText

# Accepted by the resolver:
# - a plain string (already resolved)
# - a LocalizedText record
# - a language map like {"de": "...", "fr": "..."}
LocalizedTextLike = Optional[Union[str, LocalizedText, Mapping[str, str]]]
