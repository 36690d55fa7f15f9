from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from fdk_shared.utils.language import DEFAULT_LANGUAGE, is_supported_language

_LANGUAGE: ContextVar[str] = ContextVar("fdk_language", default=DEFAULT_LANGUAGE)


def set_language(lang: Optional[str]) -> Optional[Token]:
    """
    Set the current display language.

    Unsupported codes are ignored and the previous language stays active;
    in that case None is returned instead of a reset token.
    """
    if not is_supported_language(lang):
        return None
    return _LANGUAGE.set(lang)


def reset_language(token: Optional[Token]) -> None:
    if token is None:
        return
    _LANGUAGE.reset(token)


def get_language() -> str:
    return _LANGUAGE.get()


@contextmanager
def language_scope(lang: Optional[str]) -> Iterator[str]:
    """Temporarily switch the display language for the enclosed block."""
    token = set_language(lang)
    try:
        yield get_language()
    finally:
        reset_language(token)
