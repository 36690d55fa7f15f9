from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, List

import pytest


def pytest_configure() -> None:
    """
    Keep the suite independent from a developer's local .env and data dir.
    """
    os.environ.setdefault("DOCKER_CONTAINER", "true")
    os.environ.pop("FDK_DATA_DIR", None)
    os.environ.pop("FDK_DEFAULT_LANGUAGE", None)


@pytest.fixture(autouse=True)
def _reset_display_language():
    from fdk_shared.i18n import set_language

    set_language("de")
    yield
    set_language("de")


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Write a JSON payload below tmp_path and return its path"""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sequential_ids() -> Callable[[], str]:
    """Deterministic id factory: id-1, id-2, ..."""
    issued: List[str] = []

    def _next() -> str:
        issued.append(f"id-{len(issued) + 1}")
        return issued[-1]

    return _next
