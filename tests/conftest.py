# tests/conftest.py
# Keep builds free of GA_* environment leakage and provide in-memory token sources.

from __future__ import annotations

import json
import os
from typing import Callable, Dict, List

import pytest


def _clear_ga_env() -> None:
    """Drop GA_* settings so tests see defaults unless they set them."""
    for name in list(os.environ):
        if name.startswith("GA_"):
            os.environ.pop(name, None)


# Must run before geoabbrev.config is first imported
_clear_ga_env()

from geoabbrev.tokens.types import TokenFileImportNotSupported  # noqa: E402


class FakeTokenSource:
    """Dict-backed token source recording which codes were requested."""

    def __init__(self, data: Dict[str, object]) -> None:
        self._data = data
        self.calls: List[str] = []

    def __call__(self, code: str) -> str:
        self.calls.append(code)
        try:
            raw = self._data[code]
        except KeyError:
            raise TokenFileImportNotSupported(code) from None
        return raw if isinstance(raw, str) else json.dumps(raw)


@pytest.fixture
def fake_source() -> Callable[[Dict[str, object]], FakeTokenSource]:
    """Factory for in-memory token sources keyed by language code."""
    return FakeTokenSource
