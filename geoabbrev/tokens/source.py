"""Token source: raw per-language token data shipped with the package."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Callable, Dict

from .types import TokenFileImportNotSupported

# Signature of a token source: language code -> raw JSON text
TokenSource = Callable[[str], str]

_DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Data file per language code
_TOKEN_FILES: Dict[str, str] = {
    "de": "de.json",
    "en": "en.json",
    "es": "es.json",
    "et": "et.json",
    "fi": "fi.json",
    "fr": "fr.json",
    "he": "he.json",
    "id": "id.json",
    "it": "it.json",
    "ja": "ja.json",
    "nl": "nl.json",
    "no": "no.json",
    "pl": "pl.json",
    "pt": "pt.json",
    "ro": "ro.json",
    "ru": "ru.json",
    "sv": "sv.json",
}


def data_dir() -> Path:
    """Directory holding the packaged token files."""
    return _DATA_DIR


def load_token_source(code: str) -> str:
    """Return the raw token JSON for a language code.

    The file is read once and kept in memory for the life of the process.

    Raises:
        TokenFileImportNotSupported: If there is no token file for ``code``
    """
    try:
        filename = _TOKEN_FILES[code]
    except KeyError:
        raise TokenFileImportNotSupported(code) from None
    return _read(filename)


@lru_cache(maxsize=None)
def _read(filename: str) -> str:
    return (_DATA_DIR / filename).read_text(encoding="utf-8")
