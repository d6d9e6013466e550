"""Fixed registry of language codes with token data.

Codes are matched exactly (case-sensitive); there is no alias resolution.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from ..tokens.types import LanguageCodeNotSupported

# Alphabetical; build order for "all languages"
LANGUAGE_CODES: Tuple[str, ...] = (
    "de",
    "en",
    "es",
    "et",
    "fi",
    "fr",
    "he",
    "id",
    "it",
    "ja",
    "nl",
    "no",
    "pl",
    "pt",
    "ro",
    "ru",
    "sv",
)

_SUPPORTED = frozenset(LANGUAGE_CODES)


def supported_codes() -> Tuple[str, ...]:
    """All supported codes in registry order."""
    return LANGUAGE_CODES


def is_supported(code: str) -> bool:
    """Check if a single code is in the registry.

    Examples:
        >>> is_supported("de")
        True
        >>> is_supported("DE")
        False
    """
    return code in _SUPPORTED


def validate(codes: Iterable[str]) -> None:
    """Validate requested language codes.

    An empty input is valid and means every supported code.

    Raises:
        LanguageCodeNotSupported: For the first unsupported code, in input order
    """
    for code in codes:
        if not is_supported(code):
            raise LanguageCodeNotSupported(code)


def resolve(codes: Sequence[str]) -> Tuple[str, ...]:
    """Validate ``codes`` and return the codes to build, in build order.

    Empty input resolves to the full registry. Repeated codes are kept once,
    at their first position.
    """
    if not codes:
        return LANGUAGE_CODES
    validate(codes)
    return tuple(dict.fromkeys(codes))
