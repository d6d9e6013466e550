"""Compile raw token records into Token instances."""

from __future__ import annotations

import re
from typing import Optional

from .parser import RawToken
from .token import Token
from .types import LookAroundNotSupported, RegexError, TokenType

# Group openers that start a look-ahead or look-behind assertion
_LOOKAROUND_OPENERS = ("(?=", "(?!", "(?<=", "(?<!")


def find_lookaround(pattern: str) -> Optional[int]:
    """Return the offset of the first look-around group in ``pattern``.

    Escaped characters and character classes are skipped, so ``\\(?=``
    and ``[(?=]`` are not look-arounds. Returns ``None`` when there is none.
    """
    i = 0
    in_class = False
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            i += 2
            continue
        if in_class:
            if ch == "]":
                in_class = False
        elif ch == "[":
            in_class = True
            # A leading "]" (optionally after "^") is a literal inside the class
            j = i + 1
            if j < n and pattern[j] == "^":
                j += 1
            if j < n and pattern[j] == "]":
                j += 1
            i = j
            continue
        elif ch == "(" and pattern.startswith(_LOOKAROUND_OPENERS, i):
            return i
        i += 1
    return None


def compile_pattern(full: str) -> re.Pattern[str]:
    """Compile a token's ``full`` value as a regular expression.

    Patterns use Python ``re`` syntax. Unicode property classes such as
    ``\\p{L}`` are not available and fail with ``RegexError``, while
    backreferences like ``\\1`` compile.

    Raises:
        LookAroundNotSupported: If the pattern uses look-ahead/look-behind
        RegexError: If the pattern does not compile for any other reason
    """
    if find_lookaround(full) is not None:
        raise LookAroundNotSupported(full)
    try:
        return re.compile(full)
    except re.error as e:
        raise RegexError(str(e)) from e


def compile_token(record: RawToken) -> Token:
    """Build a Token from a parsed record.

    Raises:
        LookAroundNotSupported: Regex requested and ``full`` uses look-around
        RegexError: Regex requested and ``full`` does not compile
        TokenTypeNotSupported: ``type`` is not one of the known kinds
    """
    regex = compile_pattern(record.full) if record.regex else None
    token_type = TokenType.from_raw(record.token_type) if record.token_type is not None else None

    return Token(
        tokens=tuple(record.tokens),
        full=record.full,
        canonical=record.canonical,
        regex=regex,
        note=record.note,
        only_countries=_optional_tuple(record.only_countries),
        only_layers=_optional_tuple(record.only_layers),
        prefer_full=record.prefer_full,
        skip_boundaries=record.skip_boundaries,
        skip_diacritic_stripping=record.skip_diacritic_stripping,
        span_boundaries=record.span_boundaries,
        token_type=token_type,
    )


def make_token(
    full: str,
    canonical: str,
    token_type: Optional[TokenType] = None,
    as_regex: bool = False,
) -> Token:
    """Construct an ad-hoc token outside the catalog pipeline.

    The surface forms are seeded with ``(canonical, full)`` and every
    optional flag keeps its default.

    Examples:
        >>> tk = make_token("St", "Street")
        >>> tk.tokens
        ('Street', 'St')
        >>> tk.regex is None
        True
    """
    return Token(
        tokens=(canonical, full),
        full=full,
        canonical=canonical,
        regex=compile_pattern(full) if as_regex else None,
        token_type=token_type,
    )


def _optional_tuple(values):
    return tuple(values) if values is not None else None
