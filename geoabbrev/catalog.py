"""Token catalog: language code -> ordered tokens.

A build fetches the raw data for each requested language, parses the
records and compiles them into Token instances. Tokens whose pattern needs
look-around assertions are dropped with a warning; every other failure
aborts the whole build, and nothing is returned until every language has
been built.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

from . import config as _config
from .languages import registry
from .logging import StructuredLogger, create_logger
from .tokens.compiler import compile_token
from .tokens.parser import parse_records
from .tokens.source import TokenSource, load_token_source
from .tokens.token import Token
from .tokens.types import LookAroundNotSupported, TokenType

logger = logging.getLogger(__name__)

Catalog = Mapping[str, Tuple[Token, ...]]


def build_catalog(
    codes: Sequence[str] = (),
    *,
    source: Optional[TokenSource] = None,
    workers: Optional[int] = None,
) -> Catalog:
    """Build the token catalog for the requested languages.

    Args:
        codes: Language codes to build; empty means every supported language
        source: Raw token provider (defaults to the packaged data)
        workers: Languages compiled in parallel (defaults to GA_BUILD_WORKERS)

    Returns:
        Read-only mapping of language code to tokens in source order

    Raises:
        LanguageCodeNotSupported: A requested code is not supported; no
            language is built
        TokenTypeNotSupported: A record has an unknown ``type``
        RegexError: A record's pattern does not compile
        TokenDataError: Token data is structurally malformed

    Examples:
        >>> catalog = build_catalog(["de", "en"])
        >>> sorted(catalog)
        ['de', 'en']
    """
    return prepare_languages(registry.resolve(codes), source=source, workers=workers)


def prepare_languages(
    languages: Iterable[str],
    *,
    source: Optional[TokenSource] = None,
    workers: Optional[int] = None,
) -> Catalog:
    """Build tokens for already-validated language codes.

    Codes are not checked against the registry here; the token source
    rejects codes it has no data for.
    """
    languages = list(languages)
    source = source or load_token_source
    if workers is None:
        workers = _config.settings.build_workers

    slog = create_logger("catalog")
    try:
        slog.info("catalog build started", languages=languages, workers=workers)
        if workers > 1 and len(languages) > 1:
            with ThreadPoolExecutor(max_workers=min(workers, len(languages))) as pool:
                # map() yields in input order, so the first failure by position is raised
                built = list(pool.map(lambda code: _build_language(code, source, slog), languages))
        else:
            built = [_build_language(code, source, slog) for code in languages]
    except Exception as e:
        slog.error("catalog build failed", error=str(e), error_type=type(e).__name__)
        raise
    finally:
        slog.close()

    return MappingProxyType(dict(zip(languages, built)))


def _build_language(code: str, source: TokenSource, slog: StructuredLogger) -> Tuple[Token, ...]:
    records = parse_records(source(code), language=code)
    tokens: List[Token] = []
    skipped = 0
    for record in records:
        try:
            tokens.append(compile_token(record))
        except LookAroundNotSupported:
            logger.warning("[%s] filtered unsupported lookaround regex %s", code, record.full)
            slog.warning("lookaround token skipped", language=code, full=record.full)
            skipped += 1

    slog.info("language built", language=code, tokens=len(tokens), skipped=skipped)
    return tuple(tokens)


def filter_tokens(
    tokens: Iterable[Token],
    *,
    token_type: Optional[TokenType] = None,
    country: Optional[str] = None,
    layer: Optional[str] = None,
) -> List[Token]:
    """Select tokens by kind and scoping, keeping their order.

    Examples:
        >>> ways = filter_tokens(build_catalog(["en"])["en"], token_type=TokenType.WAY)
        >>> all(tk.token_type is TokenType.WAY for tk in ways)
        True
    """
    return [
        tk
        for tk in tokens
        if (token_type is None or tk.token_type is token_type)
        and tk.applies_to(country=country, layer=layer)
    ]
