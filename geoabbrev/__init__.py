"""geoabbrev: per-language address abbreviation tokens.

Loads, validates and indexes the token dictionaries used for address text
normalization (e.g. "St" <-> "Street").

Example:
    >>> from geoabbrev import build_catalog, TokenType
    >>> catalog = build_catalog(["en"])
    >>> any(tk.token_type is TokenType.WAY for tk in catalog["en"])
    True
"""

from .catalog import Catalog, build_catalog, filter_tokens, prepare_languages
from .languages import LANGUAGE_CODES
from .languages import validate as validate_language_codes
from .tokens import (
    GeoAbbrevError,
    LanguageCodeNotSupported,
    LookAroundNotSupported,
    RegexError,
    Token,
    TokenDataError,
    TokenFileImportNotSupported,
    TokenType,
    TokenTypeNotSupported,
    load_token_source,
    make_token,
)

__all__ = [
    "Catalog",
    "build_catalog",
    "prepare_languages",
    "filter_tokens",
    "make_token",
    "load_token_source",
    "validate_language_codes",
    "LANGUAGE_CODES",
    "Token",
    "TokenType",
    "GeoAbbrevError",
    "LanguageCodeNotSupported",
    "TokenFileImportNotSupported",
    "TokenTypeNotSupported",
    "RegexError",
    "LookAroundNotSupported",
    "TokenDataError",
]
