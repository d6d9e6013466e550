"""Token model, parsing and compilation."""

from .compiler import compile_pattern, compile_token, find_lookaround, make_token
from .parser import RawToken, parse_records
from .source import TokenSource, load_token_source
from .token import Token
from .types import (
    GeoAbbrevError,
    LanguageCodeNotSupported,
    LookAroundNotSupported,
    RegexError,
    TokenDataError,
    TokenFileImportNotSupported,
    TokenType,
    TokenTypeNotSupported,
)

__all__ = [
    "Token",
    "TokenType",
    "RawToken",
    "TokenSource",
    "parse_records",
    "compile_pattern",
    "compile_token",
    "find_lookaround",
    "make_token",
    "load_token_source",
    "GeoAbbrevError",
    "LanguageCodeNotSupported",
    "TokenFileImportNotSupported",
    "TokenTypeNotSupported",
    "RegexError",
    "LookAroundNotSupported",
    "TokenDataError",
]
