"""Token types, kinds and error classes."""

from __future__ import annotations

from enum import Enum


class GeoAbbrevError(Exception):
    """Base error for catalog building.

    Carries the offending value (language code, token type, regex message)
    so callers can report it without parsing the message.
    """

    def __init__(self, value: str, message: str | None = None) -> None:
        self.value = value
        super().__init__(message or value)


class LanguageCodeNotSupported(GeoAbbrevError):
    """Requested language code is not in the registry."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Language code not supported: {code}")

    @property
    def code(self) -> str:
        return self.value


class TokenFileImportNotSupported(GeoAbbrevError):
    """Token source has no data for the language code."""

    def __init__(self, code: str) -> None:
        super().__init__(code, f"Token file import not supported: {code}")

    @property
    def code(self) -> str:
        return self.value


class TokenTypeNotSupported(GeoAbbrevError):
    """Token record carries a type outside the known kinds."""

    def __init__(self, token_type: str) -> None:
        super().__init__(token_type, f"Token type not supported: {token_type}")


class RegexError(GeoAbbrevError):
    """Token pattern failed to compile."""

    def __init__(self, message: str) -> None:
        super().__init__(message, f"Regex error: {message}")


class LookAroundNotSupported(RegexError):
    """Token pattern uses look-ahead or look-behind assertions.

    The matching engine the catalog targets has no look-around support, so
    the catalog builder drops these tokens instead of failing.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(
            f"look-around, including look-ahead and look-behind, is not supported: {pattern}"
        )


class TokenDataError(RuntimeError):
    """Packaged token data does not match the expected record shape.

    Raised for corrupted data rather than bad caller input, so it is kept
    outside the GeoAbbrevError hierarchy.
    """

    def __init__(self, message: str, language: str | None = None) -> None:
        self.language = language
        prefix = f"[{language}] " if language else ""
        super().__init__(f"{prefix}{message}")


class TokenType(str, Enum):
    """Closed set of token kinds."""

    POSTAL_BOX = "box"
    CARDINAL = "cardinal"
    NUMBER = "number"
    ORDINAL = "ordinal"
    UNIT = "unit"
    WAY = "way"

    @classmethod
    def from_raw(cls, value: str) -> "TokenType":
        """Map a raw record ``type`` string to its kind.

        Lookup is exact and case-sensitive.

        Raises:
            TokenTypeNotSupported: If ``value`` is not a known kind
        """
        try:
            return _RAW_TOKEN_TYPES[value]
        except KeyError:
            raise TokenTypeNotSupported(value) from None


_RAW_TOKEN_TYPES: dict[str, TokenType] = {
    "box": TokenType.POSTAL_BOX,
    "cardinal": TokenType.CARDINAL,
    "number": TokenType.NUMBER,
    "ordinal": TokenType.ORDINAL,
    "unit": TokenType.UNIT,
    "way": TokenType.WAY,
}
