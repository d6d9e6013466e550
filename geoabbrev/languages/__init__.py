"""Supported language codes for token catalogs."""

from .registry import (
    LANGUAGE_CODES,
    is_supported,
    resolve,
    supported_codes,
    validate,
)

__all__ = [
    "LANGUAGE_CODES",
    "is_supported",
    "resolve",
    "supported_codes",
    "validate",
]
