"""Raw token records: structural parsing of per-language token data.

Records are JSON objects with camelCase keys. Only shape and types are
checked here; token kinds and regex patterns are validated by the compiler.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from .types import TokenDataError


class RawToken(BaseModel):
    """One token record as it appears in the data files."""

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="ignore",
    )

    tokens: List[str] = Field(min_length=1, description="Surface forms")
    full: str = Field(description="Expanded text or regex source")
    canonical: str = Field(description="Preferred normalized form")
    note: Optional[str] = Field(default=None, description="Free-text annotation")
    only_countries: Optional[List[str]] = Field(default=None, alias="onlyCountries")
    only_layers: Optional[List[str]] = Field(default=None, alias="onlyLayers")
    prefer_full: bool = Field(default=False, alias="preferFull")
    regex: bool = Field(default=False, description="Compile full as a pattern")
    skip_boundaries: bool = Field(default=False, alias="skipBoundaries")
    skip_diacritic_stripping: bool = Field(default=False, alias="skipDiacriticStripping")
    span_boundaries: Optional[int] = Field(default=None, ge=0, le=255, alias="spanBoundaries")
    token_type: Optional[str] = Field(default=None, alias="type")

    @field_validator(
        "prefer_full", "regex", "skip_boundaries", "skip_diacritic_stripping", mode="before"
    )
    @classmethod
    def _null_flag_is_false(cls, v):
        return False if v is None else v


_RECORDS = TypeAdapter(List[RawToken])


def parse_records(raw: str | bytes, language: Optional[str] = None) -> List[RawToken]:
    """Parse a JSON array of token records.

    Args:
        raw: Serialized token collection for one language
        language: Language code, used only in error messages

    Returns:
        Records in source order

    Raises:
        TokenDataError: If the data is not a JSON array of well-formed records
    """
    try:
        return _RECORDS.validate_json(raw)
    except ValidationError as e:
        raise TokenDataError(
            f"unable to parse token JSON: {e.error_count()} error(s), first: {_first_error(e)}",
            language=language,
        ) from e


def _first_error(exc: ValidationError) -> str:
    err = exc.errors()[0]
    loc = ".".join(str(part) for part in err.get("loc", ()))
    return f"{loc}: {err.get('msg', 'invalid')}" if loc else err.get("msg", "invalid")
