"""Token model: one unit of address normalization knowledge."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .types import TokenType


@dataclass(frozen=True, eq=False)
class Token:
    """A set of surface forms mapped to a canonical form.

    Attributes:
        tokens: All surface forms recognized as this token (never empty)
        full: Expanded text, or the regex source when ``regex`` is set
        canonical: Preferred normalized form
        regex: Pattern compiled from ``full`` for regex tokens
        note: Free-text annotation with no effect on matching
        only_countries: Country codes the token is restricted to
        only_layers: Address layers the token is restricted to
        prefer_full: Substitute ``full`` rather than ``canonical``
        skip_boundaries: Match without word-boundary enforcement
        skip_diacritic_stripping: Match without diacritic normalization
        span_boundaries: Number of adjacent tokens a match may span
        token_type: Kind of token, ``None`` when unclassified
    """

    tokens: Tuple[str, ...]
    full: str
    canonical: str
    regex: Optional[re.Pattern[str]] = None
    note: Optional[str] = None
    only_countries: Optional[Tuple[str, ...]] = None
    only_layers: Optional[Tuple[str, ...]] = None
    prefer_full: bool = False
    skip_boundaries: bool = False
    skip_diacritic_stripping: bool = False
    span_boundaries: Optional[int] = None
    token_type: Optional[TokenType] = None

    @property
    def is_regex(self) -> bool:
        return self.regex is not None

    @property
    def regex_source(self) -> Optional[str]:
        return self.regex.pattern if self.regex is not None else None

    def applies_to(self, country: Optional[str] = None, layer: Optional[str] = None) -> bool:
        """Check the token's country/layer scoping.

        A ``None`` argument is not checked. Country codes compare
        case-insensitively, layers exactly.
        """
        if country is not None and self.only_countries is not None:
            wanted = country.lower()
            if not any(c.lower() == wanted for c in self.only_countries):
                return False
        if layer is not None and self.only_layers is not None:
            if layer not in self.only_layers:
                return False
        return True

    def _key(self) -> tuple:
        # Compiled patterns compare by source; the regex is derived from ``full``
        return (
            self.regex_source,
            self.tokens,
            self.full,
            self.canonical,
            self.note,
            self.only_countries,
            self.only_layers,
            self.prefer_full,
            self.skip_boundaries,
            self.skip_diacritic_stripping,
            self.span_boundaries,
            self.token_type,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())
