"""
Search result data models.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quran_search.models.verse import Verse


class MatchType(str, Enum):
    """How a verse matched the query, in priority order."""

    SIMPLE = "simple"
    LEMMA = "lemma"
    ROOT = "root"
    FUZZY = "fuzzy"
    NONE = "none"  # internal default, never emitted in a response


class ScoredVerse(Verse):
    """
    A verse decorated with its match classification.

    Attributes:
        match_type: Winning strategy
        match_score: Ranking score, higher is better
        matched_tokens: Verse words (or sub-strings) that justify the match
        token_types: Match type per token, parallel to matched_tokens
    """

    match_type: MatchType = Field(
        default=MatchType.NONE,
        description="Winning match strategy",
    )
    match_score: float = Field(
        default=0.0,
        description="Ranking score (higher is better)",
        ge=0.0,
    )
    matched_tokens: list[str] = Field(
        default_factory=list,
        description="Tokens to highlight in the verse text",
    )
    token_types: list[MatchType] = Field(
        default_factory=list,
        description="Match type for each entry of matched_tokens",
    )

    @model_validator(mode="after")
    def tokens_and_types_aligned(self) -> "ScoredVerse":
        """Ensure token_types is empty or parallel to matched_tokens."""
        if self.token_types and len(self.token_types) != len(self.matched_tokens):
            raise ValueError("token_types must be parallel to matched_tokens")
        return self

    def __str__(self) -> str:
        return f"ScoredVerse({self.sura_id}:{self.aya_id}, {self.match_type.value}, {self.match_score})"


class MatchCounts(BaseModel):
    """Match tallies over the whole filtered result set, not just one page."""

    model_config = ConfigDict(frozen=True)

    simple: int = Field(default=0, ge=0)
    lemma: int = Field(default=0, ge=0)
    root: int = Field(default=0, ge=0)
    fuzzy: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class PaginationInfo(BaseModel):
    """Pagination metadata returned with a response."""

    model_config = ConfigDict(frozen=True)

    current_page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=1)
    total_results: int = Field(..., ge=0)
    limit: int = Field(..., ge=1)


class SearchResponse(BaseModel):
    """
    Ranked, paginated search response.

    ``query``, ``lemma`` and ``root`` record how the query was resolved so
    displayed verses can be highlighted without repeating the lookup.

    Cached responses are shared between callers, so the response and its
    results are immutable.
    """

    model_config = ConfigDict(frozen=True)

    results: tuple[ScoredVerse, ...] = Field(default_factory=tuple)
    pagination: PaginationInfo
    counts: MatchCounts = Field(default_factory=MatchCounts)
    query: str = Field(default="", description="Normalized query")
    lemma: Optional[str] = Field(default=None, description="Resolved lemma")
    root: Optional[str] = Field(default=None, description="Resolved root")

    @property
    def is_empty(self) -> bool:
        """Whether the whole filtered set is empty (not just this page)."""
        return self.pagination.total_results == 0
