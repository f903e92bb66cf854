"""
Search options and pagination request models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchOptions(BaseModel):
    """
    Strategy switches and structural filters for a search.

    Unknown fields are rejected so misspelled options fail loudly
    instead of being silently ignored.

    Attributes:
        lemma: Enable lemma matching
        root: Enable root matching
        fuzzy: Enable approximate matching
        sura_id: Restrict to one sura (1-114)
        juz_id: Restrict to one juz (1-30)
        sura_name: Restrict to a sura by Arabic, English or romanized name
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    lemma: bool = Field(default=True, description="Enable lemma matching")
    root: bool = Field(default=True, description="Enable root matching")
    fuzzy: bool = Field(default=True, description="Enable fuzzy matching")
    sura_id: Optional[int] = Field(
        default=None,
        description="Restrict results to this sura (1-114)",
        ge=1,
        le=114,
    )
    juz_id: Optional[int] = Field(
        default=None,
        description="Restrict results to this juz (1-30)",
        ge=1,
        le=30,
    )
    sura_name: Optional[str] = Field(
        default=None,
        description="Restrict results to the sura with this name",
    )

    @property
    def has_filters(self) -> bool:
        """Whether any structural filter is set."""
        return bool(self.sura_id or self.juz_id or self.sura_name)

    def without_filters(self) -> "SearchOptions":
        """Copy keeping only the strategy switches."""
        return SearchOptions(lemma=self.lemma, root=self.root, fuzzy=self.fuzzy)

    def cache_key(self) -> tuple:
        """Canonical, hashable form used in cache keys."""
        return (
            self.lemma,
            self.root,
            self.fuzzy,
            self.sura_id,
            self.juz_id,
            (self.sura_name or "").strip() or None,
        )


class Pagination(BaseModel):
    """
    Requested page of a search response.

    ``limit`` defaults to the configured page size when left unset.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    page: int = Field(default=1, description="1-based page number", ge=1)
    limit: Optional[int] = Field(
        default=None,
        description="Results per page",
        ge=1,
    )
