"""
Highlighting data models.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from quran_search.models.result import MatchType


class HighlightMode(str, Enum):
    """Which analysis tokens are extracted with."""

    TEXT = "text"
    LEMMA = "lemma"
    ROOT = "root"


class HighlightRange(BaseModel):
    """A half-open ``[start, end)`` character span of the display text."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    match_type: MatchType = Field(default=MatchType.SIMPLE)

    @model_validator(mode="after")
    def end_after_start(self) -> "HighlightRange":
        """Ensure the span is not empty."""
        if self.end <= self.start:
            raise ValueError("end must be > start")
        return self

    def overlaps(self, start: int, end: int) -> bool:
        """Whether ``[start, end)`` shares any character with this range."""
        return start < self.end and self.start < end

    def __str__(self) -> str:
        return f"HighlightRange({self.start}-{self.end}, {self.match_type.value})"
