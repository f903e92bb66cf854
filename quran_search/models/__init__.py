"""
Pydantic data models for the Quran search engine.

These models represent the core data structures used throughout the library:
- Verse, VerseMorphology, WordEntry: the three resident datasets
- SearchOptions, Pagination: search requests
- ScoredVerse, SearchResponse: ranked, paginated results
- HighlightRange: spans of display text to highlight
- ConflictReport: explanation of an empty filtered search
"""

from quran_search.models.verse import Verse, VerseMorphology, WordEntry
from quran_search.models.options import SearchOptions, Pagination
from quran_search.models.result import (
    MatchType,
    ScoredVerse,
    MatchCounts,
    PaginationInfo,
    SearchResponse,
)
from quran_search.models.highlight import HighlightMode, HighlightRange
from quran_search.models.conflict import ConflictKind, ConflictReport

__all__ = [
    "Verse",
    "VerseMorphology",
    "WordEntry",
    "SearchOptions",
    "Pagination",
    "MatchType",
    "ScoredVerse",
    "MatchCounts",
    "PaginationInfo",
    "SearchResponse",
    "HighlightMode",
    "HighlightRange",
    "ConflictKind",
    "ConflictReport",
]
