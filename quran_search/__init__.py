"""
quran-search-engine: morphology-aware search over Quranic verses.

Matches a word or phrase by exact text, lemma, root and fuzzy
approximation, ranks and paginates the merged results, and computes the
ranges of the diacritized verse text to highlight.

Example:
    from quran_search import QuranSearchEngine, SearchOptions
    from quran_search.data import load_context

    engine = QuranSearchEngine(load_context("data"))
    response = engine.search("الله", SearchOptions(fuzzy=False))
    for verse in response.results:
        print(verse.sura_name, verse.aya_id, verse.match_type.value)
"""

from quran_search.config import QuranSearchSettings, configure, get_settings
from quran_search.core import (
    LRUCache,
    QuranSearchEngine,
    SearchContext,
    diagnose_empty_result,
    get_highlight_ranges,
    get_positive_tokens,
    is_arabic,
    normalize_arabic,
    remove_tashkeel,
    search,
    simple_search,
)
from quran_search.exceptions import (
    CacheCapacityError,
    DatasetError,
    DatasetLoadError,
    QuranSearchError,
)
from quran_search.models import (
    ConflictKind,
    ConflictReport,
    HighlightMode,
    HighlightRange,
    MatchCounts,
    MatchType,
    Pagination,
    PaginationInfo,
    ScoredVerse,
    SearchOptions,
    SearchResponse,
    Verse,
    VerseMorphology,
    WordEntry,
)

__version__ = "0.1.0"

__all__ = [
    "QuranSearchEngine",
    "SearchContext",
    "search",
    "simple_search",
    "diagnose_empty_result",
    "get_highlight_ranges",
    "get_positive_tokens",
    "normalize_arabic",
    "remove_tashkeel",
    "is_arabic",
    "LRUCache",
    "QuranSearchSettings",
    "get_settings",
    "configure",
    "QuranSearchError",
    "CacheCapacityError",
    "DatasetError",
    "DatasetLoadError",
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
