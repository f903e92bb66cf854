"""
Core modules for the Quran search engine.

This package contains the core logic for:
- Arabic text normalization
- Lemma/root resolution against the word map
- Multi-strategy matching, ranking and pagination
- Diacritic-tolerant highlighting
- LRU caching of responses
- Explaining empty filtered searches

Primary API:
    from quran_search.core import QuranSearchEngine, SearchContext, search

    # Simple usage
    response = search("الله", context)

    # With caching and diagnostics
    engine = QuranSearchEngine(context)
    response = engine.search("الله", SearchOptions(sura_id=114))
"""

# Primary API - what most users need
from quran_search.core.context import SearchContext
from quran_search.core.engine import QuranSearchEngine
from quran_search.core.search import search, simple_search

# Text utilities - commonly used
from quran_search.core.arabic import normalize_arabic, remove_tashkeel, is_arabic

# Highlighting and diagnostics
from quran_search.core.highlight import get_highlight_ranges, get_positive_tokens
from quran_search.core.conflicts import diagnose_empty_result
from quran_search.core.cache import LRUCache

__all__ = [
    # Primary API
    "SearchContext",
    "QuranSearchEngine",
    "search",
    "simple_search",
    # Text utilities
    "normalize_arabic",
    "remove_tashkeel",
    "is_arabic",
    # Highlighting and diagnostics
    "get_highlight_ranges",
    "get_positive_tokens",
    "diagnose_empty_result",
    "LRUCache",
]
