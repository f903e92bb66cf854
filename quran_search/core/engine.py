"""
High-level search engine.

QuranSearchEngine bundles a search context, settings and a response cache
behind one object, the way most callers use the library.
"""

import logging

from quran_search.config import QuranSearchSettings, get_settings
from quran_search.core.cache import LRUCache
from quran_search.core.conflicts import diagnose_empty_result
from quran_search.core.context import SearchContext
from quran_search.core.highlight import get_highlight_ranges, get_positive_tokens
from quran_search.core.search import search
from quran_search.models import (
    ConflictReport,
    HighlightMode,
    HighlightRange,
    MatchType,
    Pagination,
    ScoredVerse,
    SearchOptions,
    SearchResponse,
    Verse,
)

logger = logging.getLogger(__name__)


class QuranSearchEngine:
    """
    Cached, morphology-aware search over a resident corpus.

    Args:
        context: Search context holding the three datasets
        settings: Settings (defaults to get_settings())
        cache_capacity: Size of the response cache; defaults to
            settings.cache_capacity. Pass 0 to disable caching.

    Example:
        engine = QuranSearchEngine(load_context("data"))
        response = engine.search("الله", SearchOptions(sura_id=1))
        if response.is_empty:
            print(engine.diagnose("الله", SearchOptions(sura_id=1)).message)
        for verse in response.results:
            ranges = engine.highlight(verse)
    """

    def __init__(
        self,
        context: SearchContext,
        settings: QuranSearchSettings | None = None,
        cache_capacity: int | None = None,
    ):
        self.context = context
        self.settings = settings or get_settings()
        capacity = self.settings.cache_capacity if cache_capacity is None else cache_capacity
        self.cache: LRUCache[tuple, SearchResponse] | None = (
            LRUCache(capacity) if capacity != 0 else None
        )

    def search(
        self,
        query: str,
        options: SearchOptions | None = None,
        pagination: Pagination | None = None,
    ) -> SearchResponse:
        """Run a search, served from the cache when the request repeats."""
        return search(
            query,
            self.context,
            options,
            pagination,
            cache=self.cache,
            settings=self.settings,
        )

    def diagnose(self, query: str, options: SearchOptions) -> ConflictReport:
        """Explain an empty filtered search."""
        return diagnose_empty_result(query, self.context, options, self.settings)

    def positive_tokens(
        self,
        verse: Verse,
        mode: HighlightMode | str,
        query: str,
        lemma: str | None = None,
        root: str | None = None,
    ) -> list[str]:
        """Tokens of a verse to highlight for a query in the given mode."""
        return get_positive_tokens(
            verse, mode, lemma, root, query, self.context.morphology,
        )

    def highlight(self, verse: ScoredVerse) -> list[HighlightRange]:
        """Highlight ranges of a search result in its Uthmani text."""
        default = verse.match_type if verse.match_type != MatchType.NONE else MatchType.SIMPLE
        return get_highlight_ranges(
            verse.uthmani,
            verse.matched_tokens,
            verse.token_types,
            default_type=default,
        )

    def clear_cache(self) -> None:
        """Drop every cached response."""
        if self.cache is not None:
            self.cache.clear()

    def __repr__(self) -> str:
        return f"QuranSearchEngine({self.context!r}, cache={self.cache!r})"
