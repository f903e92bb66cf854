"""
Search pipeline: filter, classify, rank and paginate.

Primary API:
    from quran_search.core import search

    response = search("الله", context)
    response = search("كتب", context, SearchOptions(fuzzy=False), Pagination(page=2, limit=10))
"""

import logging
import math
from typing import Iterable, Literal

from quran_search.config import QuranSearchSettings, get_settings
from quran_search.core.arabic import normalize_arabic
from quran_search.core.cache import LRUCache
from quran_search.core.context import SearchContext
from quran_search.core.matcher import (
    classify_verse,
    contains_query,
    passes_filters,
    resolve_query,
)
from quran_search.models import (
    MatchCounts,
    MatchType,
    Pagination,
    PaginationInfo,
    ScoredVerse,
    SearchOptions,
    SearchResponse,
    Verse,
)

logger = logging.getLogger(__name__)

SearchCache = LRUCache[tuple, SearchResponse]


def rank(matches: Iterable[ScoredVerse]) -> list[ScoredVerse]:
    """Sort by score descending, ties by ascending gid."""
    return sorted(matches, key=lambda v: (-v.match_score, v.gid))


def count_matches(matches: Iterable[ScoredVerse]) -> MatchCounts:
    """Tally match types over the whole matched set."""
    tally = {t: 0 for t in (MatchType.SIMPLE, MatchType.LEMMA, MatchType.ROOT, MatchType.FUZZY)}
    for match in matches:
        if match.match_type in tally:
            tally[match.match_type] += 1
    return MatchCounts(
        simple=tally[MatchType.SIMPLE],
        lemma=tally[MatchType.LEMMA],
        root=tally[MatchType.ROOT],
        fuzzy=tally[MatchType.FUZZY],
        total=sum(tally.values()),
    )


def paginate(
    ranked: list[ScoredVerse],
    page: int,
    limit: int,
) -> tuple[list[ScoredVerse], PaginationInfo]:
    """
    Slice one page out of a ranked list.

    A page past the end gives an empty slice with correct totals.

    Returns:
        Tuple of (page_results, pagination_info)
    """
    total = len(ranked)
    start = (page - 1) * limit
    info = PaginationInfo(
        current_page=page,
        total_pages=max(1, math.ceil(total / limit)),
        total_results=total,
        limit=limit,
    )
    return ranked[start:start + limit], info


def make_cache_key(
    clean_query: str,
    options: SearchOptions,
    page: int,
    limit: int,
    settings: QuranSearchSettings,
) -> tuple:
    """
    Canonical cache key for a search request.

    The fuzzy thresholds are part of the key because they change which
    verses match. The context is not: a cache must only ever be used with
    one SearchContext.
    """
    fuzzy = (
        settings.fuzzy_min_query_length,
        settings.fuzzy_chars_per_edit,
        settings.fuzzy_max_edits,
    )
    return (clean_query, options.cache_key(), page, limit, fuzzy)


def search(
    query: str,
    context: SearchContext,
    options: SearchOptions | None = None,
    pagination: Pagination | None = None,
    cache: SearchCache | None = None,
    settings: QuranSearchSettings | None = None,
) -> SearchResponse:
    """
    Search the corpus with every enabled strategy.

    Every verse inside the structural filters is classified by the first
    matching strategy (simple, lemma, root, fuzzy). Matches are ranked by
    score then gid, counted over the whole set, and one page is returned.

    Query-time behaviour is total: an empty query, no matches or a page
    past the end all return a response rather than raising.

    Args:
        query: Raw query (word or phrase)
        context: Search context holding the datasets
        options: Strategy switches and filters (defaults: all strategies on)
        pagination: Page and limit (defaults: page 1, configured page size)
        cache: Optional LRU cache bound to this context; identical requests
            return the cached response
        settings: Settings (defaults to get_settings())

    Returns:
        SearchResponse
    """
    settings = settings or get_settings()
    options = options or SearchOptions()
    pagination = pagination or Pagination()
    page = pagination.page
    limit = pagination.limit or settings.default_page_size

    resolved = resolve_query(query, context, settings)

    key = make_cache_key(resolved.text, options, page, limit, settings)
    if cache is not None:
        cached = cache.get(key)
        if cached is not None:
            return cached

    matches: list[ScoredVerse] = []
    if not resolved.is_empty:
        for iv in context.index:
            if options.has_filters and not passes_filters(iv.verse, options):
                continue
            scored = classify_verse(iv, resolved, options, settings)
            if scored is not None:
                matches.append(scored)

    ranked = rank(matches)
    results, info = paginate(ranked, page, limit)
    response = SearchResponse(
        results=results,
        pagination=info,
        counts=count_matches(ranked),
        query=resolved.text,
        lemma=resolved.lemma,
        root=resolved.root,
    )

    logger.debug(
        "Search %r: %d matches (lemma=%s, root=%s), page %d/%d",
        resolved.text, info.total_results, resolved.lemma, resolved.root,
        page, info.total_pages,
    )

    if cache is not None:
        cache.set(key, response)
    return response


def simple_search(
    verses: Iterable[Verse],
    query: str,
    field: Literal["standard", "standard_full", "uthmani"] = "standard",
) -> list[Verse]:
    """
    Plain normalized sub-string search over one text field.

    Phrases match only on word boundaries, as in ``search``.

    No morphology, scoring or pagination: matching verses are returned in
    the order given.

    Args:
        verses: Verses to scan
        query: Raw query
        field: Verse text field to search

    Returns:
        Matching verses
    """
    clean = normalize_arabic(query)
    if not clean:
        return []
    return [v for v in verses if contains_query(normalize_arabic(getattr(v, field)), clean)]
