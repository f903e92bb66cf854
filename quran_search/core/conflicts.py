"""
Filter-conflict diagnostic.

When a filtered search comes back empty, the same query is re-run with
the structural filters relaxed step by step to explain why: a sura id
that does not belong to the given sura name, a juz that does not contain
the sura, filters that are simply too narrow, or no match anywhere.
"""

import logging

from quran_search.config import QuranSearchSettings
from quran_search.core.context import SearchContext
from quran_search.core.search import search
from quran_search.models import (
    ConflictKind,
    ConflictReport,
    Pagination,
    ScoredVerse,
    SearchOptions,
)

logger = logging.getLogger(__name__)

_PROBE = Pagination(page=1, limit=1)

MESSAGE_SURA_ID_MISMATCH = "سورة {name} هي رقم {sura_id} في الجزء {juz_id}. يرجى تعديل الرقم أو ترك الحقل فارغ."
MESSAGE_JUZ_MISMATCH = "سورة {name} موجودة في الجزء {juz_id}. يرجى تعديل رقم الجزء."
MESSAGE_FILTERS_TOO_NARROW = "لا توجد نتائج ضمن الفلاتر الحالية، لكن توجد نتائج في أماكن أخرى من القرآن."
MESSAGE_NO_RESULTS = "لا توجد نتائج مطلقًا."


def _probe(
    query: str,
    context: SearchContext,
    options: SearchOptions,
    settings: QuranSearchSettings | None,
) -> ScoredVerse | None:
    """Best hit of a one-result search, or None."""
    response = search(query, context, options, _PROBE, settings=settings)
    return response.results[0] if response.results else None


def diagnose_empty_result(
    query: str,
    context: SearchContext,
    options: SearchOptions,
    settings: QuranSearchSettings | None = None,
) -> ConflictReport:
    """
    Explain why a filtered search returned no results.

    Probes, in order, each with a limit of one result:
    1. Sura name and id both given: drop id and juz; a hit in another sura
       means the id does not belong to the name.
    2. Sura (id or name) and juz given: drop juz; a hit in another juz
       means the sura is not in that juz.
    3. Drop every structural filter: a hit means the filters are too narrow.
    4. Otherwise there is no match anywhere in the corpus.

    A probe whose hit agrees with the requested filter does not explain the
    conflict, so the next probe runs.

    Args:
        query: The query that returned nothing
        context: Search context
        options: The options of the empty search
        settings: Settings (defaults to get_settings())

    Returns:
        ConflictReport
    """
    if options.sura_name and options.sura_id:
        hit = _probe(
            query, context,
            options.model_copy(update={"sura_id": None, "juz_id": None}),
            settings,
        )
        if hit is not None and hit.sura_id != options.sura_id:
            logger.debug("Sura id %s conflicts with name %r", options.sura_id, options.sura_name)
            return ConflictReport(
                kind=ConflictKind.SURA_ID_MISMATCH,
                message=MESSAGE_SURA_ID_MISMATCH.format(
                    name=options.sura_name, sura_id=hit.sura_id, juz_id=hit.juz_id,
                ),
                sura_id=hit.sura_id,
                juz_id=hit.juz_id,
            )

    if (options.sura_id or options.sura_name) and options.juz_id:
        hit = _probe(query, context, options.model_copy(update={"juz_id": None}), settings)
        if hit is not None and hit.juz_id != options.juz_id:
            logger.debug("Juz %s conflicts with sura filter", options.juz_id)
            name = options.sura_name or f"رقم {options.sura_id}"
            return ConflictReport(
                kind=ConflictKind.JUZ_MISMATCH,
                message=MESSAGE_JUZ_MISMATCH.format(name=name, juz_id=hit.juz_id),
                sura_id=hit.sura_id,
                juz_id=hit.juz_id,
            )

    hit = _probe(query, context, options.without_filters(), settings)
    if hit is not None:
        return ConflictReport(
            kind=ConflictKind.FILTERS_TOO_NARROW,
            message=MESSAGE_FILTERS_TOO_NARROW,
            sura_id=hit.sura_id,
            juz_id=hit.juz_id,
        )

    return ConflictReport(kind=ConflictKind.NO_RESULTS, message=MESSAGE_NO_RESULTS)
