"""
Multi-strategy verse matching and scoring.

Each verse is classified against the query by the first strategy that
succeeds, in priority order: simple (normalized text), lemma, root and
fuzzy. Scores live in disjoint tiers so that every simple match outranks
every lemma match, and so on down to fuzzy.

Uses rapidfuzz for the bounded Levenshtein distance of fuzzy matching.
"""

import unicodedata
from dataclasses import dataclass

from rapidfuzz.distance import Levenshtein as _rapidfuzz_levenshtein

from quran_search.config import QuranSearchSettings
from quran_search.core.arabic import is_arabic, normalize_arabic
from quran_search.core.context import IndexedVerse, SearchContext
from quran_search.core.morphology import positions_of, resolve_word
from quran_search.models import MatchType, ScoredVerse, SearchOptions, Verse

# Base score per tier; bonuses within a tier stay below 1.0
TIER_BASE: dict[MatchType, float] = {
    MatchType.SIMPLE: 4.0,
    MatchType.LEMMA: 3.0,
    MatchType.ROOT: 2.0,
    MatchType.FUZZY: 1.0,
}

WHOLE_WORD_BONUS = 0.5
REPEAT_BONUS = 0.1
MAX_SIMPLE_REPEAT_BONUS = 0.4
MAX_MORPHOLOGY_BONUS = 0.9

_SURA_PREFIX = "سوره "


@dataclass(frozen=True)
class ResolvedQuery:
    """
    A query after normalization and dictionary lookup.

    ``lemma`` and ``root`` keep the dictionary's spelling; the ``*_key``
    fields hold their normalized forms used for comparison.
    """

    text: str
    words: tuple[str, ...]
    lemma: str | None = None
    root: str | None = None
    lemma_key: str = ""
    root_key: str = ""
    max_edits: int = 1

    @property
    def is_empty(self) -> bool:
        """Whether nothing searchable is left after normalization."""
        return not self.text

    @property
    def letter_count(self) -> int:
        """Number of letters, ignoring spaces."""
        return len(self.text.replace(" ", ""))


def resolve_query(
    query: str,
    context: SearchContext,
    settings: QuranSearchSettings,
) -> ResolvedQuery:
    """
    Normalize a raw query and resolve its lemma and root.

    Args:
        query: Raw user query
        context: Search context holding the word map
        settings: Settings providing fuzzy thresholds

    Returns:
        ResolvedQuery (empty when nothing Arabic is left)
    """
    clean = normalize_arabic(query or "")
    if not clean:
        return ResolvedQuery(text="", words=())

    entry = resolve_word(clean, context.dictionary)
    lemma = entry.lemma if entry else None
    root = entry.root if entry else None

    return ResolvedQuery(
        text=clean,
        words=tuple(clean.split(" ")),
        lemma=lemma,
        root=root,
        lemma_key=normalize_arabic(lemma) if lemma else "",
        root_key=normalize_arabic(root) if root else "",
        max_edits=settings.max_edits_for(len(clean.replace(" ", ""))),
    )


# ---------------------------------------------------------------------------
# Structural filters
# ---------------------------------------------------------------------------

def _latin_key(name: str) -> str:
    """Casefold a Latin name and drop accents, spaces and punctuation."""
    decomposed = unicodedata.normalize("NFKD", name)
    return "".join(
        ch for ch in decomposed.casefold()
        if ch.isalnum() and not unicodedata.combining(ch)
    )


def _arabic_key(name: str) -> str:
    """Normalize an Arabic sura name, tolerating a leading 'سورة'."""
    key = normalize_arabic(name).replace("ة", "ه")
    if key.startswith(_SURA_PREFIX):
        key = key[len(_SURA_PREFIX):]
    return key.replace(" ", "")


def sura_name_matches(verse: Verse, name: str) -> bool:
    """
    Compare a requested sura name with a verse's names.

    Arabic input is compared with the Arabic name, other input with the
    English and romanized names. Both comparisons ignore case, diacritics
    and punctuation.
    """
    if not name or not name.strip():
        return True

    if is_arabic(name):
        wanted = _arabic_key(name)
        return bool(wanted) and wanted == _arabic_key(verse.sura_name)

    wanted = _latin_key(name)
    if not wanted:
        return False
    for candidate in (verse.sura_name_en, verse.sura_name_romanization):
        if candidate and _latin_key(candidate) == wanted:
            return True
    return False


def passes_filters(verse: Verse, options: SearchOptions) -> bool:
    """Whether a verse falls inside the structural filters of the options."""
    if options.sura_id is not None and verse.sura_id != options.sura_id:
        return False
    if options.juz_id is not None and verse.juz_id != options.juz_id:
        return False
    if options.sura_name and not sura_name_matches(verse, options.sura_name):
        return False
    return True


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def _unique_tokens(
    pairs: list[tuple[str, MatchType]],
) -> tuple[list[str], list[MatchType]]:
    """Drop repeated tokens, keeping the first type seen for each."""
    tokens: list[str] = []
    types: list[MatchType] = []
    seen: set[str] = set()
    for token, match_type in pairs:
        if token and token not in seen:
            seen.add(token)
            tokens.append(token)
            types.append(match_type)
    return tokens, types


def contains_query(text: str, clean_query: str) -> bool:
    """
    Whether normalized text contains a normalized query.

    A single word may match inside a longer word. A phrase must start and
    end on word boundaries so that it never takes a fragment of a
    neighbouring word.
    """
    if not text or not clean_query:
        return False
    if " " in clean_query:
        return f" {clean_query} " in f" {text} "
    return clean_query in text


def _match_simple(iv: IndexedVerse, query: ResolvedQuery) -> float | None:
    """Score a normalized sub-string match, or None."""
    for text in (iv.text, iv.text_full):
        if not contains_query(text, query.text):
            continue
        bonus = 0.0
        if f" {query.text} " in f" {text} ":
            bonus += WHOLE_WORD_BONUS
        occurrences = text.count(query.text)
        bonus += min((occurrences - 1) * REPEAT_BONUS, MAX_SIMPLE_REPEAT_BONUS)
        return TIER_BASE[MatchType.SIMPLE] + bonus
    return None


def _morphology_bonus(hits: int) -> float:
    return min((hits - 1) * REPEAT_BONUS, MAX_MORPHOLOGY_BONUS)


def _match_fuzzy(
    iv: IndexedVerse,
    query: ResolvedQuery,
) -> tuple[float, list[str]] | None:
    """
    Find verse word windows within the allowed edit distance of the query.

    Windows have as many words as the query. The score depends only on the
    best (smallest) distance found.
    """
    n = len(query.words)
    best: int | None = None
    tokens: list[str] = []

    for i in range(len(iv.words) - n + 1):
        window_words = iv.words[i:i + n]
        if not all(window_words):
            continue
        distance = _rapidfuzz_levenshtein.distance(
            query.text,
            " ".join(window_words),
            score_cutoff=query.max_edits,
        )
        if distance > query.max_edits:
            continue
        tokens.append(" ".join(iv.display[i:i + n]))
        if best is None or distance < best:
            best = distance

    if best is None:
        return None

    score = TIER_BASE[MatchType.FUZZY] + (query.max_edits + 1 - best) / (query.max_edits + 2)
    return score, tokens


def classify_verse(
    iv: IndexedVerse,
    query: ResolvedQuery,
    options: SearchOptions,
    settings: QuranSearchSettings,
) -> ScoredVerse | None:
    """
    Classify one verse against a resolved query.

    Strategies are tried in priority order and the first success wins;
    later strategies are not evaluated.

    Args:
        iv: Indexed verse
        query: Resolved query
        options: Enabled strategies
        settings: Settings providing fuzzy thresholds

    Returns:
        ScoredVerse, or None when the verse does not match
    """
    if query.is_empty:
        return None

    score = _match_simple(iv, query)
    if score is not None:
        return _scored(iv, MatchType.SIMPLE, score, [(query.text, MatchType.SIMPLE)])

    if iv.has_morphology:
        lemma_hits = (
            positions_of(iv.lemmas, query.lemma_key)
            if options.lemma else []
        )
        root_hits = (
            positions_of(iv.roots, query.root_key)
            if options.root else []
        )

        if lemma_hits:
            pairs = [(iv.display[i], MatchType.LEMMA) for i in lemma_hits]
            pairs += [
                (iv.display[i], MatchType.ROOT)
                for i in root_hits if i not in lemma_hits
            ]
            score = TIER_BASE[MatchType.LEMMA] + _morphology_bonus(len(lemma_hits))
            return _scored(iv, MatchType.LEMMA, score, pairs)

        if root_hits:
            pairs = [(iv.display[i], MatchType.ROOT) for i in root_hits]
            score = TIER_BASE[MatchType.ROOT] + _morphology_bonus(len(root_hits))
            return _scored(iv, MatchType.ROOT, score, pairs)

    if options.fuzzy and query.letter_count >= settings.fuzzy_min_query_length:
        fuzzy = _match_fuzzy(iv, query)
        if fuzzy is not None:
            score, tokens = fuzzy
            return _scored(iv, MatchType.FUZZY, score, [(t, MatchType.FUZZY) for t in tokens])

    return None


def _scored(
    iv: IndexedVerse,
    match_type: MatchType,
    score: float,
    pairs: list[tuple[str, MatchType]],
) -> ScoredVerse:
    tokens, types = _unique_tokens(pairs)
    return ScoredVerse(
        **iv.verse.model_dump(),
        match_type=match_type,
        match_score=round(score, 4),
        matched_tokens=tokens,
        token_types=types,
    )
