"""
Highlighting of matched tokens in diacritized verse text.

Two pure operations:
- get_positive_tokens: which words of a verse to highlight for a query
  (text, lemma or root analysis)
- get_highlight_ranges: where those tokens sit in the display text

The display (Uthmani) text carries diacritics and letter variants that the
tokens do not, so tokens are matched with an explicit per-character
matcher: letters compare through equivalence classes, and combining marks
or tatweel in the text may be skipped between letters.
"""

import unicodedata
from typing import Mapping, Sequence

from quran_search.core.arabic import TASHKEEL_PATTERN, TATWEEL, normalize_arabic
from quran_search.core.context import index_verse
from quran_search.core.matcher import contains_query
from quran_search.core.morphology import positions_of
from quran_search.models import (
    HighlightMode,
    HighlightRange,
    MatchType,
    Verse,
    VerseMorphology,
)

# Letters that highlight interchangeably with each other
EQUIVALENCE_CLASSES: tuple[str, ...] = (
    "\u0627\u0623\u0625\u0622\u0671\u0670",  # alef family, incl. dagger alif
    "\u064A\u0649",  # ya, alif maqsura
    "\u0629\u0647",  # ta marbuta, ha
    "\u0621\u0624\u0626",  # hamza and its carriers
)

_CLASS_OF: dict[str, int] = {
    ch: i for i, members in enumerate(EQUIVALENCE_CLASSES) for ch in members
}


def is_mark(ch: str) -> bool:
    """Whether a character is a combining mark or tatweel."""
    return (
        ch == TATWEEL
        or TASHKEEL_PATTERN.match(ch) is not None
        or unicodedata.category(ch) == "Mn"
    )


def letters_equal(text_ch: str, token_ch: str) -> bool:
    """Compare two letters through the equivalence classes."""
    if text_ch == token_ch:
        return True
    cls = _CLASS_OF.get(token_ch)
    return cls is not None and _CLASS_OF.get(text_ch) == cls


def prepare_token(token: str) -> str:
    """Strip marks from a token and collapse its whitespace."""
    letters = "".join(ch for ch in token if not is_mark(ch))
    return " ".join(letters.split())


def match_at(text: str, token: str, start: int) -> int | None:
    """
    Match a prepared token against the text starting exactly at ``start``.

    The first token letter must match ``text[start]``, which may not be a
    mark (a span never begins inside a letter). Between letters any
    run of marks may be skipped; a letter match is always tried before a
    skip, and skips are backtracked when a later letter fails (a dagger
    alif is both a mark and an alef). A space in the token matches a run of
    whitespace and marks.

    Returns:
        End index (exclusive) of the match, extended over trailing marks,
        or None
    """
    if not token or start >= len(text) or is_mark(text[start]):
        return None
    if not letters_equal(text[start], token[0]):
        return None

    n_text, n_token = len(text), len(token)
    stack = [(start + 1, 1)]
    seen: set[tuple[int, int]] = set()

    while stack:
        i, j = stack.pop()
        if (i, j) in seen:
            continue
        seen.add((i, j))

        if j == n_token:
            end = i
            while end < n_text and is_mark(text[end]):
                end += 1
            return end
        if i >= n_text:
            continue

        ch = text[i]
        if token[j] == " ":
            if ch.isspace():
                k = i + 1
                while k < n_text and (text[k].isspace() or is_mark(text[k])):
                    k += 1
                stack.append((k, j + 1))
            elif is_mark(ch):
                stack.append((i + 1, j))
            continue

        # pushed last, tried first
        if is_mark(ch):
            stack.append((i + 1, j))
        if letters_equal(ch, token[j]):
            stack.append((i + 1, j + 1))

    return None


def get_highlight_ranges(
    text: str,
    tokens: Sequence[str],
    token_types: Sequence[MatchType] | None = None,
    default_type: MatchType = MatchType.SIMPLE,
) -> list[HighlightRange]:
    """
    Compute non-overlapping character ranges of tokens in display text.

    Tokens are matched longest first so that a shorter token cannot
    fragment a longer one's span; once characters are claimed no later
    match may overlap them.

    Args:
        text: Display text (usually the Uthmani verse)
        tokens: Tokens to find (diacritics in tokens are ignored)
        token_types: Match type per token, parallel to ``tokens``
        default_type: Type used when token_types is missing or short

    Returns:
        Ranges sorted by start position
    """
    if not text or not tokens:
        return []

    prepared: list[tuple[str, MatchType]] = []
    seen: set[str] = set()
    for idx, token in enumerate(tokens):
        clean = prepare_token(token)
        if not clean or clean in seen:
            continue
        seen.add(clean)
        match_type = default_type
        if token_types is not None and idx < len(token_types):
            if token_types[idx] != MatchType.NONE:
                match_type = MatchType(token_types[idx])
        prepared.append((clean, match_type))

    prepared.sort(key=lambda item: len(item[0]), reverse=True)

    ranges: list[HighlightRange] = []
    for token, match_type in prepared:
        pos = 0
        while pos < len(text):
            end = match_at(text, token, pos)
            if end is None:
                pos += 1
                continue
            if any(r.overlaps(pos, end) for r in ranges):
                pos += 1
                continue
            ranges.append(HighlightRange(start=pos, end=end, match_type=match_type))
            pos = end

    ranges.sort(key=lambda r: r.start)
    return ranges


def get_positive_tokens(
    verse: Verse,
    mode: HighlightMode | str,
    lemma: str | None,
    root: str | None,
    query: str,
    morphology: Mapping[int, VerseMorphology],
) -> list[str]:
    """
    Extract the tokens of a verse to highlight for a query.

    Text mode returns the normalized query when the verse contains it.
    Lemma and root modes return the display (Uthmani) word at every
    position whose aligned lemma or root equals the given one.

    Args:
        verse: Verse (or ScoredVerse) being displayed
        mode: text, lemma or root
        lemma: Resolved lemma of the query (lemma mode)
        root: Resolved root of the query (root mode)
        query: Raw query
        morphology: Mapping of gid to VerseMorphology

    Returns:
        Ordered, de-duplicated list of tokens (may be empty)
    """
    mode = HighlightMode(mode)

    if mode == HighlightMode.TEXT:
        clean = normalize_arabic(query)
        if not clean:
            return []
        for field in (verse.standard, verse.standard_full):
            if contains_query(normalize_arabic(field), clean):
                return [clean]
        return []

    target = lemma if mode == HighlightMode.LEMMA else root
    key = normalize_arabic(target or "")
    if not key:
        return []

    iv = index_verse(verse, morphology)
    if not iv.has_morphology:
        return []

    values = iv.lemmas if mode == HighlightMode.LEMMA else iv.roots
    tokens: list[str] = []
    for i in positions_of(values, key):
        word = iv.display[i]
        if word not in tokens:
            tokens.append(word)
    return tokens
