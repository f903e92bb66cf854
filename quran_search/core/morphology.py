"""
Morphology resolution.

Looks up the lemma and root of a single-word query in the word map, and
exposes the per-word lemma/root arrays of a verse once their alignment
with the verse's standard text has been checked.
"""

import logging
from typing import Mapping, Sequence

from quran_search.core.arabic import normalize_arabic, split_words
from quran_search.models import Verse, VerseMorphology, WordEntry

logger = logging.getLogger(__name__)


def normalize_dictionary(
    dictionary: Mapping[str, WordEntry | dict],
) -> dict[str, WordEntry]:
    """
    Re-key a word map by normalized surface form.

    Keys that collide after normalization keep the first entry seen.

    Args:
        dictionary: Mapping of surface word to WordEntry (or a plain dict)

    Returns:
        Mapping of normalized word to WordEntry
    """
    normalized: dict[str, WordEntry] = {}
    for word, entry in dictionary.items():
        key = normalize_arabic(word)
        if not key or key in normalized:
            continue
        if not isinstance(entry, WordEntry):
            entry = WordEntry.model_validate(entry)
        normalized[key] = entry
    return normalized


def resolve_word(clean_query: str, dictionary: Mapping[str, WordEntry]) -> WordEntry | None:
    """
    Find the morphological analysis of a normalized single-word query.

    Args:
        clean_query: Query already passed through normalize_arabic
        dictionary: Normalized word map

    Returns:
        The WordEntry, or None for empty, multi-word or unknown queries
    """
    if not clean_query or " " in clean_query:
        return None
    return dictionary.get(clean_query)


def aligned_morphology(
    verse: Verse,
    morphology: Mapping[int, VerseMorphology],
) -> tuple[list[str], list[str]] | None:
    """
    Get the normalized lemma and root arrays aligned to a verse's words.

    A verse whose analysis is missing, or shorter than its word count, is
    not eligible for lemma/root matching; extra trailing entries are ignored.

    Args:
        verse: Verse to look up
        morphology: Mapping of gid to VerseMorphology

    Returns:
        Tuple of (lemmas, roots) with one entry per word, or None
    """
    entry = morphology.get(verse.gid)
    if entry is None:
        return None

    n_words = len(split_words(verse.standard))
    if len(entry.lemmas) < n_words or len(entry.roots) < n_words:
        logger.debug(
            "Morphology for verse %s misaligned: %d words, %d lemmas, %d roots",
            verse.gid, n_words, len(entry.lemmas), len(entry.roots),
        )
        return None

    lemmas = [normalize_arabic(lemma) for lemma in entry.lemmas[:n_words]]
    roots = [normalize_arabic(root) for root in entry.roots[:n_words]]
    return lemmas, roots


def display_words(verse: Verse) -> list[str]:
    """
    Get the display-script word at each position of the standard text.

    Uthmani text can carry stand-alone pause marks between words; those are
    dropped before pairing words by position. When the Uthmani text still
    does not split into the same number of words, the standard words are
    used instead.

    Args:
        verse: Verse to split

    Returns:
        One word per position of ``verse.standard``
    """
    standard_words = split_words(verse.standard)
    uthmani_words = [
        word for word in split_words(verse.uthmani)
        if normalize_arabic(word)
    ]
    if len(uthmani_words) == len(standard_words):
        return uthmani_words
    return standard_words


def positions_of(values: Sequence[str], target: str) -> list[int]:
    """Indices at which ``values`` equals ``target``."""
    if not target:
        return []
    return [i for i, value in enumerate(values) if value == target]
