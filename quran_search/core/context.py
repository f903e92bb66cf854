"""
Search context: the resident datasets and their pre-resolved index.

A SearchContext owns the verse corpus, the per-verse morphology and the
word map for the lifetime of the process. It is built once, never mutated,
and may be shared by concurrent searches without locking.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping

from quran_search.core.arabic import normalize_arabic, split_words
from quran_search.core.morphology import (
    aligned_morphology,
    display_words,
    normalize_dictionary,
    resolve_word,
)
from quran_search.exceptions import DatasetError
from quran_search.models import Verse, VerseMorphology, WordEntry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndexedVerse:
    """
    A verse with everything the matcher compares against, computed once.

    ``words``, ``display`` and (when present) ``lemmas``/``roots`` all have
    one entry per word of the verse's standard text.
    """

    verse: Verse
    text: str
    text_full: str
    words: tuple[str, ...]
    display: tuple[str, ...]
    lemmas: tuple[str, ...] | None = None
    roots: tuple[str, ...] | None = None

    @property
    def has_morphology(self) -> bool:
        """Whether the verse is eligible for lemma/root matching."""
        return self.lemmas is not None and self.roots is not None


def index_verse(verse: Verse, morphology: Mapping[int, VerseMorphology]) -> IndexedVerse:
    """Pre-compute the normalized forms of a verse."""
    aligned = aligned_morphology(verse, morphology)
    lemmas, roots = aligned if aligned is not None else (None, None)
    return IndexedVerse(
        verse=verse,
        text=normalize_arabic(verse.standard),
        text_full=normalize_arabic(verse.standard_full),
        words=tuple(normalize_arabic(word) for word in split_words(verse.standard)),
        display=tuple(display_words(verse)),
        lemmas=tuple(lemmas) if lemmas is not None else None,
        roots=tuple(roots) if roots is not None else None,
    )


class SearchContext:
    """
    Read-only handle on the three datasets a search needs.

    Args:
        verses: The verse corpus, in any order (re-sorted by gid)
        morphology: Mapping of gid to VerseMorphology (or plain dicts)
        dictionary: Mapping of surface word to WordEntry (or plain dicts)

    Raises:
        DatasetError: If any dataset is None

    Example:
        context = SearchContext(verses, morphology, word_map)
        response = search("الله", context)
    """

    def __init__(
        self,
        verses: Iterable[Verse | dict] | None,
        morphology: Mapping[int, VerseMorphology | dict] | None,
        dictionary: Mapping[str, WordEntry | dict] | None,
    ):
        if verses is None:
            raise DatasetError("verses")
        if morphology is None:
            raise DatasetError("morphology")
        if dictionary is None:
            raise DatasetError("dictionary")

        corpus = [
            v if isinstance(v, Verse) else Verse.model_validate(v)
            for v in verses
        ]
        corpus.sort(key=lambda v: v.gid)

        morph = {
            int(gid): m if isinstance(m, VerseMorphology) else VerseMorphology.model_validate(m)
            for gid, m in morphology.items()
        }

        self._verses: tuple[Verse, ...] = tuple(corpus)
        self._morphology = MappingProxyType(morph)
        self._dictionary = MappingProxyType(normalize_dictionary(dictionary))
        self._index: tuple[IndexedVerse, ...] = tuple(
            index_verse(v, self._morphology) for v in self._verses
        )
        self._by_gid = MappingProxyType({iv.verse.gid: iv for iv in self._index})

        without_morphology = sum(1 for iv in self._index if not iv.has_morphology)
        logger.debug(
            "Search context built: %d verses, %d without usable morphology, %d dictionary words",
            len(self._verses), without_morphology, len(self._dictionary),
        )

    @property
    def verses(self) -> tuple[Verse, ...]:
        """The corpus in gid order."""
        return self._verses

    @property
    def morphology(self) -> Mapping[int, VerseMorphology]:
        """Read-only mapping of gid to VerseMorphology."""
        return self._morphology

    @property
    def dictionary(self) -> Mapping[str, WordEntry]:
        """Read-only word map keyed by normalized word."""
        return self._dictionary

    @property
    def index(self) -> tuple[IndexedVerse, ...]:
        """Pre-resolved verses in gid order."""
        return self._index

    def indexed(self, gid: int) -> IndexedVerse | None:
        """Indexed form of the verse with this gid."""
        return self._by_gid.get(gid)

    def lookup(self, word: str) -> WordEntry | None:
        """Resolve a raw word (normalized here) in the word map."""
        return resolve_word(normalize_arabic(word), self._dictionary)

    def __len__(self) -> int:
        return len(self._verses)

    def __repr__(self) -> str:
        return f"SearchContext(verses={len(self._verses)}, words={len(self._dictionary)})"
