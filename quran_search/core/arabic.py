"""
Arabic text normalization utilities.

This module provides the normalization pipeline that makes exact, lemma
and root comparison well-defined despite diacritics, alphabetic variants
and presentation forms. ``normalize_arabic`` produces the canonical key
used for dictionary lookup and for every text comparison in the engine.
"""

import re
import unicodedata

# Tashkeel and Quranic annotation marks removed by remove_tashkeel
TASHKEEL_PATTERN = re.compile(
    r"[\u064B-\u065F\u0670\u06D6-\u06DC\u06DF-\u06E8\u06EA-\u06FC]"
)

WASL_ALEF = "\u0671"
ALEF = "\u0627"
HAMZA = "\u0621"
YA = "\u064A"
ALEF_MAQSURA = "\u0649"
DAGGER_ALEF = "\u0670"
TATWEEL = "\u0640"

_DAGGER_TATWEEL_PATTERN = re.compile(r"[\u0670\u0640]")
_ALEF_VARIANTS_PATTERN = re.compile(r"[\u0625\u0623\u0622\u0671]")
_HAMZA_VARIANTS_PATTERN = re.compile(r"[\u0624\u0626\u0621]")
_LINE_BREAK_PATTERN = re.compile(r"[\r\n]+")
_NON_ARABIC_PATTERN = re.compile(r"[^\u0621-\u064A\s-]+")
_WHITESPACE_PATTERN = re.compile(r"\s+")

# Main block, Supplement, Extended-A, Presentation Forms A and B
_ARABIC_SCRIPT_PATTERN = re.compile(
    r"[\u0600-\u06FF\u0750-\u077F\u08A0-\u08FF\uFB50-\uFDFF\uFE70-\uFEFF]"
)


def remove_tashkeel(text: str) -> str:
    """
    Remove tashkeel (diacritics) and Quranic marks from Arabic text.

    Wasl alef (ٱ) is mapped to plain alef first so that it survives as a letter.

    Args:
        text: Arabic text with diacritics

    Returns:
        Text without diacritics

    Examples:
        >>> remove_tashkeel("بِسْمِ ٱللَّهِ")
        'بسم الله'
    """
    if not text:
        return ""
    return TASHKEEL_PATTERN.sub("", text.replace(WASL_ALEF, ALEF))


def normalize_arabic(text: str) -> str:
    """
    Normalize Arabic text for search.

    Performs the following normalizations:
    - Remove tashkeel and Quranic marks, then apply NFC
    - Remove dagger alif and tatweel
    - Replace alef variants (أ إ آ ٱ) with plain alef (ا)
    - Replace hamza carriers (ؤ ئ) with bare hamza (ء)
    - Replace alef maqsura (ى) with ya (ي)
    - Drop everything that is not an Arabic letter, whitespace or hyphen
    - Collapse whitespace and strip

    The result is idempotent: normalizing twice gives the same text.

    Args:
        text: Arabic text to normalize

    Returns:
        Normalized text string

    Examples:
        >>> normalize_arabic("بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ")
        'بسم الله الرحمن الرحيم'
        >>> normalize_arabic("موسى")
        'موسي'
    """
    if not text:
        return ""

    text = unicodedata.normalize("NFC", remove_tashkeel(text))

    text = _DAGGER_TATWEEL_PATTERN.sub("", text)
    text = _ALEF_VARIANTS_PATTERN.sub(ALEF, text)
    text = _HAMZA_VARIANTS_PATTERN.sub(HAMZA, text)
    text = text.replace(ALEF_MAQSURA, YA)

    text = _LINE_BREAK_PATTERN.sub(" ", text)
    text = _NON_ARABIC_PATTERN.sub("", text)
    text = _WHITESPACE_PATTERN.sub(" ", text)

    return text.strip()


def is_arabic(text: str) -> bool:
    """
    Check whether text contains any Arabic-script character.

    Used to branch between Arabic and non-Arabic input (for example when
    comparing sura names), not for search correctness.

    Args:
        text: Any text

    Returns:
        True if at least one codepoint is in an Arabic block
    """
    if not text:
        return False
    return _ARABIC_SCRIPT_PATTERN.search(text) is not None


def split_words(text: str) -> list[str]:
    """
    Split verse text into whitespace-separated words.

    This is the tokenization the per-verse morphology is aligned to.

    Args:
        text: Verse text

    Returns:
        List of words (no empty strings)
    """
    if not text:
        return []
    return text.split()


def word_count(text: str) -> int:
    """
    Count words in text.

    Args:
        text: Verse text

    Returns:
        Number of words
    """
    return len(split_words(text))
