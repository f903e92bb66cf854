"""
Unit tests for Arabic text normalization.
"""

import pytest
from quran_search.core.arabic import (
    is_arabic,
    normalize_arabic,
    remove_tashkeel,
    split_words,
    word_count,
)


class TestRemoveTashkeel:
    """Test removal of diacritics and Quranic marks."""

    def test_remove_basic_tashkeel(self):
        """Test that diacritics are removed and wasl alef becomes alef."""
        assert remove_tashkeel("بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ") == "بسم الله الرحمن الرحيم"

    def test_text_without_tashkeel_unchanged(self):
        """Test that undecorated text passes through untouched."""
        assert remove_tashkeel("الحمد لله") == "الحمد لله"

    def test_empty_string(self):
        """Test removal on empty string."""
        assert remove_tashkeel("") == ""

    def test_remove_various_diacritics(self):
        """Test fatha, damma, kasra, sukun, shadda and tanween."""
        assert remove_tashkeel("فَتْحَةٌ ضَمَّةٌ كَسْرَةٌ") == "فتحة ضمة كسرة"

    @pytest.mark.parametrize("mark", ["\u06D6", "\u06DA", "\u06E1", "\u06E5", "\u0670"])
    def test_remove_quranic_marks(self, mark):
        """Test that Quranic annotation marks are removed."""
        assert remove_tashkeel(f"رب{mark}") == "رب"

    def test_idempotent(self):
        """Test that removing twice equals removing once."""
        once = remove_tashkeel("ٱلۡحَمۡدُ لِلَّهِ")
        assert remove_tashkeel(once) == once


class TestArabicNormalization:
    """Test Arabic text normalization functions."""

    @pytest.mark.parametrize("input_text,should_contain,should_not_contain", [
        ("بِسْمِ اللَّهِ الرَّحْمَٰنِ الرَّحِيمِ", ["بسم", "الله", "الرحمن"], ["بِسْمِ", "اللَّهِ"]),
        ("ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَالَمِينَ", ["الحمد", "العالمين"], ["ٱلْحَمْدُ", "ٱلْعَالَمِينَ"]),
    ])
    def test_normalize_diacritics_and_alif(self, input_text, should_contain, should_not_contain):
        """Test removal of diacritics and alif normalization."""
        normalized = normalize_arabic(input_text)

        for text in should_contain:
            assert text in normalized
        for text in should_not_contain:
            assert text not in normalized

    def test_normalize_alef_variants(self):
        """Test that all alef variants fold to bare alef."""
        assert normalize_arabic("أإآٱ") == "اااا"

    @pytest.mark.parametrize("variant", ["أ", "إ", "آ", "ٱ"])
    def test_normalize_single_alef_variant(self, variant):
        """Test each alef variant on its own."""
        assert normalize_arabic(variant) == "ا"

    def test_normalize_hamza_variants(self):
        """Test that hamza carriers fold to bare hamza."""
        assert normalize_arabic("ؤئ") == "ءء"

    def test_normalize_alif_maqsura(self):
        """Test that alif maqsura folds to ya."""
        assert normalize_arabic("موسى") == "موسي"

    def test_ta_marbuta_is_kept(self):
        """Test that ta marbuta is not folded during search normalization."""
        assert normalize_arabic("رَحْمَةً") == "رحمة"

    def test_remove_tatweel(self):
        """Test that tatweel is removed."""
        assert normalize_arabic("بـــســـم") == "بسم"

    def test_normalize_mixed_text(self):
        """Test a full verse with standard alefs."""
        assert normalize_arabic("الْحَمْدُ لِلَّهِ رَبِّ الْعَالَمِينَ") == "الحمد لله رب العالمين"

    def test_strips_non_arabic(self):
        """Test that digits, punctuation and Latin text are removed."""
        assert normalize_arabic("الله (1) abc، 123") == "الله"

    def test_keeps_hyphen(self):
        """Test that hyphens survive (used in root notation)."""
        assert normalize_arabic("و-س-ع") == "و-س-ع"

    def test_line_breaks_become_spaces(self):
        """Test that line breaks collapse to a single space."""
        assert normalize_arabic("بسم\r\nالله\n\nالرحمن") == "بسم الله الرحمن"

    def test_collapses_whitespace(self):
        """Test whitespace collapsing and trimming."""
        assert normalize_arabic("  بسم \t  الله  ") == "بسم الله"

    def test_normalize_empty_string(self):
        """Test normalization of empty string."""
        assert normalize_arabic("") == ""

    def test_normalize_preserves_word_count(self, normalization_test_cases):
        """Test that normalization preserves word boundaries."""
        for original, expected in normalization_test_cases:
            normalized = normalize_arabic(original)
            assert normalized == expected
            assert len(original.split()) == len(normalized.split())

    @pytest.mark.parametrize("text", [
        "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
        "قُلْ أَعُوذُ بِرَبِّ ٱلنَّاسِ",
        "مُؤْمِنٌ سَئَلَ مُوسَىٰ",
        "بـــســـم  \n  الله - abc 42",
        "   ",
        "",
    ])
    def test_idempotent(self, text):
        """Test that normalizing twice equals normalizing once."""
        once = normalize_arabic(text)
        assert normalize_arabic(once) == once


class TestIsArabic:
    """Test Arabic script detection."""

    @pytest.mark.parametrize("text,expected", [
        ("الله", True),
        ("Allah الله", True),
        ("\uFDF2", True),  # presentation form ligature
        ("\u0750", True),  # Arabic Supplement
        ("Al-Fatihah", False),
        ("123", False),
        ("", False),
    ])
    def test_is_arabic(self, text, expected):
        """Test detection across Arabic blocks."""
        assert is_arabic(text) is expected


class TestWords:
    """Test word splitting used for morphology alignment."""

    def test_split_words(self):
        """Test whitespace splitting."""
        assert split_words("بسم الله  الرحمن") == ["بسم", "الله", "الرحمن"]

    def test_word_count(self):
        """Test word counting."""
        assert word_count("الحمد لله رب العالمين") == 4
        assert word_count("") == 0
