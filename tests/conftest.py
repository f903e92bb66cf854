"""
Shared fixtures and test configuration for quran-search-engine tests.
"""

import json

import pytest
from quran_search.config import QuranSearchSettings
from quran_search.core import SearchContext
from quran_search.models import Verse, VerseMorphology, WordEntry


def _fatiha(gid, aya_id, standard, uthmani):
    return Verse(
        gid=gid, uthmani=uthmani, standard=standard, standard_full=uthmani,
        sura_id=1, aya_id=aya_id, aya_id_display=str(aya_id), juz_id=1, page_id=1,
        sura_name="الفاتحة", sura_name_en="The Opening",
        sura_name_romanization="Al-Fatihah",
    )


def _nas(gid, aya_id, standard, uthmani):
    return Verse(
        gid=gid, uthmani=uthmani, standard=standard, standard_full=uthmani,
        sura_id=114, aya_id=aya_id, aya_id_display=str(aya_id), juz_id=30, page_id=604,
        sura_name="الناس", sura_name_en="Mankind",
        sura_name_romanization="An-Nas",
    )


@pytest.fixture
def sample_verses():
    """First four ayahs of Al-Fatiha and first three of An-Nas."""
    return [
        _fatiha(1, 1, "بسم الله الرحمن الرحيم", "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"),
        _fatiha(2, 2, "الحمد لله رب العالمين", "ٱلْحَمْدُ لِلَّهِ رَبِّ ٱلْعَٰلَمِينَ"),
        _fatiha(3, 3, "الرحمن الرحيم", "ٱلرَّحْمَٰنِ ٱلرَّحِيمِ"),
        _fatiha(4, 4, "مالك يوم الدين", "مَٰلِكِ يَوْمِ ٱلدِّينِ"),
        _nas(6231, 1, "قل أعوذ برب الناس", "قُلْ أَعُوذُ بِرَبِّ ٱلنَّاسِ"),
        _nas(6232, 2, "ملك الناس", "مَلِكِ ٱلنَّاسِ"),
        _nas(6233, 3, "إله الناس", "إِلَٰهِ ٱلنَّاسِ"),
    ]


@pytest.fixture
def sample_morphology():
    """Per-verse lemmas and roots aligned with the standard text."""
    return {
        1: VerseMorphology(
            gid=1,
            lemmas=["اسم", "الله", "الرحمن", "الرحيم"],
            roots=["س م و", "أ ل ه", "ر ح م", "ر ح م"],
        ),
        2: VerseMorphology(
            gid=2,
            lemmas=["حمد", "الله", "رب", "عالم"],
            roots=["ح م د", "أ ل ه", "ر ب ب", "ع ل م"],
        ),
        3: VerseMorphology(gid=3, lemmas=["الرحمن", "الرحيم"], roots=["ر ح م", "ر ح م"]),
        4: VerseMorphology(gid=4, lemmas=["مالك", "يوم", "دين"], roots=["م ل ك", "ي و م", "د ي ن"]),
        6231: VerseMorphology(
            gid=6231,
            lemmas=["قال", "عاذ", "رب", "ناس"],
            roots=["ق و ل", "ع و ذ", "ر ب ب", "ن و س"],
        ),
        6232: VerseMorphology(gid=6232, lemmas=["ملك", "ناس"], roots=["م ل ك", "ن و س"]),
        6233: VerseMorphology(gid=6233, lemmas=["إله", "ناس"], roots=["أ ل ه", "ن و س"]),
    }


@pytest.fixture
def sample_word_map():
    """Word map entries for the surface forms used in tests."""
    return {
        "الله": WordEntry(lemma="الله", root="أ ل ه"),
        "الرحيم": WordEntry(lemma="الرحيم", root="ر ح م"),
        "رحمة": WordEntry(lemma="رحمة", root="ر ح م"),
        "أيام": WordEntry(lemma="يوم", root="ي و م"),
        "الناس": WordEntry(lemma="ناس", root="ن و س"),
    }


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return QuranSearchSettings(_env_file=None)


@pytest.fixture
def context(sample_verses, sample_morphology, sample_word_map):
    """Search context over the sample datasets."""
    return SearchContext(sample_verses, sample_morphology, sample_word_map)


@pytest.fixture
def data_dir(tmp_path, sample_verses, sample_morphology, sample_word_map):
    """Directory holding the sample datasets as JSON files."""
    (tmp_path / "quran.json").write_text(
        json.dumps([v.model_dump() for v in sample_verses], ensure_ascii=False),
        encoding="utf-8",
    )
    (tmp_path / "morphology.json").write_text(
        json.dumps([m.model_dump() for m in sample_morphology.values()], ensure_ascii=False),
        encoding="utf-8",
    )
    (tmp_path / "word-map.json").write_text(
        json.dumps({w: e.model_dump() for w, e in sample_word_map.items()}, ensure_ascii=False),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def normalization_test_cases():
    """Test cases for Arabic normalization."""
    return [
        ("بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ", "بسم الله الرحمن الرحيم"),
        ("الْحَمْدُ لِلَّهِ رَبِّ الْعَالَمِينَ", "الحمد لله رب العالمين"),
        ("ٱلۡحَمۡدُ لِلَّهِ رَبِّ ٱلۡعَٰلَمِينَ", "الحمد لله رب العلمين"),
    ]
