"""
Verse corpus and morphology data models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Verse(BaseModel):
    """
    Represents a single verse (aya) of the corpus.

    Verses are immutable once loaded; corpus order follows ``gid``.

    Attributes:
        gid: Global verse identifier (1-6236), the canonical ordering key
        uthmani: Fully diacriticized display text
        standard: Simplified script used for comparison and tokenization
        standard_full: Simplified script with vowel marks
        sura_id: Sura number (1-114)
        aya_id: Aya number within the sura
        aya_id_display: Aya number as displayed
        juz_id: Juz number (1-30)
        page_id: Mushaf page number
        sura_name: Arabic sura name
        sura_name_en: English sura name
        sura_name_romanization: Romanized sura name
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        json_schema_extra={
            "examples": [
                {
                    "gid": 1,
                    "uthmani": "بِسْمِ ٱللَّهِ ٱلرَّحْمَٰنِ ٱلرَّحِيمِ",
                    "standard": "بسم الله الرحمن الرحيم",
                    "standard_full": "بِسْمِ اللَّهِ الرَّحْمَنِ الرَّحِيمِ",
                    "sura_id": 1,
                    "aya_id": 1,
                    "aya_id_display": "1",
                    "juz_id": 1,
                    "page_id": 1,
                    "sura_name": "الفاتحة",
                    "sura_name_en": "The Opening",
                    "sura_name_romanization": "Al-Fatihah",
                }
            ]
        },
    )

    gid: int = Field(..., description="Global verse identifier", ge=1)
    uthmani: str = Field(..., description="Diacriticized Uthmani display text")
    standard: str = Field(..., description="Simplified script used for matching")
    standard_full: str = Field(
        default="",
        description="Simplified script with vowel marks",
    )
    sura_id: int = Field(..., description="Sura number (1-114)", ge=1, le=114)
    aya_id: int = Field(..., description="Aya number within the sura", ge=1)
    aya_id_display: str = Field(default="", description="Aya number as displayed")
    juz_id: int = Field(..., description="Juz number (1-30)", ge=1, le=30)
    page_id: int = Field(default=1, description="Mushaf page number", ge=1)
    sura_name: str = Field(default="", description="Arabic sura name")
    sura_name_en: Optional[str] = Field(default=None, description="English sura name")
    sura_name_romanization: Optional[str] = Field(
        default=None,
        description="Romanized sura name",
    )

    @field_validator("aya_id_display", mode="before")
    @classmethod
    def display_as_string(cls, v: object) -> object:
        """Datasets store the display number either as text or as a number."""
        if isinstance(v, int):
            return str(v)
        return v

    def __str__(self) -> str:
        return f"Verse({self.sura_id}:{self.aya_id})"


class VerseMorphology(BaseModel):
    """
    Lemma and root analysis of one verse.

    ``lemmas`` and ``roots`` are positionally aligned with the
    whitespace-split words of the verse's ``standard`` text.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    gid: int = Field(..., description="Verse this analysis belongs to", ge=1)
    lemmas: list[str] = Field(default_factory=list, description="Lemma per word")
    roots: list[str] = Field(default_factory=list, description="Root per word")


class WordEntry(BaseModel):
    """Best-known morphological analysis of a surface word form."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    lemma: Optional[str] = Field(default=None, description="Dictionary base form")
    root: Optional[str] = Field(default=None, description="Morphological root")
