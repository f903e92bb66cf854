"""
Configuration management for the Quran search engine.

Uses Pydantic Settings for type-safe configuration with environment variable support.
All settings can be overridden via environment variables with the QURAN_SEARCH_ prefix.
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class QuranSearchSettings(BaseSettings):
    """
    Configuration settings for the search engine.

    All settings can be overridden via environment variables with QURAN_SEARCH_ prefix.

    Example:
        export QURAN_SEARCH_DATA_DIR="/srv/quran/data"
        export QURAN_SEARCH_CACHE_CAPACITY="256"
        export QURAN_SEARCH_FUZZY_MAX_EDITS="1"
    """

    model_config = SettingsConfigDict(
        env_prefix="QURAN_SEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ============ Dataset Settings ============

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the verse, morphology and word-map datasets",
    )

    verses_file: str = Field(
        default="quran.json",
        description="Verse corpus file name inside data_dir",
    )

    morphology_file: str = Field(
        default="morphology.json",
        description="Per-verse morphology file name inside data_dir",
    )

    word_map_file: str = Field(
        default="word-map.json",
        description="Word to lemma/root dictionary file name inside data_dir",
    )

    # ============ Search Settings ============

    cache_capacity: int = Field(
        default=128,
        description="Number of search responses kept by the engine's LRU cache",
        ge=1,
    )

    default_page_size: int = Field(
        default=20,
        description="Results per page when the caller does not give a limit",
        ge=1,
        le=1000,
    )

    # ============ Fuzzy Matching ============

    fuzzy_min_query_length: int = Field(
        default=3,
        description="Shortest normalized query (in letters) eligible for fuzzy matching",
        ge=1,
    )

    fuzzy_chars_per_edit: int = Field(
        default=4,
        description="Query letters per allowed edit; short words always get one edit",
        ge=1,
    )

    fuzzy_max_edits: int = Field(
        default=2,
        description="Upper bound on Levenshtein edits for a fuzzy match",
        ge=1,
        le=5,
    )

    # ============ Validators ============

    @field_validator("data_dir", mode="before")
    @classmethod
    def convert_to_path(cls, v: str | Path) -> Path:
        """Convert string paths to Path objects."""
        if isinstance(v, str):
            return Path(v)
        return v

    def max_edits_for(self, query_length: int) -> int:
        """
        Allowed edit distance for a query of the given length.

        Returns:
            int: At least 1, at most fuzzy_max_edits
        """
        edits = query_length // self.fuzzy_chars_per_edit
        return max(1, min(edits, self.fuzzy_max_edits))


# Default settings instance
_default_settings: QuranSearchSettings | None = None


def get_settings() -> QuranSearchSettings:
    """
    Get the default settings instance (lazily created).

    Returns:
        QuranSearchSettings: The default settings
    """
    global _default_settings
    if _default_settings is None:
        _default_settings = QuranSearchSettings()
    return _default_settings


def configure(**kwargs) -> QuranSearchSettings:
    """
    Create and set new default settings.

    Args:
        **kwargs: Settings to override

    Returns:
        QuranSearchSettings: The new settings instance
    """
    global _default_settings
    _default_settings = QuranSearchSettings(**kwargs)
    return _default_settings
