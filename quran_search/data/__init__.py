"""
Dataset loading.

Reads the three resident datasets from JSON files:
- quran.json: list of verse records
- morphology.json: list of {gid, lemmas, roots} records
- word-map.json: object mapping a surface word to {lemma, root}

Example:
    from quran_search.data import load_context

    context = load_context("data")
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from quran_search.config import QuranSearchSettings, get_settings
from quran_search.core.context import SearchContext
from quran_search.exceptions import DatasetLoadError
from quran_search.models import Verse, VerseMorphology, WordEntry

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    if not path.is_file():
        raise DatasetLoadError(str(path), "File not found")
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise DatasetLoadError(str(path), f"Could not read JSON: {e}") from e


def load_verses(path: str | Path) -> list[Verse]:
    """
    Load the verse corpus.

    Args:
        path: Path to a JSON list of verse records

    Returns:
        Verses sorted by gid

    Raises:
        DatasetLoadError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, list):
        raise DatasetLoadError(str(path), "Expected a list of verses")
    try:
        verses = [Verse.model_validate(item) for item in data]
    except ValidationError as e:
        raise DatasetLoadError(str(path), f"Invalid verse record: {e}") from e

    verses.sort(key=lambda v: v.gid)
    logger.info("Loaded %d verses from %s", len(verses), path)
    return verses


def load_morphology(path: str | Path) -> dict[int, VerseMorphology]:
    """
    Load per-verse morphology.

    Records without an integer gid are skipped.

    Args:
        path: Path to a JSON list of {gid, lemmas, roots} records

    Returns:
        Mapping of gid to VerseMorphology

    Raises:
        DatasetLoadError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    data = _read_json(path)
    if isinstance(data, dict):
        data = list(data.values())
    if not isinstance(data, list):
        raise DatasetLoadError(str(path), "Expected a list of morphology records")

    morphology: dict[int, VerseMorphology] = {}
    skipped = 0
    for item in data:
        if not isinstance(item, dict) or not isinstance(item.get("gid"), int):
            skipped += 1
            continue
        try:
            entry = VerseMorphology.model_validate(item)
        except ValidationError as e:
            raise DatasetLoadError(str(path), f"Invalid morphology record: {e}") from e
        morphology[entry.gid] = entry

    if skipped:
        logger.warning("Skipped %d morphology records without a gid in %s", skipped, path)
    logger.info("Loaded morphology for %d verses from %s", len(morphology), path)
    return morphology


def load_word_map(path: str | Path) -> dict[str, WordEntry]:
    """
    Load the word to lemma/root dictionary.

    Args:
        path: Path to a JSON object of word -> {lemma, root}

    Returns:
        Mapping of word to WordEntry

    Raises:
        DatasetLoadError: If the file is missing, unreadable or invalid
    """
    path = Path(path)
    data = _read_json(path)
    if not isinstance(data, dict):
        raise DatasetLoadError(str(path), "Expected an object of word entries")
    try:
        word_map = {word: WordEntry.model_validate(entry) for word, entry in data.items()}
    except ValidationError as e:
        raise DatasetLoadError(str(path), f"Invalid word entry: {e}") from e

    logger.info("Loaded %d word map entries from %s", len(word_map), path)
    return word_map


def load_context(
    data_dir: str | Path | None = None,
    settings: QuranSearchSettings | None = None,
) -> SearchContext:
    """
    Load all three datasets and build a search context.

    Args:
        data_dir: Directory holding the files (defaults to settings.data_dir)
        settings: Settings naming the files (defaults to get_settings())

    Returns:
        SearchContext

    Raises:
        DatasetLoadError: If any dataset cannot be loaded
    """
    settings = settings or get_settings()
    base = Path(data_dir) if data_dir is not None else settings.data_dir

    return SearchContext(
        load_verses(base / settings.verses_file),
        load_morphology(base / settings.morphology_file),
        load_word_map(base / settings.word_map_file),
    )


__all__ = [
    "load_verses",
    "load_morphology",
    "load_word_map",
    "load_context",
]
