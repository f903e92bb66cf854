"""
Exception hierarchy for the Quran search engine.

Only construction-time programmer errors raise. Query-time behaviour
(empty query, zero results, out-of-range page) is always a valid response.
"""


class QuranSearchError(Exception):
    """Base class for all errors raised by the library."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} ({self.details})"
        return self.message


class CacheCapacityError(QuranSearchError, ValueError):
    """Raised when an LRU cache is built with a non-positive or non-integer capacity."""

    def __init__(self, capacity: object):
        super().__init__(
            "LRUCache capacity must be a positive integer",
            {"capacity": capacity},
        )


class DatasetError(QuranSearchError):
    """Raised when a required dataset is absent while building a search context."""

    def __init__(self, dataset: str, reason: str = "Dataset is required"):
        super().__init__(f"{reason}: {dataset}", {"dataset": dataset})
        self.dataset = dataset


class DatasetLoadError(DatasetError):
    """Raised when a dataset file cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(path, reason)
        self.path = path
