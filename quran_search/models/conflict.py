"""
Filter-conflict diagnostic model.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ConflictKind(str, Enum):
    """Why a filtered search came back empty."""

    SURA_ID_MISMATCH = "sura_id_mismatch"
    JUZ_MISMATCH = "juz_mismatch"
    FILTERS_TOO_NARROW = "filters_too_narrow"
    NO_RESULTS = "no_results"


class ConflictReport(BaseModel):
    """
    Explanation for an empty result set.

    Attributes:
        kind: Category of the conflict
        message: Human-readable explanation (Arabic)
        sura_id: Sura of the hit that explains the conflict, if any
        juz_id: Juz of the hit that explains the conflict, if any
    """

    model_config = ConfigDict(frozen=True)

    kind: ConflictKind
    message: str = Field(..., min_length=1)
    sura_id: Optional[int] = Field(default=None, ge=1, le=114)
    juz_id: Optional[int] = Field(default=None, ge=1, le=30)

    def __str__(self) -> str:
        return self.message
