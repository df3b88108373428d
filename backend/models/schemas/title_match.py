"""Title matcher output."""

from enum import Enum

from pydantic import BaseModel


class TitleMatchType(str, Enum):
    EXACT = "exact"
    SIMILAR = "similar"
    RELATED = "related"
    DIFFERENT = "different"


class TitleMatchResult(BaseModel):
    score: int = 0  # 0-100
    candidate_title: str = ""
    job_title: str = ""
    match_type: TitleMatchType = TitleMatchType.DIFFERENT
    explanation: str = ""
