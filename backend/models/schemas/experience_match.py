"""Experience matcher output."""

from pydantic import BaseModel

from models.schemas.records import ExperienceLevel


class ExperienceMatchResult(BaseModel):
    score: int = 0  # 0-100
    candidate_years: float = 0.0
    required_years: float = 0.0
    candidate_level: ExperienceLevel = ExperienceLevel.ENTRY
    required_level: ExperienceLevel = ExperienceLevel.ENTRY
    meets_requirement: bool = False
    explanation: str = ""
