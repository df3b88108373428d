"""Orchestrator output: weighted overall score with per-category breakdown."""

from pydantic import BaseModel, Field

from models.schemas.education_match import EducationMatchResult
from models.schemas.experience_match import ExperienceMatchResult
from models.schemas.location_match import LocationMatchResult
from models.schemas.skill_match import SkillMatchResult
from models.schemas.title_match import TitleMatchResult


class MatchWeights(BaseModel):
    """Per-category weights for the overall score.

    Weights are expected to sum to 1.0 for ``overall`` to land in 0-100.
    Overriding a subset does not rescale the others.
    """
    skills: float = Field(0.40, ge=0)
    experience: float = Field(0.25, ge=0)
    education: float = Field(0.15, ge=0)
    location: float = Field(0.10, ge=0)
    title: float = Field(0.10, ge=0)

    def total(self) -> float:
        return self.skills + self.experience + self.education + self.location + self.title

    def normalized(self) -> "MatchWeights":
        """Return a copy rescaled to sum to 1.0 (unchanged if all zero)."""
        total = self.total()
        if total <= 0:
            return self.model_copy()
        return MatchWeights(**{k: v / total for k, v in self.model_dump().items()})


class MatchBreakdown(BaseModel):
    skills: SkillMatchResult
    experience: ExperienceMatchResult
    education: EducationMatchResult
    location: LocationMatchResult
    title: TitleMatchResult


class MatchScore(BaseModel):
    overall: int = 0  # 0-100 when weights sum to 1.0
    breakdown: MatchBreakdown
    skill_gaps: list[str] = []  # missing required skills
    match_reasons: list[str] = []
    weights: MatchWeights = MatchWeights()


class CandidateMatchResult(BaseModel):
    """One ranked entry of a batch match for a job."""
    candidate_id: str
    job_id: str
    match_score: MatchScore
