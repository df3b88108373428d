from pydantic import BaseModel, Field

from config import settings


class WeightOverrides(BaseModel):
    """Optional per-category weights; unset ones keep their defaults."""
    skills_weight: float | None = Field(None, ge=0, le=1)
    experience_weight: float | None = Field(None, ge=0, le=1)
    education_weight: float | None = Field(None, ge=0, le=1)
    location_weight: float | None = Field(None, ge=0, le=1)
    title_weight: float | None = Field(None, ge=0, le=1)

    def to_weights(self) -> dict[str, float] | None:
        weights = {
            "skills": self.skills_weight,
            "experience": self.experience_weight,
            "education": self.education_weight,
            "location": self.location_weight,
            "title": self.title_weight,
        }
        weights = {k: v for k, v in weights.items() if v is not None}
        return weights or None


class CalculateMatchRequest(WeightOverrides):
    candidate_id: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)


class JobMatchesRequest(WeightOverrides):
    job_id: str = Field(..., min_length=1)
    candidate_ids: list[str] | None = Field(None, max_length=settings.max_batch_candidates)
    limit: int | None = Field(None, ge=1)


class SkillMatchRequest(BaseModel):
    candidate_skills: list[str]
    required_skills: list[str]
    preferred_skills: list[str] = []


class ExtractSkillsRequest(BaseModel):
    text: str = Field(..., max_length=50000, description="Free text such as a resume or job description")


class NormalizeSkillsRequest(BaseModel):
    skills: list[str]


class SkillSuggestionsRequest(BaseModel):
    skills: list[str]
    limit: int = Field(settings.skill_suggestion_limit, ge=1, le=50)
