"""Education matcher output."""

from pydantic import BaseModel

from models.schemas.records import EducationLevel


class EducationMatchResult(BaseModel):
    score: int = 0  # 0-100, includes the field-of-study bonus
    candidate_level: EducationLevel = EducationLevel.HIGH_SCHOOL
    required_level: EducationLevel = EducationLevel.BACHELOR
    meets_requirement: bool = False
    field_match: bool = False
    explanation: str = ""
