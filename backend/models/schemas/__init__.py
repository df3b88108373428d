"""Pydantic contracts for the candidate-to-job matching engine."""

from models.schemas.records import (
    Application,
    Candidate,
    Education,
    EducationLevel,
    ExperienceLevel,
    Job,
    Location,
    WorkHistoryEntry,
)
from models.schemas.skill_taxonomy import SkillNode
from models.schemas.skill_match import SkillMatch, SkillMatchResult, SkillMatchType
from models.schemas.experience_match import ExperienceMatchResult
from models.schemas.education_match import EducationMatchResult
from models.schemas.location_match import LocationMatchResult, LocationMatchType
from models.schemas.title_match import TitleMatchResult, TitleMatchType
from models.schemas.match_score import (
    CandidateMatchResult,
    MatchBreakdown,
    MatchScore,
    MatchWeights,
)

__all__ = [
    "Application",
    "Candidate",
    "Education",
    "EducationLevel",
    "ExperienceLevel",
    "Job",
    "Location",
    "WorkHistoryEntry",
    "SkillNode",
    "SkillMatch",
    "SkillMatchResult",
    "SkillMatchType",
    "ExperienceMatchResult",
    "EducationMatchResult",
    "LocationMatchResult",
    "LocationMatchType",
    "TitleMatchResult",
    "TitleMatchType",
    "CandidateMatchResult",
    "MatchBreakdown",
    "MatchScore",
    "MatchWeights",
]
