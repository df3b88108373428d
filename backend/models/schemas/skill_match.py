"""Skill matcher output: per-skill matches and the aggregate skill score."""

from enum import Enum

from pydantic import BaseModel


class SkillMatchType(str, Enum):
    EXACT = "exact"
    SYNONYM = "synonym"
    RELATED = "related"
    NONE = "none"


class SkillMatch(BaseModel):
    """One required skill satisfied by one candidate skill."""
    candidate_skill: str
    required_skill: str
    match_type: SkillMatchType = SkillMatchType.NONE
    score: int = 0  # 100 exact, 90 synonym, 70 related, 0 none


class SkillMatchResult(BaseModel):
    """Aggregate skill comparison for one candidate/job pair.

    score = round(100 * earned / (100 * total_required + 10 * total_preferred)),
    or 0 when there are no required or preferred skills.
    """
    score: int = 0  # 0-100
    matches: list[SkillMatch] = []  # satisfied required skills only
    missing_required: list[str] = []
    matched_preferred: list[str] = []
    total_required: int = 0
    total_preferred: int = 0
