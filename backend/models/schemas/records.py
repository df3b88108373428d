"""Candidate, job and application records as supplied by the data layer.

These mirror the columns and ``custom_fields`` bags of the persisted
entities. The matching core only reads them, except for the application's
``custom_fields`` which receives the computed score.
"""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel


class ExperienceLevel(str, Enum):
    """Seniority levels, ordered lowest to highest."""
    ENTRY = "entry"  # 0-2 years
    JUNIOR = "junior"  # 2-4 years
    MID = "mid"  # 4-7 years
    SENIOR = "senior"  # 7-10 years
    LEAD = "lead"  # 10-15 years
    PRINCIPAL = "principal"  # 15+ years
    EXECUTIVE = "executive"  # C-level, never derived from years


class EducationLevel(str, Enum):
    """Education levels, ordered lowest to highest."""
    HIGH_SCHOOL = "high_school"
    ASSOCIATE = "associate"
    BACHELOR = "bachelor"
    MASTER = "master"
    DOCTORATE = "doctorate"


class Location(BaseModel):
    city: str | None = None
    state: str | None = None
    country: str = ""


class Education(BaseModel):
    """A single education entry."""
    level: EducationLevel
    field: str | None = None
    institution: str | None = None
    graduation_year: int | None = None


class WorkHistoryEntry(BaseModel):
    start_date: date
    end_date: date | None = None  # None means current role


class Candidate(BaseModel):
    id: str
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    location_city: str | None = None
    location_state: str | None = None
    location_country: str | None = None
    current_title: str | None = None
    tags: list[str] = []
    # skills, yearsOfExperience, workHistory, education
    custom_fields: dict[str, Any] = {}


class Job(BaseModel):
    id: str
    title: str
    seniority_level: ExperienceLevel | None = None
    remote_ok: bool = False
    locations: list[Location] = []
    # requiredSkills, preferredSkills, requiredYearsOfExperience,
    # requiredEducation, requiredField
    custom_fields: dict[str, Any] = {}


class Application(BaseModel):
    id: str
    candidate_id: str
    job_id: str
    custom_fields: dict[str, Any] = {}
