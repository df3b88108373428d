"""Extraction of matcher inputs from candidate and job records.

Job-side requirements are read through the :class:`JobRequirementSource`
protocol so callers can plug in whatever store actually holds them. The
default source reads the job's ``custom_fields`` bag.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from models.schemas.records import Candidate, Education, EducationLevel, Job, Location
from services.matching.experience_matcher import ExperienceMatcher

logger = logging.getLogger(__name__)

DEFAULT_REQUIRED_EDUCATION = EducationLevel.BACHELOR


@runtime_checkable
class JobRequirementSource(Protocol):
    def required_skills(self) -> list[str]: ...

    def preferred_skills(self) -> list[str]: ...

    def required_experience_years(self) -> float: ...

    def required_education_level(self) -> EducationLevel: ...

    def required_field(self) -> str | None: ...


def _string_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [str(v) for v in value if isinstance(v, str) and v.strip()]


def _non_negative_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if number >= 0 else None


class CustomFieldsRequirements:
    """Requirements stored in ``job.custom_fields``.

    Missing or malformed keys fall back to: no skills, 0 years,
    a bachelor's degree, no field of study.
    """

    def __init__(self, job: Job) -> None:
        self.job = job
        self._fields = job.custom_fields or {}

    def required_skills(self) -> list[str]:
        return _string_list(self._fields.get("requiredSkills"))

    def preferred_skills(self) -> list[str]:
        return _string_list(self._fields.get("preferredSkills"))

    def required_experience_years(self) -> float:
        years = _non_negative_number(self._fields.get("requiredYearsOfExperience"))
        return years if years is not None else 0.0

    def required_education_level(self) -> EducationLevel:
        raw = self._fields.get("requiredEducation")
        if raw is None:
            return DEFAULT_REQUIRED_EDUCATION
        try:
            return EducationLevel(str(raw).lower())
        except ValueError:
            logger.warning("Job %s has unknown requiredEducation %r", self.job.id, raw)
            return DEFAULT_REQUIRED_EDUCATION

    def required_field(self) -> str | None:
        value = self._fields.get("requiredField")
        return value if isinstance(value, str) and value.strip() else None


@dataclass
class CandidateProfile:
    """Normalized candidate inputs for the matchers."""
    skills: list[str] = field(default_factory=list)
    years_of_experience: float = 0.0
    education: list[Education] = field(default_factory=list)
    location: Location = field(default_factory=Location)
    title: str = ""


def extract_candidate_profile(
    candidate: Candidate,
    experience_matcher: ExperienceMatcher,
) -> CandidateProfile:
    custom = candidate.custom_fields or {}

    # an explicit (even empty) skills list takes precedence over tags
    raw_skills = custom.get("skills")
    skills = _string_list(raw_skills) if raw_skills is not None else list(candidate.tags or [])

    years = _non_negative_number(custom.get("yearsOfExperience"))
    if not years:
        history = custom.get("workHistory")
        years = (
            experience_matcher.calculate_total_experience(history)
            if isinstance(history, list) else 0.0
        )

    education: list[Education] = []
    raw_education = custom.get("education")
    for entry in raw_education if isinstance(raw_education, list) else []:
        try:
            education.append(_parse_education(entry))
        except (TypeError, ValueError) as e:
            logger.warning("Candidate %s: skipping education entry %r: %s", candidate.id, entry, e)

    return CandidateProfile(
        skills=skills,
        years_of_experience=years,
        education=education,
        location=Location(
            city=candidate.location_city,
            state=candidate.location_state,
            country=candidate.location_country or "",
        ),
        title=candidate.current_title or "",
    )


def _parse_education(entry: Any) -> Education:
    if isinstance(entry, Education):
        return entry
    data = dict(entry)
    if "graduationYear" in data:
        data.setdefault("graduation_year", data.pop("graduationYear"))
    if isinstance(data.get("level"), str):
        data["level"] = data["level"].lower()
    return Education.model_validate(data)
