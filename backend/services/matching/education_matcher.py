"""Education matcher: highest degree vs. required level, plus a field-of-study bonus."""

import logging
from collections.abc import Sequence

from models.schemas.education_match import EducationMatchResult
from models.schemas.records import Education, EducationLevel

logger = logging.getLogger(__name__)

LEVEL_ORDER: tuple[EducationLevel, ...] = (
    EducationLevel.HIGH_SCHOOL,
    EducationLevel.ASSOCIATE,
    EducationLevel.BACHELOR,
    EducationLevel.MASTER,
    EducationLevel.DOCTORATE,
)

LEVEL_LABELS: dict[EducationLevel, str] = {
    EducationLevel.HIGH_SCHOOL: "High School Diploma",
    EducationLevel.ASSOCIATE: "Associate's Degree",
    EducationLevel.BACHELOR: "Bachelor's Degree",
    EducationLevel.MASTER: "Master's Degree",
    EducationLevel.DOCTORATE: "Doctorate/PhD",
}

FIELD_MATCH_BONUS = 10

# Field clusters; lookups are substring-based in both directions.
RELATED_FIELDS: dict[str, tuple[str, ...]] = {
    "computer science": ("software engineering", "information technology", "computer engineering", "cs"),
    "software engineering": ("computer science", "information technology", "computer engineering"),
    "information technology": ("computer science", "software engineering", "information systems"),
    "electrical engineering": ("computer engineering", "electronics engineering"),
    "business administration": ("business management", "management", "mba"),
    "mathematics": ("applied mathematics", "statistics", "data science"),
    "data science": ("statistics", "mathematics", "computer science"),
    "mechanical engineering": ("engineering", "industrial engineering"),
}


def highest_education(educations: Sequence[Education]) -> Education:
    """First entry with the highest level."""
    return max(educations, key=lambda e: LEVEL_ORDER.index(e.level))


def is_field_match(candidate_field: str, required_field: str) -> bool:
    candidate = candidate_field.lower().strip()
    required = required_field.lower().strip()
    if candidate == required:
        return True

    for key, related in RELATED_FIELDS.items():
        if key in candidate and any(r in required for r in related):
            return True
        if key in required and any(r in candidate for r in related):
            return True
    return False


class EducationMatcher:

    def calculate_education_match(
        self,
        candidate_education: Sequence[Education],
        required_level: EducationLevel,
        required_field: str | None = None,
    ) -> EducationMatchResult:
        if not candidate_education:
            return EducationMatchResult(
                score=0,
                candidate_level=EducationLevel.HIGH_SCHOOL,
                required_level=required_level,
                meets_requirement=False,
                field_match=False,
                explanation="No education information provided.",
            )

        highest = highest_education(candidate_education)
        diff = LEVEL_ORDER.index(highest.level) - LEVEL_ORDER.index(required_level)
        held = LEVEL_LABELS[highest.level]
        wanted = LEVEL_LABELS[required_level]

        if diff >= 0:
            score, meets = 100, True
            if diff == 0:
                explanation = f"Candidate has {held}, matching the requirement."
            else:
                explanation = f"Candidate has {held}, exceeding the {wanted} requirement."
        elif diff == -1:
            score, meets = 70, False
            explanation = f"Candidate has {held}, one level below the {wanted} requirement."
        elif diff == -2:
            score, meets = 40, False
            explanation = f"Candidate has {held}, two levels below the {wanted} requirement."
        else:
            score, meets = 20, False
            explanation = f"Candidate has {held}, significantly below the {wanted} requirement."

        field_match = False
        if required_field and highest.field:
            field_match = is_field_match(highest.field, required_field)
            if field_match:
                score = min(100, score + FIELD_MATCH_BONUS)
                explanation += f" Field of study matches ({highest.field})."
            else:
                explanation += (
                    f" Field of study ({highest.field}) differs from required ({required_field})."
                )

        return EducationMatchResult(
            score=score,
            candidate_level=highest.level,
            required_level=required_level,
            meets_requirement=meets,
            field_match=field_match,
            explanation=explanation,
        )
