"""Experience matcher: years of experience -> seniority level -> level-distance score.

Scoring by level difference (candidate minus required):

    +3 or more  70  meets, highly overqualified
    +2          80  meets
    +1          90  meets
     0         100  meets
    -1          70
    -2          50
    -3 or less  30
"""

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from models.schemas.experience_match import ExperienceMatchResult
from models.schemas.records import ExperienceLevel, WorkHistoryEntry
from services.matching.scoring import format_years, round_half_up

logger = logging.getLogger(__name__)

LEVEL_ORDER: tuple[ExperienceLevel, ...] = (
    ExperienceLevel.ENTRY,
    ExperienceLevel.JUNIOR,
    ExperienceLevel.MID,
    ExperienceLevel.SENIOR,
    ExperienceLevel.LEAD,
    ExperienceLevel.PRINCIPAL,
    ExperienceLevel.EXECUTIVE,
)

# Upper bound (exclusive) in years for each level; PRINCIPAL is the catch-all.
_YEAR_THRESHOLDS: tuple[tuple[float, ExperienceLevel], ...] = (
    (2, ExperienceLevel.ENTRY),
    (4, ExperienceLevel.JUNIOR),
    (7, ExperienceLevel.MID),
    (10, ExperienceLevel.SENIOR),
    (15, ExperienceLevel.LEAD),
)

_TIME_SEPARATOR_RE = re.compile(r"[T ]")


def years_to_level(years: float) -> ExperienceLevel:
    for upper, level in _YEAR_THRESHOLDS:
        if years < upper:
            return level
    return ExperienceLevel.PRINCIPAL


def level_difference(candidate_level: ExperienceLevel, required_level: ExperienceLevel) -> int:
    """Positive when the candidate is more senior than required."""
    return LEVEL_ORDER.index(candidate_level) - LEVEL_ORDER.index(required_level)


class ExperienceMatcher:

    def calculate_experience_match(
        self,
        candidate_years: float,
        required_years: float,
        required_level: ExperienceLevel | None = None,
    ) -> ExperienceMatchResult:
        candidate_level = years_to_level(candidate_years)
        target_level = required_level or years_to_level(required_years)
        diff = level_difference(candidate_level, target_level)

        years = format_years(candidate_years)
        cand = candidate_level.value
        target = target_level.value

        if diff == 0:
            score, meets = 100, True
            explanation = (
                f"Candidate has {years} years of experience, matching the {target} level requirement."
            )
        elif diff == 1:
            score, meets = 90, True
            explanation = (
                f"Candidate is overqualified with {years} years of experience "
                f"({cand} level) for {target} level position."
            )
        elif diff == 2:
            score, meets = 80, True
            explanation = (
                f"Candidate is significantly overqualified with {years} years of experience "
                f"({cand} level) for {target} level position."
            )
        elif diff > 2:
            score, meets = 70, True
            explanation = (
                f"Candidate is highly overqualified with {years} years of experience "
                f"({cand} level) for {target} level position."
            )
        elif diff == -1:
            score, meets = 70, False
            explanation = (
                f"Candidate has {years} years of experience ({cand} level), "
                f"slightly below the {target} level requirement."
            )
        elif diff == -2:
            score, meets = 50, False
            explanation = (
                f"Candidate has {years} years of experience ({cand} level), "
                f"below the {target} level requirement."
            )
        else:
            score, meets = 30, False
            explanation = (
                f"Candidate has {years} years of experience ({cand} level), "
                f"significantly below the {target} level requirement."
            )

        return ExperienceMatchResult(
            score=score,
            candidate_years=candidate_years,
            required_years=required_years,
            candidate_level=candidate_level,
            required_level=target_level,
            meets_requirement=meets,
            explanation=explanation,
        )

    def calculate_total_experience(
        self,
        work_history: Iterable[WorkHistoryEntry | Mapping[str, Any]],
        today: date | None = None,
    ) -> float:
        """Sum whole months across roles and return years rounded to one decimal.

        Open-ended roles run until ``today``. Negative spans count as zero.
        Entries that cannot be parsed are skipped.
        """
        today = today or date.today()
        total_months = 0

        for raw in work_history:
            try:
                entry = raw if isinstance(raw, WorkHistoryEntry) else _parse_entry(raw)
            except (TypeError, ValueError) as e:
                logger.warning("Skipping unparseable work history entry %r: %s", raw, e)
                continue

            end = entry.end_date or today
            months = (end.year - entry.start_date.year) * 12 + (end.month - entry.start_date.month)
            total_months += max(0, months)

        return round_half_up(total_months / 12, 1)


def _parse_entry(raw: Mapping[str, Any]) -> WorkHistoryEntry:
    """Accept both camelCase (custom fields) and snake_case keys."""
    data = dict(raw)
    for camel, snake in (("startDate", "start_date"), ("endDate", "end_date")):
        if camel in data:
            data.setdefault(snake, data.pop(camel))
        value = data.get(snake)
        # timestamps: keep the calendar date only
        if isinstance(value, datetime):
            data[snake] = value.date()
        elif isinstance(value, str):
            data[snake] = _TIME_SEPARATOR_RE.split(value.strip(), maxsplit=1)[0]
    return WorkHistoryEntry.model_validate(data)
