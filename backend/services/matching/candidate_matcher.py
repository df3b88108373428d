"""Candidate matching orchestrator: five matchers -> one explainable score.

Flow for one candidate/job pair:
    candidate record ──► CandidateProfile ─┐
    job record ──► JobRequirementSource ───┤
                                           ├─ SkillMatcher       ─┐
                                           ├─ ExperienceMatcher   │
                                           ├─ EducationMatcher    ├─► weighted sum ─► MatchScore
                                           ├─ LocationMatcher     │    + match reasons
                                           └─ TitleMatcher       ─┘

Weights are merged over the defaults without renormalization unless the
service is built with ``normalize_weights=True``.
"""

import logging
import math
from collections.abc import Callable, Mapping, Sequence
from datetime import datetime, timezone

import numpy as np

from models.schemas.location_match import LocationMatchType
from models.schemas.match_score import (
    CandidateMatchResult,
    MatchBreakdown,
    MatchScore,
    MatchWeights,
)
from models.schemas.records import Candidate, Job
from models.schemas.title_match import TitleMatchType
from services.matching.education_matcher import EducationMatcher
from services.matching.experience_matcher import ExperienceMatcher
from services.matching.location_matcher import LocationMatcher
from services.matching.repository import MatchingRepository
from services.matching.requirements import (
    CustomFieldsRequirements,
    JobRequirementSource,
    extract_candidate_profile,
)
from services.matching.scoring import format_years, round_score
from services.matching.skill_matcher import SkillMatcher
from services.matching.title_matcher import TitleMatcher

logger = logging.getLogger(__name__)

WEIGHT_FIELDS = ("skills", "experience", "education", "location", "title")

WeightOverrides = MatchWeights | Mapping[str, float | None] | None


class CandidateMatchingService:

    def __init__(
        self,
        repository: MatchingRepository,
        skill_matcher: SkillMatcher,
        experience_matcher: ExperienceMatcher | None = None,
        education_matcher: EducationMatcher | None = None,
        location_matcher: LocationMatcher | None = None,
        title_matcher: TitleMatcher | None = None,
        default_weights: MatchWeights | None = None,
        normalize_weights: bool = False,
        requirement_source: Callable[[Job], JobRequirementSource] = CustomFieldsRequirements,
    ) -> None:
        self.repository = repository
        self.skill_matcher = skill_matcher
        self.experience_matcher = experience_matcher or ExperienceMatcher()
        self.education_matcher = education_matcher or EducationMatcher()
        self.location_matcher = location_matcher or LocationMatcher()
        self.title_matcher = title_matcher or TitleMatcher()
        self.default_weights = default_weights or MatchWeights()
        self.normalize_weights = normalize_weights
        self.requirement_source = requirement_source

    def resolve_weights(self, custom_weights: WeightOverrides = None) -> MatchWeights:
        """Merge overrides over the defaults."""
        if isinstance(custom_weights, MatchWeights):
            overrides = custom_weights.model_dump()
        else:
            overrides = {k: v for k, v in (custom_weights or {}).items() if v is not None}

        weights = MatchWeights(**{**self.default_weights.model_dump(), **overrides})
        if self.normalize_weights:
            return weights.normalized()
        if not math.isclose(weights.total(), 1.0, abs_tol=1e-6):
            logger.warning(
                "Match weights sum to %.3f, overall score may fall outside 0-100", weights.total()
            )
        return weights

    def calculate_match_from_entities(
        self,
        candidate: Candidate,
        job: Job,
        custom_weights: WeightOverrides = None,
    ) -> MatchScore:
        weights = self.resolve_weights(custom_weights)
        profile = extract_candidate_profile(candidate, self.experience_matcher)
        requirements = self.requirement_source(job)

        skills = self.skill_matcher.calculate_skill_match(
            profile.skills,
            requirements.required_skills(),
            requirements.preferred_skills(),
        )
        experience = self.experience_matcher.calculate_experience_match(
            profile.years_of_experience,
            requirements.required_experience_years(),
            job.seniority_level,
        )
        education = self.education_matcher.calculate_education_match(
            profile.education,
            requirements.required_education_level(),
            requirements.required_field(),
        )
        location = self.location_matcher.calculate_location_match(
            profile.location,
            job.locations,
            job.remote_ok,
        )
        title = self.title_matcher.calculate_title_match(profile.title, job.title)

        breakdown = MatchBreakdown(
            skills=skills,
            experience=experience,
            education=education,
            location=location,
            title=title,
        )

        scores = np.array([getattr(breakdown, name).score for name in WEIGHT_FIELDS], dtype=float)
        weight_vec = np.array([getattr(weights, name) for name in WEIGHT_FIELDS], dtype=float)
        overall = round_score(float(np.dot(scores, weight_vec)))

        logger.debug(
            "Match candidate=%s job=%s overall=%d breakdown=%s",
            candidate.id, job.id, overall, scores.tolist(),
        )

        return MatchScore(
            overall=overall,
            breakdown=breakdown,
            skill_gaps=list(skills.missing_required),
            match_reasons=_build_match_reasons(breakdown),
            weights=weights,
        )

    async def calculate_match(
        self,
        candidate_id: str,
        job_id: str,
        custom_weights: WeightOverrides = None,
    ) -> MatchScore:
        candidate = await self.repository.get_candidate(candidate_id)
        job = await self.repository.get_job(job_id)
        if candidate is None or job is None:
            raise ValueError("Candidate or Job not found")
        return self.calculate_match_from_entities(candidate, job, custom_weights)

    async def calculate_matches_for_job(
        self,
        job_id: str,
        candidate_ids: Sequence[str] | None = None,
        custom_weights: WeightOverrides = None,
        limit: int | None = None,
    ) -> list[CandidateMatchResult]:
        """Score candidates for a job and rank them, best first.

        Without ``candidate_ids`` every candidate who applied to the job is
        scored. Ties are broken by candidate id, ascending.
        """
        job = await self.repository.get_job(job_id)
        if job is None:
            raise ValueError("Job not found")

        if candidate_ids:
            ids = list(dict.fromkeys(candidate_ids))
        else:
            applications = await self.repository.get_applications_for_job(job_id)
            ids = list(dict.fromkeys(a.candidate_id for a in applications))
        candidates = await self.repository.get_candidates(ids)

        if len(candidates) < len(ids):
            logger.warning(
                "Job %s: %d of %d candidates not found", job_id, len(ids) - len(candidates), len(ids)
            )

        results = [
            CandidateMatchResult(
                candidate_id=candidate.id,
                job_id=job.id,
                match_score=self.calculate_match_from_entities(candidate, job, custom_weights),
            )
            for candidate in candidates
        ]
        results.sort(key=lambda r: (-r.match_score.overall, r.candidate_id))

        logger.info("Scored %d candidates for job %s", len(results), job_id)
        return results[:limit] if limit is not None else results

    async def update_application_match_score(self, application_id: str) -> MatchScore:
        """Recompute the score for an application and write it to its custom fields."""
        application = await self.repository.get_application(application_id)
        if application is None:
            raise ValueError("Application not found")

        candidate = await self.repository.get_candidate(application.candidate_id)
        job = await self.repository.get_job(application.job_id)
        if candidate is None or job is None:
            raise ValueError("Candidate or Job not found")

        match_score = self.calculate_match_from_entities(candidate, job)
        updated = application.model_copy(update={
            "custom_fields": {
                **(application.custom_fields or {}),
                **to_application_fields(match_score),
            },
        })
        await self.repository.save_application(updated)

        logger.info("Application %s match score updated: %d", application_id, match_score.overall)
        return match_score


def to_application_fields(match_score: MatchScore, now: datetime | None = None) -> dict:
    """JSON-ready patch for an application's custom fields."""
    now = now or datetime.now(timezone.utc)
    return {
        "matchScore": match_score.overall,
        "matchBreakdown": {
            name: getattr(match_score.breakdown, name).score for name in WEIGHT_FIELDS
        },
        "skillGaps": list(match_score.skill_gaps),
        "matchReasons": list(match_score.match_reasons),
        "lastMatchCalculated": now.isoformat(),
    }


# ---------------------------------------------------------------------------
# Match reasons
# ---------------------------------------------------------------------------

def _build_match_reasons(breakdown: MatchBreakdown) -> list[str]:
    reasons: list[str] = []

    skills = breakdown.skills
    if skills.score >= 80:
        reasons.append(f"Strong skill match with {len(skills.matches)} matching skills")
    elif skills.score >= 60:
        reasons.append("Good skill match with some gaps")
    elif skills.missing_required:
        reasons.append(f"Missing {len(skills.missing_required)} required skills")

    exp = breakdown.experience
    years = format_years(exp.candidate_years)
    if exp.meets_requirement:
        if exp.candidate_years > exp.required_years * 1.5:
            reasons.append(f"Highly experienced ({years} years)")
        else:
            reasons.append(f"Meets experience requirement ({years} years)")
    else:
        reasons.append(
            f"Below experience requirement ({years} vs {format_years(exp.required_years)} years)"
        )

    edu = breakdown.education
    if edu.meets_requirement:
        reasons.append(f"Meets education requirement ({edu.candidate_level.value})")
        if edu.field_match:
            reasons.append("Relevant field of study")
    else:
        reasons.append("Below education requirement")

    location_type = breakdown.location.match_type
    if location_type == LocationMatchType.EXACT:
        reasons.append("Located in job location")
    elif location_type == LocationMatchType.REMOTE:
        reasons.append("Remote position - location flexible")
    elif location_type == LocationMatchType.NO_MATCH:
        reasons.append("Relocation required")

    if breakdown.title.match_type in (TitleMatchType.EXACT, TitleMatchType.SIMILAR):
        reasons.append("Similar role experience")

    return reasons
