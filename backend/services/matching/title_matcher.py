"""Title matcher: role similarity adjusted by seniority distance.

Titles are normalized, then split into a role (seniority keywords removed)
and a seniority weight (highest keyword found, mid-level when none).
"""

import logging
import re

from models.schemas.title_match import TitleMatchResult, TitleMatchType

logger = logging.getLogger(__name__)

DEFAULT_SENIORITY = 2  # mid

SENIORITY_KEYWORDS: dict[str, int] = {
    "intern": 0,
    "junior": 1,
    "associate": 1,
    "mid": 2,
    "intermediate": 2,
    "senior": 3,
    "sr": 3,
    "lead": 4,
    "principal": 5,
    "staff": 5,
    "architect": 5,
    "director": 6,
    "vp": 7,
    "vice president": 7,
    "chief": 8,
    "cto": 8,
    "ceo": 8,
}

_KEYWORD_PATTERNS: dict[str, re.Pattern] = {
    kw: re.compile(rf"\b{re.escape(kw)}\b") for kw in SENIORITY_KEYWORDS
}

TITLE_SYNONYMS: dict[str, tuple[str, ...]] = {
    "software engineer": ("software developer", "programmer", "developer", "engineer"),
    "frontend developer": ("frontend engineer", "front end developer", "ui developer"),
    "backend developer": ("backend engineer", "back end developer", "server developer"),
    "fullstack developer": ("full stack developer", "fullstack engineer", "full stack engineer"),
    "devops engineer": ("devops", "site reliability engineer", "sre", "platform engineer"),
    "data scientist": ("data analyst", "ml engineer", "machine learning engineer"),
    "product manager": ("pm", "product owner", "product lead"),
    "engineering manager": ("engineering lead", "development manager", "tech lead manager"),
    "qa engineer": ("quality assurance engineer", "test engineer", "sdet", "qa"),
    "ui designer": ("user interface designer", "visual designer", "product designer"),
    "ux designer": ("user experience designer", "ux researcher", "interaction designer"),
    "technical writer": ("documentation engineer", "content developer", "technical author"),
    "recruiter": ("technical recruiter", "talent acquisition specialist", "hiring manager"),
}

RELATED_ROLES: dict[str, tuple[str, ...]] = {
    "software engineer": ("frontend developer", "backend developer", "fullstack developer", "devops engineer"),
    "frontend developer": ("software engineer", "fullstack developer", "ui designer"),
    "backend developer": ("software engineer", "fullstack developer", "devops engineer"),
    "fullstack developer": ("software engineer", "frontend developer", "backend developer"),
    "devops engineer": ("software engineer", "backend developer", "platform engineer"),
    "data scientist": ("data engineer", "ml engineer", "data analyst"),
    "product manager": ("project manager", "program manager", "product owner"),
    "ui designer": ("ux designer", "product designer", "graphic designer"),
    "ux designer": ("ui designer", "product designer", "ux researcher"),
}


def normalize_title(title: str) -> str:
    return re.sub(r"[^a-z0-9\s]", "", title.lower().strip())


def extract_role(normalized_title: str) -> str:
    role = normalized_title
    for pattern in _KEYWORD_PATTERNS.values():
        role = pattern.sub("", role)
    return re.sub(r"\s+", " ", role).strip()


def extract_seniority(normalized_title: str) -> int:
    found = [w for kw, w in SENIORITY_KEYWORDS.items() if _KEYWORD_PATTERNS[kw].search(normalized_title)]
    return max(found) if found else DEFAULT_SENIORITY


def _variant_overlaps(role: str, variant: str) -> bool:
    return variant in role or role in variant


def are_synonyms(role_a: str, role_b: str) -> bool:
    if not role_a or not role_b:
        return False
    if role_a == role_b:
        return True
    for canonical, synonyms in TITLE_SYNONYMS.items():
        variants = (canonical, *synonyms)
        if any(_variant_overlaps(role_a, v) for v in variants) and any(
            _variant_overlaps(role_b, v) for v in variants
        ):
            return True
    return False


def are_related(role_a: str, role_b: str) -> bool:
    if not role_a or not role_b:
        return False
    for key, related in RELATED_ROLES.items():
        if key in role_a and any(r in role_b for r in related):
            return True
        if key in role_b and any(r in role_a for r in related):
            return True
    return False


class TitleMatcher:

    def calculate_title_match(self, candidate_title: str, job_title: str) -> TitleMatchResult:
        norm_candidate = normalize_title(candidate_title)
        norm_job = normalize_title(job_title)

        def result(score: int, match_type: TitleMatchType, explanation: str) -> TitleMatchResult:
            return TitleMatchResult(
                score=score,
                candidate_title=candidate_title,
                job_title=job_title,
                match_type=match_type,
                explanation=explanation,
            )

        if not norm_candidate or not norm_job:
            return result(30, TitleMatchType.DIFFERENT, "Title information is missing.")

        if norm_candidate == norm_job:
            return result(100, TitleMatchType.EXACT, "Candidate title exactly matches the job title.")

        candidate_role = extract_role(norm_candidate)
        job_role = extract_role(norm_job)

        if are_synonyms(candidate_role, job_role):
            distance = abs(extract_seniority(norm_candidate) - extract_seniority(norm_job))
            if distance == 0:
                score, match_type = 90, TitleMatchType.SIMILAR
            elif distance == 1:
                score, match_type = 85, TitleMatchType.SIMILAR
            elif distance == 2:
                score, match_type = 75, TitleMatchType.SIMILAR
            else:
                score, match_type = 70, TitleMatchType.RELATED
            return result(
                score, match_type,
                f"Candidate title ({candidate_title}) is similar to job title ({job_title}).",
            )

        if are_related(candidate_role, job_role):
            return result(
                60, TitleMatchType.RELATED,
                f"Candidate title ({candidate_title}) is related to job title ({job_title}).",
            )

        return result(
            30, TitleMatchType.DIFFERENT,
            f"Candidate title ({candidate_title}) differs from job title ({job_title}).",
        )

    def get_suggested_titles(self, title: str, limit: int = 5) -> list[str]:
        """Synonymous titles for the role in ``title``, excluding the role itself."""
        role = extract_role(normalize_title(title))
        if not role:
            return []
        suggestions: dict[str, None] = {}
        for canonical, synonyms in TITLE_SYNONYMS.items():
            if canonical in role or any(s in role for s in synonyms):
                suggestions.setdefault(canonical, None)
                for s in synonyms:
                    suggestions.setdefault(s, None)
        suggestions.pop(role, None)
        return list(suggestions)[:max(limit, 0)]
