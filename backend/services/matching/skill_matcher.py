"""Skill matcher: scores a candidate's skills against required/preferred skills.

Each required skill is matched against the candidate's skills by an ordered
rule list; the first rule that finds a candidate skill wins:

    1. exact      - case-insensitive string equality, or both resolve to the
                    same canonical skill                          -> 100
    2. related    - the required skill's node lists the candidate
                    skill as related                              -> 70

Synonym resolution is folded into rule 1 (a synonym resolves to the same
canonical), so ``SkillMatchType.SYNONYM`` (90) is part of the contract but
never produced by this rule list.

Preferred skills use the same lookup and add a flat 10 points when matched.
"""

import logging
from collections.abc import Callable, Sequence

from models.schemas.skill_match import SkillMatch, SkillMatchResult, SkillMatchType
from services.matching.scoring import round_score
from services.matching.skill_taxonomy import SkillTaxonomy

logger = logging.getLogger(__name__)

REQUIRED_SKILL_POINTS = 100
PREFERRED_SKILL_POINTS = 10

MATCH_TYPE_SCORES: dict[SkillMatchType, int] = {
    SkillMatchType.EXACT: 100,
    SkillMatchType.SYNONYM: 90,
    SkillMatchType.RELATED: 70,
    SkillMatchType.NONE: 0,
}

# (candidate_skill, candidate_canonical, required_skill, required_canonical) -> bool
_Rule = Callable[[str, str, str, str | None], bool]


class SkillMatcher:
    """Taxonomy-aware skill comparison. Stateless apart from the shared taxonomy."""

    def __init__(self, taxonomy: SkillTaxonomy) -> None:
        self.taxonomy = taxonomy
        self._rules: tuple[tuple[SkillMatchType, _Rule], ...] = (
            (SkillMatchType.EXACT, self._is_exact),
            (SkillMatchType.RELATED, self._is_related),
        )

    def calculate_skill_match(
        self,
        candidate_skills: Sequence[str],
        required_skills: Sequence[str],
        preferred_skills: Sequence[str] = (),
    ) -> SkillMatchResult:
        matches: list[SkillMatch] = []
        missing_required: list[str] = []
        matched_preferred: list[str] = []

        earned = 0
        max_points = (
            len(required_skills) * REQUIRED_SKILL_POINTS
            + len(preferred_skills) * PREFERRED_SKILL_POINTS
        )

        candidate_canonicals = [self.taxonomy.find_canonical(s) or s for s in candidate_skills]

        for required in required_skills:
            match = self._find_best_match(required, candidate_skills, candidate_canonicals)
            if match is not None:
                matches.append(match)
                earned += match.score
            else:
                missing_required.append(required)

        for preferred in preferred_skills:
            if self._find_best_match(preferred, candidate_skills, candidate_canonicals) is not None:
                matched_preferred.append(preferred)
                earned += PREFERRED_SKILL_POINTS

        score = round_score(earned / max_points * 100) if max_points > 0 else 0

        return SkillMatchResult(
            score=score,
            matches=matches,
            missing_required=missing_required,
            matched_preferred=matched_preferred,
            total_required=len(required_skills),
            total_preferred=len(preferred_skills),
        )

    def _find_best_match(
        self,
        required_skill: str,
        candidate_skills: Sequence[str],
        candidate_canonicals: Sequence[str],
    ) -> SkillMatch | None:
        required_canonical = self.taxonomy.find_canonical(required_skill)

        for match_type, rule in self._rules:
            for candidate_skill, candidate_canonical in zip(candidate_skills, candidate_canonicals):
                if rule(candidate_skill, candidate_canonical, required_skill, required_canonical):
                    return SkillMatch(
                        candidate_skill=candidate_skill,
                        required_skill=required_skill,
                        match_type=match_type,
                        score=MATCH_TYPE_SCORES[match_type],
                    )
        return None

    @staticmethod
    def _is_exact(
        candidate_skill: str,
        candidate_canonical: str,
        required_skill: str,
        required_canonical: str | None,
    ) -> bool:
        if candidate_skill.lower() == required_skill.lower():
            return True
        return required_canonical is not None and candidate_canonical == required_canonical

    def _is_related(
        self,
        candidate_skill: str,
        candidate_canonical: str,
        required_skill: str,
        required_canonical: str | None,
    ) -> bool:
        if required_canonical is None:
            return False
        return self.taxonomy.is_related(required_canonical, candidate_canonical)

    def extract_skills(self, text: str) -> list[str]:
        """Find canonical skills mentioned in free text.

        Every unigram, bigram and trigram of the whitespace-split text is
        looked up; a phrase can contribute at more than one window size.
        Returns canonical names in first-seen order.
        """
        found: dict[str, None] = {}
        words = text.split()
        for i in range(len(words)):
            for size in (1, 2, 3):
                if i + size > len(words):
                    break
                canonical = self.taxonomy.find_canonical(" ".join(words[i:i + size]))
                if canonical:
                    found.setdefault(canonical, None)
        return list(found)

    def normalize_skills(self, skills: Sequence[str]) -> list[str]:
        """Map each skill to its canonical name, keeping unknown skills as given."""
        normalized: dict[str, None] = {}
        for skill in skills:
            normalized.setdefault(self.taxonomy.find_canonical(skill) or skill, None)
        return list(normalized)

    def get_suggested_skills(self, skills: Sequence[str], limit: int = 5) -> list[str]:
        """Related skills of the given ones that are not already held.

        Ordered by first appearance across the held skills' related lists.
        """
        held = {self.taxonomy.find_canonical(s) or s for s in skills}
        suggestions: dict[str, None] = {}
        for skill in skills:
            canonical = self.taxonomy.find_canonical(skill)
            node = self.taxonomy.get_skill(canonical) if canonical else None
            if node is None:
                continue
            for related in node.related:
                if related not in held and (self.taxonomy.find_canonical(related) or related) not in held:
                    suggestions.setdefault(related, None)
        return list(suggestions)[:max(limit, 0)]
