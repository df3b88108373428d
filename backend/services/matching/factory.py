"""Wiring for the matching service: one taxonomy, shared by every consumer."""

import logging

from config import Settings, settings
from models.schemas.match_score import MatchWeights
from services.matching.candidate_matcher import CandidateMatchingService
from services.matching.repository import MatchingRepository
from services.matching.skill_matcher import SkillMatcher
from services.matching.skill_taxonomy import SkillTaxonomy
from services.matching.title_matcher import TitleMatcher

logger = logging.getLogger(__name__)


def default_weights(app_settings: Settings = settings) -> MatchWeights:
    return MatchWeights(
        skills=app_settings.match_weight_skills,
        experience=app_settings.match_weight_experience,
        education=app_settings.match_weight_education,
        location=app_settings.match_weight_location,
        title=app_settings.match_weight_title,
    )


def build_matching_service(
    repository: MatchingRepository,
    taxonomy: SkillTaxonomy | None = None,
    app_settings: Settings = settings,
) -> CandidateMatchingService:
    taxonomy = taxonomy or SkillTaxonomy()
    service = CandidateMatchingService(
        repository=repository,
        skill_matcher=SkillMatcher(taxonomy),
        title_matcher=TitleMatcher(),
        default_weights=default_weights(app_settings),
        normalize_weights=app_settings.match_normalize_weights,
    )
    logger.info("Matching service ready (%d skills in taxonomy)", len(taxonomy))
    return service
