"""Shared dependencies for API routes.

The taxonomy and matching service are built once in ``main.create_app`` and
kept on ``app.state``.
"""

from fastapi import Request

from services.matching.candidate_matcher import CandidateMatchingService
from services.matching.skill_matcher import SkillMatcher
from services.matching.skill_taxonomy import SkillTaxonomy
from services.matching.title_matcher import TitleMatcher


def get_matching_service(request: Request) -> CandidateMatchingService:
    return request.app.state.matching_service


def get_skill_matcher(request: Request) -> SkillMatcher:
    return request.app.state.matching_service.skill_matcher


def get_title_matcher(request: Request) -> TitleMatcher:
    return request.app.state.matching_service.title_matcher


def get_taxonomy(request: Request) -> SkillTaxonomy:
    return request.app.state.taxonomy
