from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import (
    get_matching_service,
    get_skill_matcher,
    get_taxonomy,
    get_title_matcher,
)
from config import settings
from models.requests import (
    CalculateMatchRequest,
    ExtractSkillsRequest,
    JobMatchesRequest,
    NormalizeSkillsRequest,
    SkillMatchRequest,
    SkillSuggestionsRequest,
)
from models.responses import (
    CategoriesResponse,
    CategorySkillsResponse,
    MessageResponse,
    NormalizedSkillsResponse,
    SkillsResponse,
    SuggestionsResponse,
)
from models.schemas.match_score import CandidateMatchResult, MatchScore
from models.schemas.skill_match import SkillMatchResult
from services.matching.candidate_matcher import CandidateMatchingService
from services.matching.skill_matcher import SkillMatcher
from services.matching.skill_taxonomy import SkillTaxonomy
from services.matching.title_matcher import TitleMatcher

router = APIRouter()
matching = APIRouter(prefix="/matching", tags=["matching"])
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


@router.get("/health")
async def health(taxonomy: SkillTaxonomy = Depends(get_taxonomy)):
    return {
        "status": "ok",
        "taxonomy_skills": len(taxonomy),
    }


@matching.post("/calculate", response_model=MatchScore)
@limiter.limit(settings.rate_limit)
async def calculate_match(
    request: Request,
    body: CalculateMatchRequest,
    service: CandidateMatchingService = Depends(get_matching_service),
):
    try:
        return await service.calculate_match(body.candidate_id, body.job_id, body.to_weights())
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@matching.post("/job-matches", response_model=list[CandidateMatchResult])
@limiter.limit(settings.rate_limit)
async def calculate_job_matches(
    request: Request,
    body: JobMatchesRequest,
    service: CandidateMatchingService = Depends(get_matching_service),
):
    try:
        return await service.calculate_matches_for_job(
            body.job_id, body.candidate_ids, body.to_weights(), limit=body.limit
        )
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


@matching.post("/application/{application_id}/update-score", response_model=MessageResponse)
@limiter.limit(settings.rate_limit)
async def update_application_match_score(
    request: Request,
    application_id: str,
    service: CandidateMatchingService = Depends(get_matching_service),
):
    try:
        await service.update_application_match_score(application_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return MessageResponse(message="Match score updated successfully")


@matching.post("/skills/calculate", response_model=SkillMatchResult)
async def calculate_skill_match(
    body: SkillMatchRequest,
    skill_matcher: SkillMatcher = Depends(get_skill_matcher),
):
    return skill_matcher.calculate_skill_match(
        body.candidate_skills, body.required_skills, body.preferred_skills
    )


@matching.post("/skills/extract", response_model=SkillsResponse)
async def extract_skills(
    body: ExtractSkillsRequest,
    skill_matcher: SkillMatcher = Depends(get_skill_matcher),
):
    return SkillsResponse(skills=skill_matcher.extract_skills(body.text))


@matching.post("/skills/normalize", response_model=NormalizedSkillsResponse)
async def normalize_skills(
    body: NormalizeSkillsRequest,
    skill_matcher: SkillMatcher = Depends(get_skill_matcher),
):
    return NormalizedSkillsResponse(normalized=skill_matcher.normalize_skills(body.skills))


@matching.post("/skills/suggestions", response_model=SuggestionsResponse)
async def skill_suggestions(
    body: SkillSuggestionsRequest,
    skill_matcher: SkillMatcher = Depends(get_skill_matcher),
):
    return SuggestionsResponse(suggestions=skill_matcher.get_suggested_skills(body.skills, body.limit))


@matching.get("/titles/{title}/suggestions", response_model=SuggestionsResponse)
async def title_suggestions(
    title: str,
    limit: int = Query(settings.title_suggestion_limit, ge=1, le=50),
    title_matcher: TitleMatcher = Depends(get_title_matcher),
):
    return SuggestionsResponse(suggestions=title_matcher.get_suggested_titles(title, limit))


@matching.get("/taxonomy/categories", response_model=CategoriesResponse)
async def taxonomy_categories(taxonomy: SkillTaxonomy = Depends(get_taxonomy)):
    return CategoriesResponse(categories=sorted(taxonomy.get_categories()))


@matching.get("/taxonomy/categories/{category}", response_model=CategorySkillsResponse)
async def taxonomy_category_skills(category: str, taxonomy: SkillTaxonomy = Depends(get_taxonomy)):
    skills = taxonomy.get_skills_by_category(category)
    if not skills:
        raise HTTPException(status_code=404, detail=f"Unknown category: {category}")
    return CategorySkillsResponse(category=category, skills=skills)


router.include_router(matching)
