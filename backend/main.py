import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from api.router import limiter, router
from config import settings
from services.matching.factory import build_matching_service
from services.matching.repository import InMemoryMatchingRepository, MatchingRepository
from services.matching.skill_taxonomy import SkillTaxonomy

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(repository: MatchingRepository | None = None) -> FastAPI:
    app = FastAPI(
        title="Candidate Matching API",
        description="Rule-based candidate-to-job match scoring",
        version="1.0.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    taxonomy = SkillTaxonomy()
    app.state.taxonomy = taxonomy
    app.state.repository = repository or InMemoryMatchingRepository()
    app.state.matching_service = build_matching_service(app.state.repository, taxonomy)

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.include_router(router)
    return app


app = create_app()
