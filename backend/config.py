import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True

    # Default match weights, should sum to 1.0
    match_weight_skills: float = 0.40
    match_weight_experience: float = 0.25
    match_weight_education: float = 0.15
    match_weight_location: float = 0.10
    match_weight_title: float = 0.10
    match_normalize_weights: bool = False  # rescale overridden weights to sum to 1.0

    skill_suggestion_limit: int = 5
    title_suggestion_limit: int = 5
    max_batch_candidates: int = 500

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
