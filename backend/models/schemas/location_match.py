"""Location matcher output."""

from enum import Enum

from pydantic import BaseModel

from models.schemas.records import Location


class LocationMatchType(str, Enum):
    EXACT = "exact"
    SAME_STATE = "same_state"
    SAME_COUNTRY = "same_country"
    REMOTE = "remote"
    NO_MATCH = "no_match"


class LocationMatchResult(BaseModel):
    score: int = 0  # 0-100
    candidate_location: Location = Location()
    job_locations: list[Location] = []
    remote_ok: bool = False
    match_type: LocationMatchType = LocationMatchType.NO_MATCH
    explanation: str = ""
