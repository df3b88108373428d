"""Location matcher: categorical comparison, no geocoding.

    remote_ok       100  (short-circuits all comparison)
    exact           100  city + state + country
    same_state       80  state + country, both states present
    same_country     60
    no_match         30
"""

import logging
from collections.abc import Sequence

from models.schemas.location_match import LocationMatchResult, LocationMatchType
from models.schemas.records import Location

logger = logging.getLogger(__name__)

# Placeholder distances (km) per tier until a geocoding service is wired in.
_TIER_DISTANCES = {
    LocationMatchType.EXACT: 0,
    LocationMatchType.SAME_STATE: 100,
    LocationMatchType.SAME_COUNTRY: 500,
    LocationMatchType.NO_MATCH: 5000,
}


def _norm(value: str | None) -> str:
    return value.lower().strip() if value else ""


def is_exact_match(a: Location, b: Location) -> bool:
    return (
        _norm(a.city) == _norm(b.city)
        and _norm(a.state) == _norm(b.state)
        and _norm(a.country) == _norm(b.country)
    )


def is_same_state(a: Location, b: Location) -> bool:
    return (
        bool(_norm(a.state))
        and bool(_norm(b.state))
        and _norm(a.state) == _norm(b.state)
        and _norm(a.country) == _norm(b.country)
    )


def is_same_country(a: Location, b: Location) -> bool:
    return _norm(a.country) == _norm(b.country)


def format_location(location: Location) -> str:
    return ", ".join(p for p in (location.city, location.state, location.country) if p)


class LocationMatcher:

    def calculate_location_match(
        self,
        candidate_location: Location,
        job_locations: Sequence[Location],
        remote_ok: bool,
    ) -> LocationMatchResult:
        def result(score: int, match_type: LocationMatchType, explanation: str) -> LocationMatchResult:
            return LocationMatchResult(
                score=score,
                candidate_location=candidate_location,
                job_locations=list(job_locations),
                remote_ok=remote_ok,
                match_type=match_type,
                explanation=explanation,
            )

        if remote_ok:
            return result(
                100, LocationMatchType.REMOTE,
                "Position allows remote work, location is not a constraint.",
            )

        if any(is_exact_match(candidate_location, loc) for loc in job_locations):
            return result(
                100, LocationMatchType.EXACT,
                f"Candidate is located in {format_location(candidate_location)}, matching the job location.",
            )

        if any(is_same_state(candidate_location, loc) for loc in job_locations):
            return result(
                80, LocationMatchType.SAME_STATE,
                f"Candidate is in the same state/region ({candidate_location.state}) as the job location.",
            )

        if any(is_same_country(candidate_location, loc) for loc in job_locations):
            return result(
                60, LocationMatchType.SAME_COUNTRY,
                f"Candidate is in the same country ({candidate_location.country}) as the job location.",
            )

        return result(
            30, LocationMatchType.NO_MATCH,
            f"Candidate location ({format_location(candidate_location) or 'unknown'}) does not match "
            "job locations. Relocation may be required.",
        )

    def calculate_distance(self, a: Location, b: Location) -> int:
        """Bucketed stand-in for a real distance, by match tier."""
        if is_exact_match(a, b):
            return _TIER_DISTANCES[LocationMatchType.EXACT]
        if is_same_state(a, b):
            return _TIER_DISTANCES[LocationMatchType.SAME_STATE]
        if is_same_country(a, b):
            return _TIER_DISTANCES[LocationMatchType.SAME_COUNTRY]
        return _TIER_DISTANCES[LocationMatchType.NO_MATCH]
