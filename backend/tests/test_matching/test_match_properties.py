"""Repeatability and score range across all matchers and the overall score."""

import pytest

from models.schemas.records import Candidate, ExperienceLevel, Job, Location

CANDIDATES = [
    Candidate(id="empty"),
    Candidate(
        id="veteran",
        location_city="Berlin",
        location_country="Germany",
        current_title="Chief Technology Officer",
        custom_fields={
            "skills": ["Go", "Kubernetes", "Leadership"],
            "yearsOfExperience": 25,
            "education": [{"level": "doctorate", "field": "Computer Science"}],
        },
    ),
    Candidate(
        id="graduate",
        location_city="Austin",
        location_state="TX",
        location_country="USA",
        current_title="Software Engineering Intern",
        custom_fields={
            "skills": ["Python"],
            "workHistory": [{"startDate": "2023-06-01", "endDate": "2023-09-01"}],
            "education": [{"level": "high_school"}],
        },
    ),
]

JOBS = [
    Job(id="bare", title=""),
    Job(
        id="remote-principal",
        title="Principal Platform Engineer",
        seniority_level=ExperienceLevel.EXECUTIVE,
        remote_ok=True,
        custom_fields={
            "requiredSkills": ["Go", "Kubernetes", "AWS", "Terraform"],
            "preferredSkills": ["Leadership"],
            "requiredYearsOfExperience": 12,
            "requiredEducation": "master",
            "requiredField": "Computer Science",
        },
    ),
    Job(
        id="onsite-junior",
        title="Junior Python Developer",
        locations=[Location(city="Austin", state="TX", country="USA")],
        custom_fields={"requiredSkills": ["Python"], "requiredYearsOfExperience": 1},
    ),
]

WEIGHT_SETS = [
    None,
    {"skills": 0.2, "experience": 0.2, "education": 0.2, "location": 0.2, "title": 0.2},
    {"skills": 1.0, "experience": 0.0, "education": 0.0, "location": 0.0, "title": 0.0},
]


@pytest.mark.parametrize("candidate", CANDIDATES, ids=lambda c: c.id)
@pytest.mark.parametrize("job", JOBS, ids=lambda j: j.id)
class TestMatchProperties:
    def test_scores_within_bounds(self, matching_service, candidate, job):
        for weights in WEIGHT_SETS:
            score = matching_service.calculate_match_from_entities(candidate, job, weights)
            breakdown = score.breakdown
            for result in (
                breakdown.skills,
                breakdown.experience,
                breakdown.education,
                breakdown.location,
                breakdown.title,
            ):
                assert 0 <= result.score <= 100
            assert 0 <= score.overall <= 100

    def test_repeatable(self, matching_service, candidate, job):
        first = matching_service.calculate_match_from_entities(candidate, job)
        second = matching_service.calculate_match_from_entities(candidate, job)
        assert first == second
