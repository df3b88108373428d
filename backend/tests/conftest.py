"""Shared fixtures for the matching tests."""

import pytest

from models.schemas.records import Application, Candidate, Job, Location
from services.matching.candidate_matcher import CandidateMatchingService
from services.matching.repository import InMemoryMatchingRepository
from services.matching.skill_matcher import SkillMatcher
from services.matching.skill_taxonomy import SkillTaxonomy


@pytest.fixture(scope="session")
def taxonomy():
    return SkillTaxonomy()


@pytest.fixture
def skill_matcher(taxonomy):
    return SkillMatcher(taxonomy)


@pytest.fixture
def backend_job():
    return Job(
        id="job-1",
        title="Senior Backend Developer",
        remote_ok=False,
        locations=[Location(city="Austin", state="TX", country="USA")],
        custom_fields={
            "requiredSkills": ["Python", "Django", "Kubernetes"],
            "preferredSkills": ["Docker"],
            "requiredYearsOfExperience": 5,
            "requiredEducation": "bachelor",
            "requiredField": "Software Engineering",
        },
    )


@pytest.fixture
def strong_candidate():
    return Candidate(
        id="cand-strong",
        first_name="Ada",
        last_name="Lovelace",
        location_city="Austin",
        location_state="TX",
        location_country="USA",
        current_title="Senior Software Engineer",
        custom_fields={
            "skills": ["Python", "Django", "PostgreSQL", "Docker"],
            "yearsOfExperience": 8,
            "education": [{"level": "Master", "field": "Computer Science"}],
        },
    )


@pytest.fixture
def weak_candidate():
    return Candidate(
        id="cand-weak",
        location_city="Denver",
        location_state="CO",
        location_country="USA",
        current_title="Junior Frontend Developer",
        custom_fields={
            "skills": ["JavaScript", "React"],
            "yearsOfExperience": 1,
            "education": [{"level": "bachelor", "field": "Art History"}],
        },
    )


@pytest.fixture
def repository(backend_job, strong_candidate, weak_candidate):
    return InMemoryMatchingRepository(
        candidates=[strong_candidate, weak_candidate],
        jobs=[backend_job],
        applications=[
            Application(id="app-strong", candidate_id="cand-strong", job_id="job-1"),
            Application(id="app-weak", candidate_id="cand-weak", job_id="job-1",
                        custom_fields={"source": "referral"}),
        ],
    )


@pytest.fixture
def matching_service(repository, skill_matcher):
    return CandidateMatchingService(repository=repository, skill_matcher=skill_matcher)
