"""Tests for reading matcher inputs out of candidate and job records."""

from datetime import datetime

from models.schemas.records import Candidate, EducationLevel, Job
from services.matching.experience_matcher import ExperienceMatcher
from services.matching.requirements import (
    CustomFieldsRequirements,
    JobRequirementSource,
    extract_candidate_profile,
)


def _job(**custom_fields):
    return Job(id="job-x", title="Engineer", custom_fields=custom_fields)


class TestCustomFieldsRequirements:
    def test_reads_fields(self, backend_job):
        source = CustomFieldsRequirements(backend_job)
        assert isinstance(source, JobRequirementSource)
        assert source.required_skills() == ["Python", "Django", "Kubernetes"]
        assert source.preferred_skills() == ["Docker"]
        assert source.required_experience_years() == 5.0
        assert source.required_education_level() == EducationLevel.BACHELOR
        assert source.required_field() == "Software Engineering"

    def test_defaults_when_empty(self):
        source = CustomFieldsRequirements(_job())
        assert source.required_skills() == []
        assert source.preferred_skills() == []
        assert source.required_experience_years() == 0.0
        assert source.required_education_level() == EducationLevel.BACHELOR
        assert source.required_field() is None

    def test_malformed_values(self, caplog):
        source = CustomFieldsRequirements(_job(
            requiredSkills="Python",
            preferredSkills=["AWS", "", 3],
            requiredYearsOfExperience=-3,
            requiredEducation="PhD",
            requiredField="   ",
        ))
        assert source.required_skills() == []
        assert source.preferred_skills() == ["AWS"]
        assert source.required_experience_years() == 0.0
        assert source.required_education_level() == EducationLevel.BACHELOR
        assert "unknown requiredEducation" in caplog.text
        assert source.required_field() is None

    def test_string_numbers_and_level_case(self):
        source = CustomFieldsRequirements(_job(requiredYearsOfExperience="7", requiredEducation="Master"))
        assert source.required_experience_years() == 7.0
        assert source.required_education_level() == EducationLevel.MASTER


class TestExtractCandidateProfile:
    def test_reads_custom_fields(self, strong_candidate):
        profile = extract_candidate_profile(strong_candidate, ExperienceMatcher())
        assert profile.skills == ["Python", "Django", "PostgreSQL", "Docker"]
        assert profile.years_of_experience == 8.0
        assert profile.education[0].level == EducationLevel.MASTER
        assert profile.location.city == "Austin"
        assert profile.title == "Senior Software Engineer"

    def test_falls_back_to_tags_and_work_history(self):
        candidate = Candidate(
            id="c",
            tags=["Go", "Docker"],
            custom_fields={
                "workHistory": [{"startDate": "2015-01-01", "endDate": "2020-01-01"}],
                "education": [
                    {"level": "Doctorate", "field": "Physics", "graduationYear": 2014},
                    {"level": "wizard"},
                ],
            },
        )
        profile = extract_candidate_profile(candidate, ExperienceMatcher())
        assert profile.skills == ["Go", "Docker"]
        assert profile.years_of_experience == 5.0
        assert len(profile.education) == 1
        assert profile.education[0].graduation_year == 2014

    def test_work_history_timestamps(self):
        candidate = Candidate(
            id="c",
            custom_fields={
                "workHistory": [{"startDate": datetime(2015, 1, 1, 8), "endDate": datetime(2020, 1, 1, 8)}],
            },
        )
        profile = extract_candidate_profile(candidate, ExperienceMatcher())
        assert profile.years_of_experience == 5.0

    def test_empty_skills_list_keeps_tags_out(self):
        candidate = Candidate(id="c", tags=["Go"], custom_fields={"skills": []})
        assert extract_candidate_profile(candidate, ExperienceMatcher()).skills == []

    def test_null_skills_fall_back_to_tags(self):
        candidate = Candidate(id="c", tags=["Go"], custom_fields={"skills": None})
        assert extract_candidate_profile(candidate, ExperienceMatcher()).skills == ["Go"]

    def test_empty_candidate(self):
        profile = extract_candidate_profile(Candidate(id="c"), ExperienceMatcher())
        assert profile.skills == []
        assert profile.years_of_experience == 0.0
        assert profile.education == []
        assert profile.location.country == ""
        assert profile.title == ""
