"""Tests for job title matching."""

import pytest

from models.schemas.title_match import TitleMatchType
from services.matching.title_matcher import (
    TitleMatcher,
    are_related,
    are_synonyms,
    extract_role,
    extract_seniority,
    normalize_title,
)


@pytest.fixture
def matcher():
    return TitleMatcher()


class TestTitleParsing:
    def test_normalize(self):
        assert normalize_title("  Sr. Software Engineer! ") == "sr software engineer"

    def test_extract_role_strips_seniority(self):
        assert extract_role("senior software engineer") == "software engineer"
        assert extract_role("vice president engineering") == "engineering"

    def test_keywords_match_whole_words(self):
        # "intern" inside "international" is not a seniority keyword
        assert extract_role("international sales manager") == "international sales manager"
        assert extract_seniority("international sales manager") == 2

    def test_extract_seniority(self):
        assert extract_seniority("senior software engineer") == 3
        assert extract_seniority("junior developer") == 1
        assert extract_seniority("software intern") == 0
        assert extract_seniority("software engineer") == 2
        assert extract_seniority("senior staff engineer") == 5

    def test_empty_roles_never_match(self):
        assert not are_synonyms("", "software engineer")
        assert not are_related("", "software engineer")

    def test_related_roles(self):
        assert are_related("data scientist", "data engineer")


class TestCalculateTitleMatch:
    def test_exact(self, matcher):
        result = matcher.calculate_title_match("Software Engineer", "software engineer")
        assert result.score == 100
        assert result.match_type == TitleMatchType.EXACT

    def test_one_seniority_step(self, matcher):
        result = matcher.calculate_title_match("Senior Software Engineer", "Software Engineer")
        assert result.score == 85
        assert result.match_type == TitleMatchType.SIMILAR

    def test_same_role_same_seniority(self, matcher):
        result = matcher.calculate_title_match("Software Developer", "Software Engineer")
        assert result.score == 90
        assert result.match_type == TitleMatchType.SIMILAR

    def test_two_seniority_steps(self, matcher):
        result = matcher.calculate_title_match("Junior Software Engineer", "Senior Software Engineer")
        assert result.score == 75
        assert result.match_type == TitleMatchType.SIMILAR

    def test_far_seniority_is_related(self, matcher):
        result = matcher.calculate_title_match("Software Engineering Intern", "Principal Software Engineer")
        assert result.score == 70
        assert result.match_type == TitleMatchType.RELATED

    def test_related_role(self, matcher):
        result = matcher.calculate_title_match("Data Scientist", "Data Engineer")
        assert result.score == 60
        assert result.match_type == TitleMatchType.RELATED

    def test_different(self, matcher):
        result = matcher.calculate_title_match("Recruiter", "Data Scientist")
        assert result.score == 30
        assert result.match_type == TitleMatchType.DIFFERENT

    def test_junior_ranks_below_unmarked_title(self, matcher):
        # no seniority keyword means mid, so junior is one step away
        result = matcher.calculate_title_match("Junior Developer", "Developer")
        assert result.score == 85
        assert result.match_type == TitleMatchType.SIMILAR

    @pytest.mark.parametrize("candidate,job", [
        ("", "Software Engineer"),
        ("Software Engineer", "   "),
        ("", ""),
        ("!!!", "  "),
    ])
    def test_missing_title(self, matcher, candidate, job):
        result = matcher.calculate_title_match(candidate, job)
        assert result.score == 30
        assert result.match_type == TitleMatchType.DIFFERENT
        assert result.explanation == "Title information is missing."


class TestSuggestedTitles:
    def test_synonyms_of_role(self, matcher):
        suggestions = matcher.get_suggested_titles("Senior Software Engineer")
        assert suggestions == ["software developer", "programmer", "developer", "engineer"]

    def test_limit(self, matcher):
        assert matcher.get_suggested_titles("Software Engineer", limit=2) == ["software developer", "programmer"]

    def test_unknown_title(self, matcher):
        assert matcher.get_suggested_titles("Astronaut") == []
