"""Tests for rounding helpers and service wiring."""

import pytest

from config import Settings
from services.matching.factory import build_matching_service, default_weights
from services.matching.repository import InMemoryMatchingRepository
from services.matching.scoring import format_years, round_half_up, round_score


class TestRounding:
    @pytest.mark.parametrize("value,expected", [(0.5, 1), (1.5, 2), (2.5, 3), (92.5, 93), (41.49, 41)])
    def test_round_score_half_up(self, value, expected):
        assert round_score(value) == expected

    def test_one_decimal(self):
        assert round_half_up(4.25, 1) == 4.3
        assert round_half_up(4.24, 1) == 4.2

    def test_format_years(self):
        assert format_years(12.0) == "12"
        assert format_years(3.5) == "3.5"


class TestFactory:
    def test_weights_from_settings(self):
        app_settings = Settings(match_weight_skills=0.5, match_weight_title=0.05)
        weights = default_weights(app_settings)
        assert weights.skills == 0.5
        assert weights.title == 0.05
        assert weights.experience == 0.25

    def test_shared_taxonomy(self, taxonomy):
        service = build_matching_service(InMemoryMatchingRepository(), taxonomy)
        assert service.skill_matcher.taxonomy is taxonomy
        assert service.normalize_weights is False

    def test_normalize_flag(self):
        service = build_matching_service(
            InMemoryMatchingRepository(), app_settings=Settings(match_normalize_weights=True)
        )
        assert service.normalize_weights is True
