"""Tests for health badges, priority sections and feature gates."""

import pytest

from completeness.engine import calculate_profile_completeness
from completeness.gates import (
    Feature, FEATURE_THRESHOLDS, FeatureLockedError,
    ensure_feature_unlocked, is_feature_unlocked,
)
from completeness.health import (
    get_profile_health_status, find_priority_section, sections_needing_attention,
)
from models.schemas import SectionId


class TestHealthStatus:

    @pytest.mark.parametrize("percentage,status,color", [
        (100, "Excellent", "green"),
        (90, "Excellent", "green"),
        (89, "Good", "blue"),
        (75, "Good", "blue"),
        (74, "Needs Work", "yellow"),
        (50, "Needs Work", "yellow"),
        (49, "Incomplete", "red"),
        (0, "Incomplete", "red"),
    ])
    def test_brackets(self, percentage, status, color):
        health = get_profile_health_status(percentage)

        assert health.status == status
        assert health.color == color
        assert health.message

    def test_to_dict(self):
        assert set(get_profile_health_status(80).to_dict()) == {"status", "color", "icon", "message"}


class TestPrioritySection:

    def test_empty_profile_points_at_personal_info(self, empty_profile):
        completeness = calculate_profile_completeness(empty_profile, current_year=2026)
        section = find_priority_section(completeness)

        assert section.id == SectionId.PERSONAL

    def test_lowest_score_wins(self, full_profile):
        full_profile["skills"] = []
        full_profile["personalInfo"]["phone"] = ""
        completeness = calculate_profile_completeness(full_profile, current_year=2026)

        assert find_priority_section(completeness).id == SectionId.SKILLS

    def test_nothing_outstanding(self, full_profile):
        completeness = calculate_profile_completeness(full_profile, current_year=2026)
        assert find_priority_section(completeness) is None

    def test_sections_needing_attention(self, empty_profile):
        completeness = calculate_profile_completeness(empty_profile, current_year=2026)
        sections = sections_needing_attention(completeness)

        assert [s.id for s in sections] == [
            SectionId.PERSONAL, SectionId.EXPERIENCE, SectionId.EDUCATION, SectionId.SKILLS,
        ]
        assert len(sections_needing_attention(completeness, limit=2)) == 2


class TestFeatureGates:

    def test_thresholds(self):
        assert FEATURE_THRESHOLDS[Feature.JOB_SEARCH] == 75
        assert FEATURE_THRESHOLDS[Feature.TEMPLATES] == 85

    def test_full_profile_unlocks_everything(self, full_profile):
        completeness = calculate_profile_completeness(full_profile, current_year=2026)

        for feature in Feature:
            assert is_feature_unlocked(completeness, feature)
            ensure_feature_unlocked(completeness, feature)

    def test_locked_feature_raises_with_details(self, empty_profile):
        completeness = calculate_profile_completeness(empty_profile, current_year=2026)

        with pytest.raises(FeatureLockedError, match="at least 75% complete") as exc_info:
            ensure_feature_unlocked(completeness, Feature.JOB_SEARCH)

        error = exc_info.value
        assert error.feature == Feature.JOB_SEARCH
        assert error.required == 75
        assert error.current == 0
        assert error.next_steps == completeness.next_steps

    def test_jobs_without_templates(self, full_profile):
        # Drop skills to 5 across two categories and remove interests: 375/500
        full_profile["skills"] = full_profile["skills"][:5]
        full_profile["interests"] = []
        full_profile["personalInfo"]["website"] = ""
        completeness = calculate_profile_completeness(full_profile, current_year=2026)

        assert completeness.overall.percentage == 75
        assert is_feature_unlocked(completeness, Feature.JOB_SEARCH)
        with pytest.raises(FeatureLockedError) as exc_info:
            ensure_feature_unlocked(completeness, Feature.TEMPLATES)
        assert exc_info.value.required == 85
