"""Tests for the profile and report data models."""

import importlib

from models.schemas import (
    Education, UserProfile, OverallCompleteness, ProfileCompleteness, OverallStatus,
)


class TestModels:

    def test_module_imports(self):
        schemas = importlib.import_module("models.schemas")
        assert schemas.Education is Education

    def test_education_field_of_study_and_achievements(self):
        first = Education(institution="MIT", degree="BSc", field="Physics")
        second = Education()

        first.achievements.append("Dean's list")

        assert first.field == "Physics"
        assert second.field == ""
        assert second.achievements == []

    def test_user_profile_collections_are_independent(self):
        first, second = UserProfile(), UserProfile()
        first.skills.append("placeholder")

        assert second.skills == []
        assert second.metadata == {}

    def test_report_defaults(self):
        report = ProfileCompleteness(
            overall=OverallCompleteness(
                percentage=0, score=0, max_score=500, status=OverallStatus.INCOMPLETE,
            ),
            sections=[],
        )

        assert report.to_dict()["nextSteps"] == []
        assert report.ready_for_jobs is False
