"""
Unit tests for profile parsing.

Tests cover:
- Mapping conversion with camelCase and snake_case keys
- Defensive handling of malformed payloads
- JSON Resume conversion
- File loading errors
"""

import json
from types import MappingProxyType

import pytest

from profiles.parser import JSONProfileParser, json_resume_to_dict, profile_from_dict


class TestProfileFromDict:
    """Tests for profile_from_dict()."""

    def test_camel_case_payload(self, full_profile):
        profile = profile_from_dict(full_profile)

        assert profile.personal_info.first_name == "Jane"
        assert profile.personal_info.linkedin == "https://linkedin.com/in/janedoe"
        assert [e.job_title for e in profile.experience] == ["Senior Engineer", "Engineer"]
        assert profile.experience[0].current is True
        assert profile.experience[1].end_date == "2021-12"
        assert profile.education[0].end_date == "2018-06"
        assert len(profile.skills) == 10
        assert profile.interests[0].description == "Bouldering twice a week"

    def test_snake_case_payload(self):
        profile = profile_from_dict({
            "user_id": "u-1",
            "personal_info": {"first_name": "Sam", "last_name": "Lee"},
            "experience": [{"job_title": "Analyst", "company": "Initech", "end_date": "2024-01"}],
        })

        assert profile.user_id == "u-1"
        assert profile.personal_info.first_name == "Sam"
        assert profile.experience[0].job_title == "Analyst"
        assert profile.experience[0].end_date == "2024-01"

    def test_nested_mappings_are_read(self):
        profile = profile_from_dict(MappingProxyType({
            "personalInfo": MappingProxyType({"firstName": "Sam", "email": "sam@example.com"}),
            "skills": [MappingProxyType({"name": "SQL", "level": "expert"})],
            "metadata": MappingProxyType({"source": "import"}),
        }))

        assert profile.personal_info.first_name == "Sam"
        assert profile.personal_info.email == "sam@example.com"
        assert [s.name for s in profile.skills] == ["SQL"]
        assert profile.metadata == {"source": "import"}

    def test_position_is_accepted_as_job_title(self):
        profile = profile_from_dict({"experience": [{"position": "Designer", "company": "Acme"}]})
        assert profile.experience[0].job_title == "Designer"

    @pytest.mark.parametrize("data", [None, [], "text", 3])
    def test_non_dict_yields_empty_profile(self, data):
        profile = profile_from_dict(data)

        assert profile.personal_info.first_name == ""
        assert profile.experience == []
        assert profile.skills == []

    def test_malformed_entries_are_dropped(self):
        profile = profile_from_dict({
            "personalInfo": {"firstName": 42, "email": None, "phone": ["123"]},
            "experience": [None, {"jobTitle": "Dev", "current": "yes", "achievements": "lots"}],
            "skills": {"name": "Python"},
            "interests": [{"description": {"text": "x"}}],
        })

        assert profile.personal_info.first_name == "42"
        assert profile.personal_info.email == ""
        assert profile.personal_info.phone == ""
        assert len(profile.experience) == 1
        assert profile.experience[0].current is False
        assert profile.experience[0].achievements == []
        assert profile.skills == []
        assert profile.interests[0].description == ""

    def test_skill_without_category_keeps_none(self):
        profile = profile_from_dict({"skills": [{"name": "Go"}, {"name": "Rust", "category": 7}]})
        assert [s.category for s in profile.skills] == [None, None]


class TestJsonResume:
    """Tests for json_resume_to_dict()."""

    RESUME = {
        "basics": {
            "name": "Ada Lovelace King",
            "email": "ada@example.com",
            "phone": "555-0100",
            "url": "https://ada.dev",
            "location": {"city": "London", "region": "England"},
            "profiles": [{"network": "LinkedIn", "url": "https://linkedin.com/in/ada"}],
        },
        "work": [
            {"name": "Analytical Engines", "position": "Programmer", "startDate": "2020-01",
             "summary": "Wrote the first program", "highlights": ["Bernoulli numbers"]},
            {"company": "Babbage & Co", "position": "Assistant", "endDate": "2019-12"},
        ],
        "education": [{"institution": "Home", "studyType": "Tutoring", "area": "Mathematics", "endDate": "1835"}],
        "skills": [
            {"name": "Mathematics", "level": "Master", "keywords": ["Calculus", "Algebra"]},
            {"name": "Writing"},
        ],
        "interests": [{"name": "Poetry", "keywords": ["Byron"]}],
    }

    def test_conversion(self):
        profile = profile_from_dict(json_resume_to_dict(self.RESUME))
        info = profile.personal_info

        assert (info.first_name, info.last_name) == ("Ada", "Lovelace King")
        assert info.location == "London, England"
        assert info.linkedin == "https://linkedin.com/in/ada"
        assert info.website == "https://ada.dev"

        assert profile.experience[0].company == "Analytical Engines"
        assert profile.experience[0].current is True
        assert profile.experience[0].achievements == ["Bernoulli numbers"]
        assert profile.experience[1].current is False
        assert profile.education[0].degree == "Tutoring"

        assert [(s.name, s.category, s.level) for s in profile.skills] == [
            ("Calculus", "mathematics", "master"),
            ("Algebra", "mathematics", "master"),
            ("Writing", "writing", ""),
        ]
        assert profile.interests[0].description == "Byron"

    def test_missing_basics(self):
        profile = profile_from_dict(json_resume_to_dict({"basics": {}}))
        assert profile.personal_info.first_name == ""


class TestJSONProfileParser:
    """Tests for JSONProfileParser.parse()."""

    def test_parse_native_profile(self, tmp_path, full_profile):
        path = tmp_path / "profile.json"
        path.write_text(json.dumps(full_profile), encoding="utf-8")

        profile = JSONProfileParser().parse(str(path))
        assert profile.personal_info.email == "jane@example.com"

    def test_parse_json_resume(self, tmp_path):
        path = tmp_path / "resume.json"
        path.write_text(json.dumps(TestJsonResume.RESUME), encoding="utf-8")

        profile = JSONProfileParser().parse(str(path))
        assert profile.personal_info.first_name == "Ada"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JSONProfileParser().parse(str(tmp_path / "nope.json"))

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "profile.txt"
        path.write_text("{}", encoding="utf-8")

        with pytest.raises(ValueError, match="Not a JSON file"):
            JSONProfileParser().parse(str(path))

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            JSONProfileParser().parse(str(path))

    def test_top_level_must_be_object(self, tmp_path):
        path = tmp_path / "profile.json"
        path.write_text("[]", encoding="utf-8")

        with pytest.raises(ValueError, match="Expected a JSON object"):
            JSONProfileParser().parse(str(path))
