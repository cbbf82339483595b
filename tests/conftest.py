"""Shared profile fixtures for the test suite."""

import copy

import pytest

REFERENCE_YEAR = 2026

LONG_DESCRIPTION = (
    "Led a team of five engineers building the payments platform, "
    "owning design reviews and on-call rotation."
)

FULL_PROFILE = {
    "personalInfo": {
        "firstName": "Jane",
        "lastName": "Doe",
        "email": "jane@example.com",
        "phone": "+44 7700 900123",
        "location": "London, UK",
        "linkedin": "https://linkedin.com/in/janedoe",
        "website": "https://janedoe.dev",
    },
    "experience": [
        {
            "id": "exp-1",
            "jobTitle": "Senior Engineer",
            "company": "Acme",
            "startDate": "2022-01",
            "endDate": "",
            "current": True,
            "description": LONG_DESCRIPTION,
            "achievements": ["Cut checkout latency by 40%"],
        },
        {
            "id": "exp-2",
            "jobTitle": "Engineer",
            "company": "Globex",
            "startDate": "2018-05",
            "endDate": "2021-12",
            "current": False,
            "description": LONG_DESCRIPTION,
            "achievements": [],
        },
    ],
    "education": [
        {"id": "edu-1", "institution": "UCL", "degree": "MSc", "endDate": "2018-06"},
        {"id": "edu-2", "institution": "Leeds", "degree": "BSc", "endDate": "2017-06"},
    ],
    "skills": [
        {"id": f"skill-{i}", "name": f"Skill {i}",
         "category": "technical" if i % 2 else "soft", "level": "advanced"}
        for i in range(10)
    ],
    "interests": [
        {"id": "int-1", "name": "Climbing", "category": "hobby", "description": "Bouldering twice a week"},
        {"id": "int-2", "name": "Chess", "category": "hobby"},
        {"id": "int-3", "name": "Mentoring", "category": "volunteer"},
    ],
}

EMPTY_PROFILE = {
    "personalInfo": {},
    "experience": [],
    "education": [],
    "skills": [],
    "interests": [],
}


@pytest.fixture
def full_profile():
    return copy.deepcopy(FULL_PROFILE)


@pytest.fixture
def empty_profile():
    return copy.deepcopy(EMPTY_PROFILE)


@pytest.fixture
def reference_year():
    return REFERENCE_YEAR
