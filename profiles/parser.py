"""
Profile parsing module.

Converts raw profile payloads into UserProfile dataclasses. Payloads come
from the profile store, API request bodies and JSON files, either in the
native shape (personalInfo / experience / education / skills / interests,
camelCase or snake_case keys) or in the JSON Resume standard format.

Conversion from a mapping never raises: anything missing or malformed
becomes an empty value so the completeness engine can score it as absent.
"""

import json
import logging
from pathlib import Path
from collections.abc import Mapping
from typing import Optional, Dict, Any, List

from models.schemas import (
    UserProfile, PersonalInfo, Experience, Education, Skill, Interest,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _get(data: Dict[str, Any], *keys: str) -> Any:
    """Return the first present key among camelCase/snake_case spellings."""
    for key in keys:
        if key in data:
            return data[key]
    return None


def _safe_str(value) -> str:
    """Strings pass through; numbers are stringified; anything else is ''."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


def _safe_list(value) -> list:
    if isinstance(value, list):
        return value
    return []


def _safe_str_list(value) -> List[str]:
    return [s for s in _safe_list(value) if isinstance(s, str)]


def _safe_dicts(value) -> List[Dict[str, Any]]:
    """Keep only the mapping entries of a list; malformed entries are dropped."""
    items = _safe_list(value)
    dicts = [item for item in items if isinstance(item, Mapping)]
    if len(dicts) != len(items):
        logger.warning(f"Dropped {len(items) - len(dicts)} malformed profile entries")
    return dicts


def _parse_personal_info(data) -> PersonalInfo:
    if not isinstance(data, Mapping):
        return PersonalInfo()
    return PersonalInfo(
        first_name=_safe_str(_get(data, "firstName", "first_name")),
        last_name=_safe_str(_get(data, "lastName", "last_name")),
        email=_safe_str(data.get("email")),
        phone=_safe_str(data.get("phone")),
        location=_safe_str(data.get("location")),
        linkedin=_safe_str(data.get("linkedin")),
        website=_safe_str(data.get("website")),
        github=_safe_str(data.get("github")),
        professional_overview=_safe_str(
            _get(data, "professionalOverview", "professional_overview")
        ),
    )


def _parse_experience(entries) -> List[Experience]:
    return [
        Experience(
            id=_safe_str(exp.get("id")),
            # Older records store the title under 'position'
            job_title=_safe_str(_get(exp, "jobTitle", "job_title", "position")),
            company=_safe_str(exp.get("company")),
            location=_safe_str(exp.get("location")),
            start_date=_safe_str(_get(exp, "startDate", "start_date")),
            end_date=_safe_str(_get(exp, "endDate", "end_date")),
            current=exp.get("current") is True,
            description=_safe_str(exp.get("description")),
            achievements=_safe_str_list(exp.get("achievements")),
        )
        for exp in _safe_dicts(entries)
    ]


def _parse_education(entries) -> List[Education]:
    return [
        Education(
            id=_safe_str(edu.get("id")),
            institution=_safe_str(edu.get("institution")),
            degree=_safe_str(edu.get("degree")),
            field=_safe_str(edu.get("field")),
            location=_safe_str(edu.get("location")),
            start_date=_safe_str(_get(edu, "startDate", "start_date")),
            end_date=_safe_str(_get(edu, "endDate", "end_date")),
            current=edu.get("current") is True,
            gpa=_safe_str(edu.get("gpa")),
            achievements=_safe_str_list(edu.get("achievements")),
        )
        for edu in _safe_dicts(entries)
    ]


def _parse_skills(entries) -> List[Skill]:
    skills = []
    for skill in _safe_dicts(entries):
        category = skill.get("category")
        skills.append(Skill(
            id=_safe_str(skill.get("id")),
            name=_safe_str(skill.get("name")),
            category=category if isinstance(category, str) else None,
            level=_safe_str(skill.get("level")),
        ))
    return skills


def _parse_interests(entries) -> List[Interest]:
    return [
        Interest(
            id=_safe_str(interest.get("id")),
            name=_safe_str(interest.get("name")),
            category=_safe_str(interest.get("category")),
            description=_safe_str(interest.get("description")),
        )
        for interest in _safe_dicts(entries)
    ]


def profile_from_dict(data: Optional[Mapping[str, Any]]) -> UserProfile:
    """
    Convert a raw mapping into a UserProfile dataclass.

    Accepts camelCase (``personalInfo``, ``jobTitle``) and snake_case keys.
    Input that is not a mapping yields an empty profile; sub-collections that
    are not lists become empty lists.
    """
    if not isinstance(data, Mapping):
        return UserProfile()

    return UserProfile(
        user_id=_safe_str(_get(data, "userId", "user_id")),
        personal_info=_parse_personal_info(_get(data, "personalInfo", "personal_info")),
        experience=_parse_experience(data.get("experience")),
        education=_parse_education(data.get("education")),
        skills=_parse_skills(data.get("skills")),
        interests=_parse_interests(data.get("interests")),
        metadata=dict(data["metadata"]) if isinstance(data.get("metadata"), Mapping) else {},
    )


def json_resume_to_dict(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map the JSON Resume standard format (jsonresume.org) to the native shape.

    Highlights become achievements, ``studyType`` becomes the degree and
    each skill keyword becomes its own skill in the entry's category.
    """
    basics = data.get("basics") if isinstance(data.get("basics"), Mapping) else {}
    name_parts = _safe_str(basics.get("name")).split(None, 1)

    loc = basics.get("location") if isinstance(basics.get("location"), Mapping) else {}
    location = ", ".join(
        part for part in (_safe_str(loc.get("city")), _safe_str(loc.get("region"))) if part
    )

    linkedin = ""
    for network in _safe_dicts(basics.get("profiles")):
        if _safe_str(network.get("network")).lower() == "linkedin":
            linkedin = _safe_str(network.get("url"))
            break

    experience = []
    for work in _safe_dicts(data.get("work")):
        end_date = _safe_str(work.get("endDate"))
        experience.append({
            "jobTitle": work.get("position", ""),
            "company": work.get("company") or work.get("name", ""),
            "location": work.get("location", ""),
            "startDate": work.get("startDate", ""),
            "endDate": end_date,
            "current": not end_date,
            "description": work.get("summary", ""),
            "achievements": _safe_str_list(work.get("highlights")),
        })

    education = [
        {
            "institution": edu.get("institution", ""),
            "degree": edu.get("studyType", ""),
            "field": edu.get("area", ""),
            "startDate": edu.get("startDate", ""),
            "endDate": edu.get("endDate", ""),
            "gpa": edu.get("score", ""),
            "achievements": _safe_str_list(edu.get("courses")),
        }
        for edu in _safe_dicts(data.get("education"))
    ]

    # Flatten name + keywords, keeping the entry name as the category
    skills = []
    for entry in _safe_dicts(data.get("skills")):
        category = _safe_str(entry.get("name")).lower() or "other"
        level = _safe_str(entry.get("level")).lower()
        keywords = _safe_str_list(entry.get("keywords"))
        for keyword in keywords or [_safe_str(entry.get("name"))]:
            if keyword:
                skills.append({"name": keyword, "category": category, "level": level})

    interests = [
        {
            "name": interest.get("name", ""),
            "category": "interest",
            "description": ", ".join(_safe_str_list(interest.get("keywords"))),
        }
        for interest in _safe_dicts(data.get("interests"))
    ]

    return {
        "personalInfo": {
            "firstName": name_parts[0] if name_parts else "",
            "lastName": name_parts[1] if len(name_parts) > 1 else "",
            "email": basics.get("email", ""),
            "phone": basics.get("phone", ""),
            "location": location,
            "linkedin": linkedin,
            "website": basics.get("url", ""),
            "professionalOverview": basics.get("summary", ""),
        },
        "experience": experience,
        "education": education,
        "skills": skills,
        "interests": interests,
    }


# ---------------------------------------------------------------------------
# File parser
# ---------------------------------------------------------------------------

class JSONProfileParser:
    """
    Parser for JSON profile files.

    Responsibility: Loads user profiles from JSON, supporting the native
    profile shape and the JSON Resume standard.
    """

    def parse(self, file_path: str) -> UserProfile:
        """
        Parse JSON profile file.

        Args:
            file_path: Path to JSON profile file

        Returns:
            Structured UserProfile

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If the file is not JSON or its top level is not an object
        """
        path = Path(file_path)
        if not path.exists():
            raise FileNotFoundError(f"JSON file not found: {file_path}")
        if not self.supports_format(file_path):
            raise ValueError(f"Not a JSON file: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {file_path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object in {file_path}")

        format_type = self.detect_format(data)
        logger.info(f"Detected JSON format: {format_type} for {file_path}")

        if format_type == "json_resume":
            data = json_resume_to_dict(data)
        return profile_from_dict(data)

    def supports_format(self, file_path: str) -> bool:
        """Check if file is JSON format."""
        return Path(file_path).suffix.lower() == ".json"

    @staticmethod
    def detect_format(data: Dict[str, Any]) -> str:
        """Detect the JSON format based on key signatures."""
        if "basics" in data and isinstance(data["basics"], Mapping):
            return "json_resume"
        return "profile"
