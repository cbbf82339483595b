"""
Profile completeness scoring engine.

Scores each of the five profile sections out of 100 with an independent
analyzer, then aggregates them into an overall percentage, a ranked list of
next steps and the job-search / template feature gates.

The computation is a pure function of the profile (and the calendar year used
to decide what counts as recent experience). It never raises: missing or
malformed data is scored as absent.
"""

import logging
import math
import re
from datetime import date
from typing import Any, List, Mapping, Optional, Union

from models.schemas import (
    UserProfile, PersonalInfo, Experience, Education, Skill, Interest,
    SectionId, SectionStatus, Priority, OverallStatus,
    CompletenessSection, OverallCompleteness, ProfileCompleteness,
)
from profiles.parser import profile_from_dict

logger = logging.getLogger(__name__)

SECTION_MAX_SCORE = 100

READY_FOR_JOBS_THRESHOLD = 75
READY_FOR_TEMPLATES_THRESHOLD = 85
RECENT_EXPERIENCE_YEARS = 5
MAX_NEXT_STEPS = 3

# (attribute, display name, points)
REQUIRED_PERSONAL_FIELDS = (
    ("first_name", "First name", 15),
    ("last_name", "Last name", 15),
    ("email", "Email address", 20),
    ("phone", "Phone number", 20),
)

OPTIONAL_PERSONAL_FIELDS = (
    ("location", "Location", 10),
    ("linkedin", "LinkedIn profile", 10),
    ("website", "Portfolio/website", 10),
)

SECTION_NAMES = {
    SectionId.PERSONAL: "Personal Information",
    SectionId.EXPERIENCE: "Work Experience",
    SectionId.EDUCATION: "Education",
    SectionId.SKILLS: "Skills",
    SectionId.INTERESTS: "Interests",
}

SECTION_IMPACT = {
    SectionId.PERSONAL: "Required for job applications and recruiter contact",
    SectionId.EXPERIENCE: "Critical for job matching and recruiter interest",
    SectionId.EDUCATION: "Important for positions requiring specific qualifications",
    SectionId.SKILLS: "Essential for keyword matching and ATS optimization",
    SectionId.INTERESTS: "Helps show personality and cultural fit",
}

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _text(value: Any) -> str:
    """Return a stripped string, or '' for anything that is not a string."""
    if isinstance(value, str):
        return value.strip()
    return ""


def _raw_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _category(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_list(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _status(score: int, complete_at: int, partial_at: int) -> SectionStatus:
    if score >= complete_at:
        return SectionStatus.COMPLETE
    if score >= partial_at:
        return SectionStatus.PARTIAL
    return SectionStatus.MISSING


def _end_year(end_date: Any) -> int:
    """Integer prefix of the year part of an end date; 0 when unparseable."""
    if not isinstance(end_date, str):
        return 0
    match = _LEADING_INT.match(end_date.split("-")[0])
    return int(match.group(1)) if match else 0


def _section(
    section_id: SectionId,
    status: SectionStatus,
    score: int,
    issues: List[str],
    suggestions: List[str],
    priority: Priority,
    estimated_time: str,
) -> CompletenessSection:
    return CompletenessSection(
        id=section_id,
        name=SECTION_NAMES[section_id],
        status=status,
        score=score,
        max_score=SECTION_MAX_SCORE,
        issues=issues,
        suggestions=suggestions,
        priority=priority,
        estimated_time=estimated_time,
        impact=SECTION_IMPACT[section_id],
    )


# ---------------------------------------------------------------------------
# Section analyzers
# ---------------------------------------------------------------------------

def analyze_personal_info(personal_info: Optional[PersonalInfo]) -> CompletenessSection:
    """
    Score contact details.

    Required fields contribute 70 points and raise an issue when blank;
    optional fields contribute 30 points and only produce a suggestion.
    """
    issues: List[str] = []
    suggestions: List[str] = []
    score = 0

    for attr, name, points in REQUIRED_PERSONAL_FIELDS:
        if _text(getattr(personal_info, attr, None)):
            score += points
        else:
            issues.append(f"Missing {name}")
            suggestions.append(f"Add your {name}")

    for attr, name, points in OPTIONAL_PERSONAL_FIELDS:
        if _text(getattr(personal_info, attr, None)):
            score += points
        else:
            suggestions.append(f"Consider adding your {name}")

    return _section(
        SectionId.PERSONAL,
        _status(score, 70, 35),
        score,
        issues,
        suggestions,
        Priority.HIGH if issues else Priority.MEDIUM,
        "3 minutes" if len(issues) > 2 else "1 minute",
    )


def analyze_experience(
    experience: List[Experience], current_year: Optional[int] = None
) -> CompletenessSection:
    """
    Score work experience on presence, recency, detail and completeness.

    An entry is recent when it is marked current or ended within the last
    five years of ``current_year``.
    """
    entries = _as_list(experience)
    issues: List[str] = []
    suggestions: List[str] = []

    if not entries:
        issues.append("No work experience added")
        suggestions.append("Add at least one work experience")
        return _section(
            SectionId.EXPERIENCE, SectionStatus.MISSING, 0,
            issues, suggestions, Priority.HIGH, "5 minutes",
        )

    if current_year is None:
        current_year = date.today().year

    score = 30

    recent = [
        exp for exp in entries
        if getattr(exp, "current", False) is True
        or _end_year(getattr(exp, "end_date", None)) >= current_year - RECENT_EXPERIENCE_YEARS
    ]
    if not recent:
        issues.append("No recent work experience (last 5 years)")
        suggestions.append("Add more recent work experience")
    else:
        score += 20

    well_described = [
        exp for exp in entries
        if len(_raw_text(getattr(exp, "description", None))) > 50
        or len(_as_list(getattr(exp, "achievements", None))) > 0
    ]
    if len(well_described) < len(entries) / 2:
        issues.append("Work experience needs more detail")
        suggestions.append("Add detailed descriptions and achievements to your roles")
    else:
        score += 30

    complete = [
        exp for exp in entries
        if _text(getattr(exp, "job_title", None)) and _text(getattr(exp, "company", None))
    ]
    if len(complete) == len(entries):
        score += 20
    else:
        issues.append("Some experience entries are missing job titles or companies")
        suggestions.append("Complete all job titles and company names")

    return _section(
        SectionId.EXPERIENCE,
        _status(score, 80, 30),
        score,
        issues,
        suggestions,
        Priority.HIGH,
        "10 minutes" if len(issues) > 1 else "5 minutes",
    )


def analyze_education(education: List[Education]) -> CompletenessSection:
    entries = _as_list(education)
    issues: List[str] = []
    suggestions: List[str] = []

    if not entries:
        issues.append("No education added")
        suggestions.append("Add at least your highest degree or certification")
        return _section(
            SectionId.EDUCATION, SectionStatus.MISSING, 0,
            issues, suggestions, Priority.MEDIUM, "3 minutes",
        )

    score = 40

    complete = [
        edu for edu in entries
        if _text(getattr(edu, "institution", None)) and _text(getattr(edu, "degree", None))
    ]
    if len(complete) == len(entries):
        score += 40
    else:
        issues.append("Some education entries are incomplete")
        suggestions.append("Complete institution and degree information")

    with_dates = [edu for edu in entries if _text(getattr(edu, "end_date", None))]
    if len(with_dates) < len(entries):
        suggestions.append("Add graduation dates to education entries")
    else:
        score += 20

    return _section(
        SectionId.EDUCATION,
        _status(score, 80, 40),
        score,
        issues,
        suggestions,
        Priority.MEDIUM,
        "3 minutes",
    )


def analyze_skills(skills: List[Skill]) -> CompletenessSection:
    """Score skills on quantity, category diversity and proficiency levels."""
    entries = _as_list(skills)
    issues: List[str] = []
    suggestions: List[str] = []

    if not entries:
        issues.append("No skills added")
        suggestions.append("Add at least 5-10 relevant skills")
        return _section(
            SectionId.SKILLS, SectionStatus.MISSING, 0,
            issues, suggestions, Priority.HIGH, "5 minutes",
        )

    if len(entries) >= 10:
        score = 40
    elif len(entries) >= 5:
        score = 25
    else:
        score = 10
        issues.append("Need more skills (minimum 5 recommended)")
        suggestions.append("Add more relevant technical and soft skills")

    # An absent category counts as a distinct value of its own.
    categories = {_category(getattr(skill, "category", None)) for skill in entries}
    if len(categories) >= 2:
        score += 30
    else:
        suggestions.append("Add skills from different categories (technical, soft skills, etc.)")

    if all(_text(getattr(skill, "level", None)) for skill in entries):
        score += 30
    else:
        suggestions.append("Set proficiency levels for your skills")

    return _section(
        SectionId.SKILLS,
        _status(score, 80, 25),
        score,
        issues,
        suggestions,
        Priority.HIGH,
        "5 minutes",
    )


def analyze_interests(interests: List[Interest]) -> CompletenessSection:
    """Interests are optional: a missing section yields suggestions, never issues."""
    entries = _as_list(interests)
    suggestions: List[str] = []

    if not entries:
        suggestions.append("Add 3-5 professional interests or hobbies")
        return _section(
            SectionId.INTERESTS, SectionStatus.MISSING, 0,
            [], suggestions, Priority.LOW, "2 minutes",
        )

    score = 70 if len(entries) >= 3 else 40

    if any(_text(getattr(interest, "description", None)) for interest in entries):
        score += 30
    else:
        suggestions.append("Add brief descriptions to your interests")

    return _section(
        SectionId.INTERESTS,
        _status(score, 70, 40),
        score,
        [],
        suggestions,
        Priority.LOW,
        "2 minutes",
    )


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def _overall_status(percentage: int) -> OverallStatus:
    if percentage >= 90:
        return OverallStatus.EXCELLENT
    if percentage >= 75:
        return OverallStatus.GOOD
    if percentage >= 50:
        return OverallStatus.NEEDS_WORK
    return OverallStatus.INCOMPLETE


def generate_next_steps(sections: List[CompletenessSection], percentage: int) -> List[str]:
    """
    Rank what the user should fix next.

    High-priority sections with issues come first, lowest score first,
    followed by one general tip for the current percentage bracket.
    """
    high_priority = sorted(
        (s for s in sections if s.priority == Priority.HIGH and s.issues),
        key=lambda s: s.score,
    )
    next_steps = [f"Fix {s.name}: {s.issues[0]}" for s in high_priority]

    if percentage < 50:
        next_steps.append("Focus on completing required sections first")
    elif percentage < 75:
        next_steps.append("Add more detail to existing sections")
    elif percentage < 90:
        next_steps.append("Polish your profile with remaining suggestions")

    return next_steps[:MAX_NEXT_STEPS]


def calculate_profile_completeness(
    profile: Union[UserProfile, Mapping[str, Any], None],
    current_year: Optional[int] = None,
) -> ProfileCompleteness:
    """
    Calculate the completeness report for a profile.

    Args:
        profile: A UserProfile, a raw profile mapping (camelCase or
            snake_case keys) or None for an empty profile
        current_year: Year used to decide what counts as recent experience.
            Defaults to the current calendar year.

    Returns:
        ProfileCompleteness with the five sections in fixed order
    """
    if not isinstance(profile, UserProfile):
        profile = profile_from_dict(profile)

    sections = [
        analyze_personal_info(profile.personal_info or PersonalInfo()),
        analyze_experience(profile.experience or [], current_year=current_year),
        analyze_education(profile.education or []),
        analyze_skills(profile.skills or []),
        analyze_interests(profile.interests or []),
    ]

    total_score = sum(s.score for s in sections)
    max_total_score = sum(s.max_score for s in sections)
    percentage = _round_half_up(total_score / max_total_score * 100)

    logger.debug(
        f"Profile completeness for {profile.user_id or '<unsaved>'}: {percentage}% "
        f"({', '.join(f'{s.id.value}={s.score}' for s in sections)})"
    )

    return ProfileCompleteness(
        overall=OverallCompleteness(
            percentage=percentage,
            score=total_score,
            max_score=max_total_score,
            status=_overall_status(percentage),
        ),
        sections=sections,
        next_steps=generate_next_steps(sections, percentage),
        ready_for_jobs=percentage >= READY_FOR_JOBS_THRESHOLD,
        ready_for_templates=percentage >= READY_FOR_TEMPLATES_THRESHOLD,
    )
