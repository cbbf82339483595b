"""
Data models for user profiles and profile completeness reports.

Defines the domain models used throughout the application following the
Single Responsibility Principle - each model represents a single concept.
"""

from dataclasses import dataclass, field as dc_field
from typing import List, Optional, Dict, Any
from enum import Enum


class SectionId(Enum):
    """The five scored profile sections, in report order."""

    PERSONAL = "personal"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"
    INTERESTS = "interests"


class SectionStatus(Enum):
    COMPLETE = "complete"
    PARTIAL = "partial"
    MISSING = "missing"


class Priority(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class OverallStatus(Enum):
    """Overall profile strength brackets."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_WORK = "needs-work"
    INCOMPLETE = "incomplete"


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

@dataclass
class PersonalInfo:
    """Contact details and links shown in the resume header."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""
    professional_overview: str = ""


@dataclass
class Experience:
    """Represents one work experience entry."""

    id: str = ""
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""  # 'YYYY-MM' or 'YYYY-MM-DD', empty when current
    current: bool = False
    description: str = ""
    achievements: List[str] = dc_field(default_factory=list)


@dataclass
class Education:
    """Represents educational background."""

    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    gpa: str = ""
    achievements: List[str] = dc_field(default_factory=list)


@dataclass
class Skill:
    id: str = ""
    name: str = ""
    category: Optional[str] = None  # technical, soft, language, other
    level: str = ""  # beginner, intermediate, advanced, expert


@dataclass
class Interest:
    id: str = ""
    name: str = ""
    category: str = ""  # hobby, volunteer, interest, other
    description: str = ""


@dataclass
class UserProfile:
    """
    Represents a user's professional profile.

    Responsibility: Aggregate root for personal info and the four
    sub-collections. Entries are unique by id only; content may repeat.
    """

    user_id: str = ""
    personal_info: PersonalInfo = dc_field(default_factory=PersonalInfo)
    experience: List[Experience] = dc_field(default_factory=list)
    education: List[Education] = dc_field(default_factory=list)
    skills: List[Skill] = dc_field(default_factory=list)
    interests: List[Interest] = dc_field(default_factory=list)
    metadata: Dict[str, Any] = dc_field(default_factory=dict)


# ---------------------------------------------------------------------------
# Completeness report
# ---------------------------------------------------------------------------

@dataclass
class CompletenessSection:
    """
    Score and guidance for one profile section.

    Responsibility: Encapsulates a section's score out of ``max_score``
    together with blocking issues and optional suggestions.
    """

    id: SectionId
    name: str
    status: SectionStatus
    score: int
    max_score: int
    issues: List[str] = dc_field(default_factory=list)
    suggestions: List[str] = dc_field(default_factory=list)
    priority: Priority = Priority.MEDIUM
    estimated_time: str = ""
    impact: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "name": self.name,
            "status": self.status.value,
            "score": self.score,
            "maxScore": self.max_score,
            "issues": list(self.issues),
            "suggestions": list(self.suggestions),
            "priority": self.priority.value,
            "estimatedTime": self.estimated_time,
            "impact": self.impact,
        }


@dataclass
class OverallCompleteness:
    percentage: int
    score: int
    max_score: int
    status: OverallStatus

    def to_dict(self) -> Dict[str, Any]:
        return {
            "percentage": self.percentage,
            "score": self.score,
            "maxScore": self.max_score,
            "status": self.status.value,
        }


@dataclass
class ProfileCompleteness:
    """
    Full completeness report for a profile.

    Responsibility: Combines the five section results with the overall
    percentage, ranked next steps and the feature gates derived from them.
    """

    overall: OverallCompleteness
    sections: List[CompletenessSection]
    next_steps: List[str] = dc_field(default_factory=list)
    ready_for_jobs: bool = False
    ready_for_templates: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase field names consumers expect."""
        return {
            "overall": self.overall.to_dict(),
            "sections": [s.to_dict() for s in self.sections],
            "nextSteps": list(self.next_steps),
            "readyForJobs": self.ready_for_jobs,
            "readyForTemplates": self.ready_for_templates,
        }
