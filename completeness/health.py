"""
Presentation helpers built on top of a completeness report.

Maps the overall percentage to a health badge and picks the sections the
user should be pointed at next.
"""

from dataclasses import dataclass
from typing import List, Optional

from models.schemas import CompletenessSection, ProfileCompleteness, Priority


@dataclass
class HealthStatus:
    """Badge shown next to the profile strength bar."""

    status: str
    color: str
    icon: str
    message: str

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "color": self.color,
            "icon": self.icon,
            "message": self.message,
        }


def get_profile_health_status(percentage: int) -> HealthStatus:
    """Health badge for a completeness percentage, using the overall status brackets."""
    if percentage >= 90:
        return HealthStatus(
            status="Excellent",
            color="green",
            icon="\U0001F3C6",
            message="Your profile is outstanding! Ready for premium job matching.",
        )
    if percentage >= 75:
        return HealthStatus(
            status="Good",
            color="blue",
            icon="✅",
            message="Great profile! Ready for job searching with strong match potential.",
        )
    if percentage >= 50:
        return HealthStatus(
            status="Needs Work",
            color="yellow",
            icon="⚠️",
            message="Good start! Complete a few more sections to unlock job search.",
        )
    return HealthStatus(
        status="Incomplete",
        color="red",
        icon="❌",
        message="Profile needs attention. Complete key sections to get started.",
    )


def find_priority_section(completeness: ProfileCompleteness) -> Optional[CompletenessSection]:
    """
    The single most important section to fix.

    Lowest-scoring high-priority section that still has issues; ties keep
    report order. None when nothing high-priority is outstanding.
    """
    candidates = [
        s for s in completeness.sections
        if s.priority == Priority.HIGH and s.issues
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda s: s.score)


def sections_needing_attention(
    completeness: ProfileCompleteness, limit: int = 4
) -> List[CompletenessSection]:
    """Sections with at least one issue, in report order."""
    return [s for s in completeness.sections if s.issues][:limit]
