"""
Pydantic request/response models for the FastAPI endpoints.

Separate from domain dataclasses (models/schemas.py) and ORM models (db/models.py).
Fields are snake_case in Python and camelCase on the wire.
"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Profile sub-schemas
# ---------------------------------------------------------------------------

class PersonalInfoSchema(CamelModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    website: str = ""
    github: str = ""
    professional_overview: str = ""


class ExperienceSchema(CamelModel):
    id: str = ""
    job_title: str = ""
    company: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    description: str = ""
    achievements: List[str] = []


class EducationSchema(CamelModel):
    id: str = ""
    institution: str = ""
    degree: str = ""
    field: str = ""
    location: str = ""
    start_date: str = ""
    end_date: str = ""
    current: bool = False
    gpa: str = ""
    achievements: List[str] = []


class SkillSchema(CamelModel):
    id: str = ""
    name: str = ""
    category: Optional[str] = None
    level: str = ""


class InterestSchema(CamelModel):
    id: str = ""
    name: str = ""
    category: str = ""
    description: str = ""


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------

class ProfileCreate(CamelModel):
    personal_info: PersonalInfoSchema = PersonalInfoSchema()
    experience: List[ExperienceSchema] = []
    education: List[EducationSchema] = []
    skills: List[SkillSchema] = []
    interests: List[InterestSchema] = []


class ProfileResponse(ProfileCreate):
    user_id: str


# ---------------------------------------------------------------------------
# Completeness
# ---------------------------------------------------------------------------

class SectionResponse(CamelModel):
    id: str
    name: str
    status: str
    score: int
    max_score: int
    issues: List[str] = []
    suggestions: List[str] = []
    priority: str
    estimated_time: str = ""
    impact: str = ""


class OverallResponse(CamelModel):
    percentage: int
    score: int
    max_score: int
    status: str


class HealthResponse(CamelModel):
    status: str
    color: str
    icon: str
    message: str


class CompletenessResponse(CamelModel):
    overall: OverallResponse
    sections: List[SectionResponse]
    next_steps: List[str] = []
    ready_for_jobs: bool = False
    ready_for_templates: bool = False
    health: Optional[HealthResponse] = None
    priority_section: Optional[str] = None


class FeatureAccessResponse(CamelModel):
    feature: str
    unlocked: bool
    required_percentage: int
    current_percentage: int
    next_steps: List[str] = []
    message: Optional[str] = None
