"""
Repository layer providing CRUD operations and domain ↔ ORM conversions.

Bridges between the domain dataclasses (models/schemas.py) and the
SQLAlchemy ORM models (db/models.py).
"""

import logging
import uuid
from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session

from db.models import (
    UserProfileDB, ExperienceDB, EducationDB, SkillDB, InterestDB,
)
from models.schemas import (
    UserProfile, PersonalInfo, Experience, Education, Skill, Interest,
)

logger = logging.getLogger(__name__)


def _entry_id(value: str) -> str:
    return value or str(uuid.uuid4())


# ---------------------------------------------------------------------------
# Profile Repository
# ---------------------------------------------------------------------------

class ProfileRepository:

    @staticmethod
    def save_profile(session: Session, profile: UserProfile) -> UserProfileDB:
        """Insert a profile, or replace an existing one with the same user_id."""
        existing = session.query(UserProfileDB).filter_by(user_id=profile.user_id).first()
        if existing:
            return ProfileRepository._update_existing(session, existing, profile)

        db_profile = ProfileRepository._from_domain(profile)
        session.add(db_profile)
        session.commit()
        session.refresh(db_profile)
        logger.info(f"Created profile {profile.user_id}")
        return db_profile

    @staticmethod
    def get_profile(session: Session, user_id: str) -> Optional[UserProfile]:
        db_obj = session.query(UserProfileDB).filter_by(user_id=user_id).first()
        if not db_obj:
            return None
        return ProfileRepository.to_domain(db_obj)

    @staticmethod
    def list_profiles(session: Session) -> List[UserProfile]:
        rows = session.query(UserProfileDB).order_by(UserProfileDB.id).all()
        return [ProfileRepository.to_domain(r) for r in rows]

    @staticmethod
    def delete_profile(session: Session, user_id: str) -> bool:
        db_obj = session.query(UserProfileDB).filter_by(user_id=user_id).first()
        if not db_obj:
            return False
        session.delete(db_obj)
        session.commit()
        logger.info(f"Deleted profile {user_id}")
        return True

    # --- Converters ---

    @staticmethod
    def to_domain(db_obj: UserProfileDB) -> UserProfile:
        personal_info = PersonalInfo(
            first_name=db_obj.first_name or "",
            last_name=db_obj.last_name or "",
            email=db_obj.email or "",
            phone=db_obj.phone or "",
            location=db_obj.location or "",
            linkedin=db_obj.linkedin or "",
            website=db_obj.website or "",
            github=db_obj.github or "",
            professional_overview=db_obj.professional_overview or "",
        )

        experience = [
            Experience(
                id=e.entry_id,
                job_title=e.job_title or "",
                company=e.company or "",
                location=e.location or "",
                start_date=e.start_date or "",
                end_date=e.end_date or "",
                current=e.current or False,
                description=e.description or "",
                achievements=e.achievements or [],
            )
            for e in db_obj.experiences
        ]

        education = [
            Education(
                id=e.entry_id,
                institution=e.institution or "",
                degree=e.degree or "",
                field=e.field or "",
                location=e.location or "",
                start_date=e.start_date or "",
                end_date=e.end_date or "",
                current=e.current or False,
                gpa=e.gpa or "",
                achievements=e.achievements or [],
            )
            for e in db_obj.education_entries
        ]

        skills = [
            Skill(id=s.entry_id, name=s.name or "", category=s.category, level=s.level or "")
            for s in db_obj.skills
        ]

        interests = [
            Interest(
                id=i.entry_id, name=i.name or "",
                category=i.category or "", description=i.description or "",
            )
            for i in db_obj.interests
        ]

        return UserProfile(
            user_id=db_obj.user_id,
            personal_info=personal_info,
            experience=experience,
            education=education,
            skills=skills,
            interests=interests,
            metadata=db_obj.metadata_json or {},
        )

    @staticmethod
    def _from_domain(profile: UserProfile) -> UserProfileDB:
        db_obj = UserProfileDB(user_id=profile.user_id, created_at=datetime.utcnow())
        ProfileRepository._apply(db_obj, profile)
        return db_obj

    @staticmethod
    def _apply(db_obj: UserProfileDB, profile: UserProfile) -> None:
        """Copy personal info onto the row and replace every sub-collection."""
        info = profile.personal_info or PersonalInfo()
        db_obj.first_name = info.first_name
        db_obj.last_name = info.last_name
        db_obj.email = info.email
        db_obj.phone = info.phone
        db_obj.location = info.location
        db_obj.linkedin = info.linkedin
        db_obj.website = info.website
        db_obj.github = info.github
        db_obj.professional_overview = info.professional_overview
        db_obj.metadata_json = profile.metadata or {}

        db_obj.experiences = [
            ExperienceDB(
                entry_id=_entry_id(e.id), position=i,
                job_title=e.job_title, company=e.company, location=e.location,
                start_date=e.start_date, end_date=e.end_date, current=e.current,
                description=e.description, achievements=list(e.achievements),
            )
            for i, e in enumerate(profile.experience or [])
        ]
        db_obj.education_entries = [
            EducationDB(
                entry_id=_entry_id(e.id), position=i,
                institution=e.institution, degree=e.degree, field=e.field,
                location=e.location, start_date=e.start_date, end_date=e.end_date,
                current=e.current, gpa=e.gpa, achievements=list(e.achievements),
            )
            for i, e in enumerate(profile.education or [])
        ]
        db_obj.skills = [
            SkillDB(
                entry_id=_entry_id(s.id), position=i,
                name=s.name, category=s.category, level=s.level,
            )
            for i, s in enumerate(profile.skills or [])
        ]
        db_obj.interests = [
            InterestDB(
                entry_id=_entry_id(it.id), position=i,
                name=it.name, category=it.category, description=it.description,
            )
            for i, it in enumerate(profile.interests or [])
        ]

    @staticmethod
    def _update_existing(session: Session, db_obj: UserProfileDB, profile: UserProfile) -> UserProfileDB:
        ProfileRepository._apply(db_obj, profile)
        db_obj.updated_at = datetime.utcnow()
        session.commit()
        session.refresh(db_obj)
        logger.info(f"Updated profile {profile.user_id}")
        return db_obj
