"""
SQLAlchemy ORM models for user profiles.

Personal info is flattened onto the profile row; each sub-collection gets
its own table. Achievements are stored as JSON columns to keep the schema
simple.
"""

from datetime import datetime
from sqlalchemy import (
    Column, Integer, String, Boolean, Text, DateTime,
    ForeignKey, JSON,
)
from sqlalchemy.orm import relationship
from db.engine import Base


class UserProfileDB(Base):
    """Persisted user profile."""
    __tablename__ = "user_profiles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(100), unique=True, nullable=False, index=True)
    # Personal info (flattened)
    first_name = Column(String(100), default="")
    last_name = Column(String(100), default="")
    email = Column(String(200), default="")
    phone = Column(String(50), default="")
    location = Column(String(200), default="")
    linkedin = Column(String(300), default="")
    website = Column(String(300), default="")
    github = Column(String(300), default="")
    professional_overview = Column(Text, default="")
    metadata_json = Column(JSON, default=dict)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationships, kept in the order the user entered them
    experiences = relationship(
        "ExperienceDB", back_populates="profile", cascade="all, delete-orphan",
        order_by="ExperienceDB.position",
    )
    education_entries = relationship(
        "EducationDB", back_populates="profile", cascade="all, delete-orphan",
        order_by="EducationDB.position",
    )
    skills = relationship(
        "SkillDB", back_populates="profile", cascade="all, delete-orphan",
        order_by="SkillDB.position",
    )
    interests = relationship(
        "InterestDB", back_populates="profile", cascade="all, delete-orphan",
        order_by="InterestDB.position",
    )


class ExperienceDB(Base):
    """Work experience entry linked to a profile."""
    __tablename__ = "experiences"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(String(100), nullable=False)
    profile_id = Column(Integer, ForeignKey("user_profiles.id"), nullable=False)
    position = Column(Integer, default=0)
    job_title = Column(String(200), default="")
    company = Column(String(200), default="")
    location = Column(String(200), default="")
    start_date = Column(String(20), default="")
    end_date = Column(String(20), default="")
    current = Column(Boolean, default=False)
    description = Column(Text, default="")
    achievements = Column(JSON, default=list)

    profile = relationship("UserProfileDB", back_populates="experiences")


class EducationDB(Base):
    """Education entry linked to a profile."""
    __tablename__ = "education"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(String(100), nullable=False)
    profile_id = Column(Integer, ForeignKey("user_profiles.id"), nullable=False)
    position = Column(Integer, default=0)
    institution = Column(String(200), default="")
    degree = Column(String(200), default="")
    field = Column(String(200), default="")
    location = Column(String(200), default="")
    start_date = Column(String(20), default="")
    end_date = Column(String(20), default="")
    current = Column(Boolean, default=False)
    gpa = Column(String(20), default="")
    achievements = Column(JSON, default=list)

    profile = relationship("UserProfileDB", back_populates="education_entries")


class SkillDB(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(String(100), nullable=False)
    profile_id = Column(Integer, ForeignKey("user_profiles.id"), nullable=False)
    position = Column(Integer, default=0)
    name = Column(String(200), default="")
    category = Column(String(50), nullable=True)
    level = Column(String(50), default="")

    profile = relationship("UserProfileDB", back_populates="skills")


class InterestDB(Base):
    __tablename__ = "interests"

    id = Column(Integer, primary_key=True, autoincrement=True)
    entry_id = Column(String(100), nullable=False)
    profile_id = Column(Integer, ForeignKey("user_profiles.id"), nullable=False)
    position = Column(Integer, default=0)
    name = Column(String(200), default="")
    category = Column(String(50), default="")
    description = Column(Text, default="")

    profile = relationship("UserProfileDB", back_populates="interests")
