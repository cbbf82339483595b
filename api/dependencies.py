"""
FastAPI dependency injection providers.

Provides stored profiles and the reference year for completeness
scoring to route handlers.
"""

import logging
from datetime import date

from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from db.engine import get_db
from db.repository import ProfileRepository
from models.schemas import UserProfile

logger = logging.getLogger(__name__)


def get_current_year() -> int:
    """Year used to judge recent experience. Overridden in tests."""
    return date.today().year


def get_profile_or_404(user_id: str, db: Session = Depends(get_db)) -> UserProfile:
    profile = ProfileRepository.get_profile(db, user_id)
    if not profile:
        logger.info(f"Profile lookup failed: {user_id}")
        raise HTTPException(404, f"Profile not found: {user_id}")
    return profile
