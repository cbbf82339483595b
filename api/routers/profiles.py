"""Profile management endpoints."""

import uuid
import logging
from dataclasses import asdict
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from db.engine import get_db
from db.repository import ProfileRepository
from api.dependencies import get_profile_or_404
from api.schemas import ProfileCreate, ProfileResponse
from models.schemas import UserProfile
from profiles.parser import profile_from_dict

logger = logging.getLogger(__name__)
router = APIRouter()


def domain_to_response(profile: UserProfile) -> ProfileResponse:
    """Convert domain UserProfile to API response."""
    return ProfileResponse.model_validate(asdict(profile))


def request_to_domain(data: ProfileCreate, user_id: str = None) -> UserProfile:
    """Convert API request to domain UserProfile."""
    profile = profile_from_dict(data.model_dump(by_alias=True))
    profile.user_id = user_id or str(uuid.uuid4())
    return profile


@router.post("", response_model=ProfileResponse, status_code=201)
def create_profile(data: ProfileCreate, db: Session = Depends(get_db)):
    """Create a new user profile."""
    profile = request_to_domain(data)
    db_obj = ProfileRepository.save_profile(db, profile)
    return domain_to_response(ProfileRepository.to_domain(db_obj))


@router.get("", response_model=List[ProfileResponse])
def list_profiles(db: Session = Depends(get_db)):
    return [domain_to_response(p) for p in ProfileRepository.list_profiles(db)]


@router.get("/{user_id}", response_model=ProfileResponse)
def get_profile(profile: UserProfile = Depends(get_profile_or_404)):
    """Get a profile by user_id."""
    return domain_to_response(profile)


@router.put("/{user_id}", response_model=ProfileResponse)
def update_profile(
    data: ProfileCreate,
    existing: UserProfile = Depends(get_profile_or_404),
    db: Session = Depends(get_db),
):
    """Replace an existing profile, including all of its entries."""
    updated = request_to_domain(data, user_id=existing.user_id)
    db_obj = ProfileRepository.save_profile(db, updated)
    return domain_to_response(ProfileRepository.to_domain(db_obj))


@router.delete("/{user_id}", status_code=204)
def delete_profile(user_id: str, db: Session = Depends(get_db)):
    if not ProfileRepository.delete_profile(db, user_id):
        raise HTTPException(404, f"Profile not found: {user_id}")
    return Response(status_code=204)
