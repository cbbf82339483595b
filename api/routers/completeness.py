"""Profile completeness and feature gate endpoints."""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_current_year, get_profile_or_404
from api.schemas import CompletenessResponse, FeatureAccessResponse
from completeness.engine import calculate_profile_completeness
from completeness.gates import (
    Feature, FEATURE_THRESHOLDS, FeatureLockedError, ensure_feature_unlocked,
)
from completeness.health import find_priority_section, get_profile_health_status
from models.schemas import ProfileCompleteness, UserProfile

logger = logging.getLogger(__name__)
router = APIRouter()


def _report(completeness: ProfileCompleteness) -> Dict[str, Any]:
    payload = completeness.to_dict()
    payload["health"] = get_profile_health_status(completeness.overall.percentage).to_dict()
    priority = find_priority_section(completeness)
    payload["prioritySection"] = priority.id.value if priority else None
    return payload


@router.get("/profiles/{user_id}/completeness", response_model=CompletenessResponse)
def get_completeness(
    profile: UserProfile = Depends(get_profile_or_404),
    current_year: int = Depends(get_current_year),
):
    """Completeness report for a stored profile."""
    completeness = calculate_profile_completeness(profile, current_year=current_year)
    return _report(completeness)


@router.post("/completeness", response_model=CompletenessResponse)
def preview_completeness(
    payload: Dict[str, Any],
    current_year: int = Depends(get_current_year),
):
    """Completeness report for an unsaved profile payload, e.g. while editing."""
    completeness = calculate_profile_completeness(payload, current_year=current_year)
    return _report(completeness)


@router.get("/profiles/{user_id}/features/{feature}", response_model=FeatureAccessResponse)
def check_feature_access(
    feature: Feature,
    profile: UserProfile = Depends(get_profile_or_404),
    current_year: int = Depends(get_current_year),
):
    """Report whether a feature is unlocked; 403 with next steps when it is not."""
    completeness = calculate_profile_completeness(profile, current_year=current_year)
    try:
        ensure_feature_unlocked(completeness, feature)
    except FeatureLockedError as e:
        locked = FeatureAccessResponse(
            feature=e.feature.value,
            unlocked=False,
            required_percentage=e.required,
            current_percentage=e.current,
            next_steps=e.next_steps,
            message=str(e),
        )
        raise HTTPException(403, detail=locked.model_dump(by_alias=True))

    return FeatureAccessResponse(
        feature=feature.value,
        unlocked=True,
        required_percentage=FEATURE_THRESHOLDS[feature],
        current_percentage=completeness.overall.percentage,
        next_steps=completeness.next_steps,
    )
