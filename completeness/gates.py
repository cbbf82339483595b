"""
Feature gates derived from profile completeness.

Job search unlocks at 75% and document templates at 85%. The thresholds
are fixed for every subscription plan.
"""

import logging
from enum import Enum
from typing import Dict, List

from completeness.engine import READY_FOR_JOBS_THRESHOLD, READY_FOR_TEMPLATES_THRESHOLD
from models.schemas import ProfileCompleteness

logger = logging.getLogger(__name__)


class Feature(Enum):
    JOB_SEARCH = "job-search"
    TEMPLATES = "templates"


FEATURE_THRESHOLDS: Dict[Feature, int] = {
    Feature.JOB_SEARCH: READY_FOR_JOBS_THRESHOLD,
    Feature.TEMPLATES: READY_FOR_TEMPLATES_THRESHOLD,
}


class FeatureLockedError(Exception):
    """Raised when a feature is requested before the profile is complete enough."""

    def __init__(self, feature: Feature, required: int, current: int, next_steps: List[str]):
        self.feature = feature
        self.required = required
        self.current = current
        self.next_steps = list(next_steps)
        super().__init__(
            f"{feature.value} requires a profile at least {required}% complete "
            f"(currently {current}%)"
        )


def is_feature_unlocked(completeness: ProfileCompleteness, feature: Feature) -> bool:
    if feature == Feature.JOB_SEARCH:
        return completeness.ready_for_jobs
    return completeness.ready_for_templates


def ensure_feature_unlocked(completeness: ProfileCompleteness, feature: Feature) -> None:
    """
    Check a feature gate.

    Raises:
        FeatureLockedError: If the profile has not reached the feature's threshold
    """
    if is_feature_unlocked(completeness, feature):
        return

    current = completeness.overall.percentage
    logger.info(f"Feature {feature.value} locked at {current}%")
    raise FeatureLockedError(
        feature=feature,
        required=FEATURE_THRESHOLDS[feature],
        current=current,
        next_steps=completeness.next_steps,
    )
