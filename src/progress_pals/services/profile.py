"""Onboarding: creating or updating the profile."""

import logging
from datetime import date
from pathlib import Path

from ..db.repositories import ProfileRepository
from ..models.profile import Profile
from .validation import (
    validate_birthdate,
    validate_gender,
    validate_height,
    validate_weight,
)

logger = logging.getLogger(__name__)


def build_profile(
    height_cm: str | float | None,
    target_weight_kg: str | float | None,
    birthdate: str | date | None = None,
    gender: str | None = None,
    today: date | None = None,
) -> Profile:
    """Validate raw onboarding input into a Profile.

    Raises:
        ValidationError: On the first invalid field
    """
    target = None
    if target_weight_kg not in (None, ""):
        target = validate_weight(target_weight_kg, label="Target weight")

    return Profile(
        height_cm=validate_height(height_cm),
        target_weight_kg=target,
        birthdate=validate_birthdate(birthdate, today),
        gender=validate_gender(gender),
    )


async def save_profile(profile: Profile, db_path: Path | None = None) -> Profile:
    """Create the profile, or update it in place if one already exists."""
    repo = ProfileRepository(db_path)
    existing = await repo.get_latest()
    if existing:
        profile.id = existing.id
        await repo.update(profile)
        logger.info("Updated profile %s", profile.id)
    else:
        profile.id = await repo.create(profile)
    return profile
