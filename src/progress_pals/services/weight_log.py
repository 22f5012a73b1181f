"""Logging and deleting weight measurements."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..analytics.goals import goals_reached_by
from ..db.repositories import GoalRepository, MeasurementRepository, ProfileRepository
from ..models.goal import Goal, GoalStatus
from ..models.measurement import Measurement
from .validation import ValidationError, validate_weight

logger = logging.getLogger(__name__)


@dataclass
class LogResult:
    """Outcome of logging a weight."""

    measurement: Measurement
    achieved_goals: list[Goal] = field(default_factory=list)


class WeightLogService:
    """Records measurements and marks goals they satisfy as achieved."""

    def __init__(self, db_path: Path | None = None):
        self.profiles = ProfileRepository(db_path)
        self.measurements = MeasurementRepository(db_path)
        self.goals = GoalRepository(db_path)

    async def log_weight(
        self, weight_kg: str | float, logged_at: datetime | None = None
    ) -> LogResult:
        """Validate and store a weight.

        Every active goal whose target the new weight meets is updated to
        achieved. Goals are updated one at a time; a failure part way through
        leaves earlier updates in place.

        Raises:
            ValidationError: If the weight is invalid or no profile exists
        """
        weight = validate_weight(weight_kg)

        profile = await self.profiles.get_latest()
        if profile is None:
            raise ValidationError("Create a profile before logging weight")

        measurement = await self.measurements.create(
            Measurement(weight_kg=weight, created_at=logged_at, profile_id=profile.id)
        )
        logger.info("Logged %.1f kg (measurement %s)", weight, measurement.id)

        achieved = []
        for goal in goals_reached_by(await self.goals.list_all(profile.id), weight):
            await self.goals.mark_achieved(goal.id)
            goal.status = GoalStatus.ACHIEVED
            achieved.append(goal)
            logger.info("Goal %s reached (target %.1f kg)", goal.id, goal.target_weight_kg)

        return LogResult(measurement=measurement, achieved_goals=achieved)

    async def delete_measurement(self, measurement_id: int) -> bool:
        """Delete a measurement. Goal statuses are left unchanged."""
        deleted = await self.measurements.delete(measurement_id)
        if deleted:
            logger.info("Deleted measurement %s", measurement_id)
        else:
            logger.warning("Measurement %s not found", measurement_id)
        return deleted
