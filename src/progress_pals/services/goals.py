"""Creating and removing short-term goals."""

import calendar
import logging
from datetime import date
from pathlib import Path

from ..db.repositories import GoalRepository, ProfileRepository
from ..models.goal import Goal
from .validation import ValidationError, validate_deadline, validate_weight

logger = logging.getLogger(__name__)

DEFAULT_GOAL_MONTHS = 2


def add_months(start: date, months: int) -> date:
    """Same day ``months`` later, clamped to the end of shorter months."""
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def default_deadline(today: date) -> date:
    """Deadline used when the user does not pick one."""
    return add_months(today, DEFAULT_GOAL_MONTHS)


class GoalService:
    """Goal lifecycle operations."""

    def __init__(self, db_path: Path | None = None):
        self.profiles = ProfileRepository(db_path)
        self.goals = GoalRepository(db_path)

    async def add_goal(
        self,
        target_weight_kg: str | float,
        deadline: str | date | None = None,
        today: date | None = None,
    ) -> Goal:
        """Validate and store a new active goal.

        Raises:
            ValidationError: On invalid input or when no profile exists
        """
        today = today or date.today()
        target = validate_weight(target_weight_kg, label="Target weight")
        deadline = validate_deadline(deadline, today) or default_deadline(today)

        profile = await self.profiles.get_latest()
        if profile is None:
            raise ValidationError("Create a profile before adding goals")

        goal = Goal(target_weight_kg=target, deadline=deadline, profile_id=profile.id)
        goal.id = await self.goals.create(goal)
        logger.info("Added goal %s: %.1f kg by %s", goal.id, target, deadline)
        return goal

    async def delete_goal(self, goal_id: int) -> bool:
        deleted = await self.goals.delete(goal_id)
        if not deleted:
            logger.warning("Goal %s not found", goal_id)
        return deleted
