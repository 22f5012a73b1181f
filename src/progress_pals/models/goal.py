"""Short-term weight goal model."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class GoalStatus(str, Enum):
    """Persisted goal status."""

    ACTIVE = "active"
    ACHIEVED = "achieved"


@dataclass
class Goal:
    """A target weight to reach by a deadline."""

    target_weight_kg: float
    deadline: date
    status: GoalStatus = GoalStatus.ACTIVE
    id: int | None = None
    profile_id: int | None = None
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "target_weight_kg": self.target_weight_kg,
            "deadline": self.deadline.isoformat(),
            "status": self.status.value,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        profile_id: int | None = None,
        created_at: datetime | None = None,
    ) -> "Goal":
        """Create from dictionary."""
        return cls(
            id=id,
            profile_id=profile_id,
            target_weight_kg=data["target_weight_kg"],
            deadline=date.fromisoformat(data["deadline"]),
            status=GoalStatus(data.get("status", "active")),
            created_at=created_at,
        )

    def get_status_display(self) -> str:
        """Get a human-readable status string."""
        status_map = {
            GoalStatus.ACTIVE: "Active",
            GoalStatus.ACHIEVED: "Achieved",
        }
        return status_map.get(self.status, self.status.value)
