"""Weight measurement model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Measurement:
    """A single logged body weight.

    Measurements are never edited, only created and deleted.
    """

    weight_kg: float
    created_at: datetime | None = None
    id: int | None = None
    profile_id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "weight_kg": self.weight_kg,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

