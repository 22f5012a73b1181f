"""User profile data model."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum


class Gender(str, Enum):
    """Self-reported gender, collected during onboarding."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    PREFER_NOT_TO_SAY = "prefer_not_to_say"


@dataclass
class Profile:
    """Body profile used for BMI and goal calculations.

    There is one profile per installation. It is created once during
    onboarding and updated in place afterwards.
    """

    height_cm: float
    target_weight_kg: float | None = None  # Long-term goal
    birthdate: date | None = None
    gender: Gender = Gender.PREFER_NOT_TO_SAY
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "height_cm": self.height_cm,
            "target_weight_kg": self.target_weight_kg,
            "birthdate": self.birthdate.isoformat() if self.birthdate else None,
            "gender": self.gender.value,
        }

    @classmethod
    def from_dict(
        cls,
        data: dict,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> "Profile":
        """Create from dictionary."""
        birthdate = None
        if data.get("birthdate"):
            birthdate = date.fromisoformat(data["birthdate"])

        return cls(
            id=id,
            height_cm=data["height_cm"],
            target_weight_kg=data.get("target_weight_kg"),
            birthdate=birthdate,
            gender=Gender(data.get("gender") or Gender.PREFER_NOT_TO_SAY.value),
            created_at=created_at,
            updated_at=updated_at,
        )

    def get_age(self, today: date) -> int | None:
        """Age in whole years on the given day."""
        if self.birthdate is None:
            return None
        had_birthday = (today.month, today.day) >= (
            self.birthdate.month,
            self.birthdate.day,
        )
        return today.year - self.birthdate.year - (0 if had_birthday else 1)

    def get_summary(self, today: date | None = None) -> str:
        """Short multi-line description for CLI output."""
        summary = f"Height: {self.height_cm:g} cm\n"
        if self.target_weight_kg is not None:
            summary += f"Target weight: {self.target_weight_kg:g} kg\n"
        else:
            summary += "Target weight: not set\n"
        if self.birthdate:
            summary += f"Birthdate: {self.birthdate.isoformat()}\n"
            summary += f"Age: {self.get_age(today or date.today())}\n"
        summary += f"Gender: {self.gender.value.replace('_', ' ')}\n"
        return summary
