"""Data models for progress-pals."""

from .goal import Goal, GoalStatus
from .measurement import Measurement
from .profile import Gender, Profile
from .quote import Quote

__all__ = [
    "Gender",
    "Goal",
    "GoalStatus",
    "Measurement",
    "Profile",
    "Quote",
]
