"""Application services for progress-pals."""

from .dashboard import DashboardService
from .goals import GoalService
from .profile import build_profile, save_profile
from .validation import ValidationError
from .weight_log import LogResult, WeightLogService

__all__ = [
    "DashboardService",
    "GoalService",
    "LogResult",
    "ValidationError",
    "WeightLogService",
    "build_profile",
    "save_profile",
]
