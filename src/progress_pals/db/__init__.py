"""Database layer for progress-pals."""

from .engine import get_db_path, init_db
from .repositories import (
    GoalRepository,
    MeasurementRepository,
    ProfileRepository,
    QuoteRepository,
)

__all__ = [
    "get_db_path",
    "GoalRepository",
    "init_db",
    "MeasurementRepository",
    "ProfileRepository",
    "QuoteRepository",
]
