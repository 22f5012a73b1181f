"""CLI commands for progress-pals."""

from .goals import goals
from .init import init
from .measurements import delete, history, log_weight
from .profile import profile
from .serve import serve
from .stats import stats

__all__ = [
    "delete",
    "goals",
    "history",
    "init",
    "log_weight",
    "profile",
    "serve",
    "stats",
]
