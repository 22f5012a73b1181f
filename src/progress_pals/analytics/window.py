"""Trailing-window statistics over the measurement history.

Every function here takes measurements ordered newest-first, exactly as the
measurement repository returns them, and an explicit ``now``.
"""

from collections.abc import Sequence
from datetime import datetime, timedelta

from ..models.measurement import Measurement

WINDOW_DAYS = 7


def ensure_newest_first(measurements: Sequence[Measurement]) -> None:
    """Raise ValueError unless timestamps are non-increasing."""
    for newer, older in zip(measurements, measurements[1:]):
        if newer.created_at is None or older.created_at is None:
            raise ValueError("Measurements must carry a created_at timestamp")
        if newer.created_at < older.created_at:
            raise ValueError(
                f"Measurements must be ordered newest-first "
                f"(measurement {older.id} is newer than {newer.id})"
            )


def measurements_in_window(
    measurements: Sequence[Measurement],
    now: datetime,
    days: int = WINDOW_DAYS,
) -> list[Measurement]:
    """Measurements logged at or after ``now - days``, order preserved."""
    cutoff = now - timedelta(days=days)
    return [
        m for m in measurements if m.created_at is not None and m.created_at >= cutoff
    ]


def calculate_trend(
    measurements: Sequence[Measurement], now: datetime
) -> float | None:
    """Weight change across the window (newest minus oldest).

    Positive means weight went up. None with fewer than two in-window
    measurements.
    """
    recent = measurements_in_window(measurements, now)
    if len(recent) < 2:
        return None
    return recent[0].weight_kg - recent[-1].weight_kg


def calculate_rolling_average(
    measurements: Sequence[Measurement], now: datetime
) -> float | None:
    """Unweighted mean of the in-window weights, None if the window is empty."""
    recent = measurements_in_window(measurements, now)
    if not recent:
        return None
    return sum(m.weight_kg for m in recent) / len(recent)
