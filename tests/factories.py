"""Test data builders shared across test modules."""

from datetime import datetime, timedelta

from progress_pals.models.measurement import Measurement

NOW = datetime(2026, 10, 19, 12, 0)


def make_history(*entries: tuple[float, float]) -> list[Measurement]:
    """Build newest-first measurements from (weight_kg, days_ago) pairs."""
    measurements = [
        Measurement(id=i + 1, weight_kg=weight, created_at=NOW - timedelta(days=days_ago))
        for i, (weight, days_ago) in enumerate(entries)
    ]
    return sorted(measurements, key=lambda m: m.created_at, reverse=True)
