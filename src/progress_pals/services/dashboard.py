"""Loading the data snapshot behind the dashboard."""

from datetime import datetime
from pathlib import Path

from ..analytics.chart import ChartOptions
from ..analytics.dashboard import DashboardStats, build_dashboard
from ..db.repositories import (
    RECENT_MEASUREMENT_LIMIT,
    GoalRepository,
    MeasurementRepository,
    ProfileRepository,
    QuoteRepository,
)


class DashboardService:
    """Fetches profile, history, goals and a quote, then derives statistics.

    Nothing is cached: every call reflects the current database state.
    """

    def __init__(self, db_path: Path | None = None):
        self.profiles = ProfileRepository(db_path)
        self.measurements = MeasurementRepository(db_path)
        self.goals = GoalRepository(db_path)
        self.quotes = QuoteRepository(db_path)

    async def load(
        self,
        now: datetime | None = None,
        options: ChartOptions | None = None,
        with_quote: bool = True,
    ) -> DashboardStats | None:
        """Build dashboard statistics, or None if onboarding is incomplete."""
        profile = await self.profiles.get_latest()
        if profile is None:
            return None

        measurements = await self.measurements.list_recent(
            profile.id, limit=RECENT_MEASUREMENT_LIMIT
        )
        goals = await self.goals.list_all(profile.id)
        quote = await self.quotes.get_random() if with_quote else None

        return build_dashboard(
            profile=profile,
            measurements=measurements,
            goals=goals,
            now=now or datetime.now(),
            options=options,
            quote=quote,
        )
