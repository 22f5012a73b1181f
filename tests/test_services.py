"""Tests for the service layer."""

import asyncio
import json
from datetime import date, timedelta

import pytest

from progress_pals.analytics.chart import ChartOptions
from progress_pals.data.quote_loader import load_quotes, seed_quotes
from progress_pals.db.repositories import GoalRepository, ProfileRepository
from progress_pals.models.goal import GoalStatus
from progress_pals.models.profile import Profile
from progress_pals.services import (
    DashboardService,
    GoalService,
    ValidationError,
    WeightLogService,
    save_profile,
)

from factories import NOW

TODAY = NOW.date()


@pytest.fixture
def profile_db(initialized_db):
    """Database holding a 170 cm profile."""
    asyncio.run(save_profile(Profile(height_cm=170, target_weight_kg=68), initialized_db))
    return initialized_db


class TestSaveProfile:
    """Tests for save_profile."""

    def test_second_save_updates_in_place(self, initialized_db):
        async def run():
            first = await save_profile(Profile(height_cm=170), initialized_db)
            second = await save_profile(
                Profile(height_cm=172, target_weight_kg=70), initialized_db
            )
            return first, second, await ProfileRepository(initialized_db).get_latest()

        first, second, latest = asyncio.run(run())

        assert second.id == first.id
        assert latest.height_cm == 172
        assert latest.target_weight_kg == 70


class TestWeightLogService:
    """Tests for WeightLogService."""

    def test_requires_profile(self, initialized_db):
        service = WeightLogService(initialized_db)
        with pytest.raises(ValidationError, match="profile"):
            asyncio.run(service.log_weight("75"))

    def test_rejects_out_of_range(self, profile_db):
        service = WeightLogService(profile_db)
        with pytest.raises(ValidationError, match="between 20 and 300"):
            asyncio.run(service.log_weight("350"))

    def test_marks_reached_goals(self, profile_db):
        goals = GoalService(profile_db)
        service = WeightLogService(profile_db)

        async def run():
            near = await goals.add_goal(79, TODAY + timedelta(days=7), today=TODAY)
            far = await goals.add_goal(74, TODAY + timedelta(days=30), today=TODAY)
            result = await service.log_weight(78.5, logged_at=NOW)
            stored = {g.id: g for g in await GoalRepository(profile_db).list_all()}
            return near, far, result, stored

        near, far, result, stored = asyncio.run(run())

        assert result.measurement.weight_kg == 78.5
        assert [g.id for g in result.achieved_goals] == [near.id]
        assert stored[near.id].status == GoalStatus.ACHIEVED
        assert stored[far.id].status == GoalStatus.ACTIVE

    def test_achievement_survives_weight_gain(self, profile_db):
        goals = GoalService(profile_db)
        service = WeightLogService(profile_db)

        async def run():
            goal = await goals.add_goal(79, TODAY + timedelta(days=7), today=TODAY)
            await service.log_weight(78, logged_at=NOW - timedelta(hours=2))
            second = await service.log_weight(81, logged_at=NOW)
            return goal, second, await GoalRepository(profile_db).get(goal.id)

        goal, second, stored = asyncio.run(run())

        assert second.achieved_goals == []
        assert stored.status == GoalStatus.ACHIEVED

    def test_delete_measurement(self, profile_db):
        service = WeightLogService(profile_db)

        async def run():
            result = await service.log_weight(80, logged_at=NOW)
            return (
                await service.delete_measurement(result.measurement.id),
                await service.delete_measurement(result.measurement.id),
            )

        assert asyncio.run(run()) == (True, False)


class TestGoalService:
    """Tests for GoalService."""

    def test_default_deadline(self, profile_db):
        goal = asyncio.run(GoalService(profile_db).add_goal("72", today=TODAY))

        assert goal.deadline == date(2026, 12, 19)
        assert goal.status == GoalStatus.ACTIVE
        assert goal.id is not None

    def test_rejects_past_deadline(self, profile_db):
        service = GoalService(profile_db)
        with pytest.raises(ValidationError):
            asyncio.run(service.add_goal("72", "2026-01-01", today=TODAY))

    def test_requires_profile(self, initialized_db):
        with pytest.raises(ValidationError):
            asyncio.run(GoalService(initialized_db).add_goal("72", today=TODAY))

    def test_delete_missing(self, profile_db):
        assert asyncio.run(GoalService(profile_db).delete_goal(999)) is False


class TestDashboardService:
    """Tests for DashboardService."""

    def test_none_without_profile(self, initialized_db):
        assert asyncio.run(DashboardService(initialized_db).load(now=NOW)) is None

    def test_loads_snapshot(self, profile_db):
        async def run():
            log = WeightLogService(profile_db)
            await log.log_weight(82, logged_at=NOW - timedelta(days=6))
            await log.log_weight(80, logged_at=NOW)
            await GoalService(profile_db).add_goal(70, TODAY + timedelta(days=14), today=TODAY)
            await seed_quotes(profile_db)
            return await DashboardService(profile_db).load(
                now=NOW, options=ChartOptions(show_goal_line=True)
            )

        stats = asyncio.run(run())

        assert stats.latest_weight_kg == 80
        assert stats.trend_kg == pytest.approx(-2.0)
        assert [p.weight for p in stats.chart_points] == [82, 80]
        assert stats.goal_paces[0].kg_per_week == pytest.approx(5.0)
        assert stats.y_axis.min == 63
        assert stats.quote is not None


class TestQuoteSeeding:
    """Tests for the bundled quote loader."""

    def test_bundled_quotes_load(self):
        quotes = load_quotes()
        assert quotes
        assert all(q.text for q in quotes)

    def test_skips_blank_entries(self, tmp_path):
        path = tmp_path / "quotes.json"
        path.write_text(json.dumps({"quotes": [{"text": " "}, {"text": "Go", "author": ""}]}))

        quotes = load_quotes(path)

        assert [(q.text, q.author) for q in quotes] == [("Go", None)]

    def test_missing_file(self, tmp_path):
        assert load_quotes(tmp_path / "missing.json") == []

    def test_seed_only_once(self, initialized_db):
        async def run():
            return await seed_quotes(initialized_db), await seed_quotes(initialized_db)

        first, second = asyncio.run(run())

        assert first == len(load_quotes())
        assert second == 0
