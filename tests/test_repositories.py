"""Tests for the aiosqlite repositories."""

import asyncio
from datetime import date, timedelta

import pytest

from progress_pals.db.repositories import (
    GoalRepository,
    MeasurementRepository,
    ProfileRepository,
    QuoteRepository,
)
from progress_pals.models.goal import Goal, GoalStatus
from progress_pals.models.measurement import Measurement
from progress_pals.models.profile import Gender, Profile
from progress_pals.models.quote import Quote

from factories import NOW


class TestProfileRepository:
    """Tests for ProfileRepository."""

    def test_empty(self, initialized_db):
        assert asyncio.run(ProfileRepository(initialized_db).get_latest()) is None

    def test_create_and_update(self, initialized_db):
        repo = ProfileRepository(initialized_db)

        async def run():
            profile = Profile(height_cm=170, target_weight_kg=68, gender=Gender.MALE)
            profile.id = await repo.create(profile)
            profile.height_cm = 171
            profile.birthdate = date(1990, 5, 17)
            await repo.update(profile)
            return await repo.get_latest()

        stored = asyncio.run(run())

        assert stored.height_cm == 171
        assert stored.target_weight_kg == 68
        assert stored.birthdate == date(1990, 5, 17)
        assert stored.gender == Gender.MALE
        assert stored.created_at is not None

    def test_update_requires_id(self, initialized_db):
        repo = ProfileRepository(initialized_db)
        with pytest.raises(ValueError):
            asyncio.run(repo.update(Profile(height_cm=170)))


class TestMeasurementRepository:
    """Tests for MeasurementRepository."""

    def test_list_recent_newest_first(self, initialized_db):
        repo = MeasurementRepository(initialized_db)

        async def run():
            for weight, days_ago in [(81, 2), (80, 0), (82, 5)]:
                await repo.create(
                    Measurement(weight_kg=weight, created_at=NOW - timedelta(days=days_ago))
                )
            return await repo.list_recent()

        recent = asyncio.run(run())

        assert [m.weight_kg for m in recent] == [80, 81, 82]
        assert recent[0].created_at == NOW

    def test_list_recent_limit(self, initialized_db):
        repo = MeasurementRepository(initialized_db)

        async def run():
            for i in range(5):
                await repo.create(
                    Measurement(weight_kg=70 + i, created_at=NOW - timedelta(days=i))
                )
            return await repo.list_recent(limit=3)

        recent = asyncio.run(run())

        assert [m.weight_kg for m in recent] == [70, 71, 72]

    def test_create_stamps_time(self, initialized_db):
        repo = MeasurementRepository(initialized_db)
        created = asyncio.run(repo.create(Measurement(weight_kg=75)))

        assert created.id is not None
        assert created.created_at is not None

    def test_delete(self, initialized_db):
        repo = MeasurementRepository(initialized_db)

        async def run():
            created = await repo.create(Measurement(weight_kg=75, created_at=NOW))
            first = await repo.delete(created.id)
            second = await repo.delete(created.id)
            return first, second, await repo.get(created.id)

        first, second, remaining = asyncio.run(run())

        assert first is True
        assert second is False
        assert remaining is None


class TestGoalRepository:
    """Tests for GoalRepository."""

    def test_ordered_by_deadline(self, initialized_db):
        repo = GoalRepository(initialized_db)
        today = NOW.date()

        async def run():
            await repo.create(Goal(target_weight_kg=72, deadline=today + timedelta(days=30)))
            await repo.create(Goal(target_weight_kg=75, deadline=today + timedelta(days=10)))
            return await repo.list_all()

        goals = asyncio.run(run())

        assert [g.target_weight_kg for g in goals] == [75, 72]
        assert all(g.status == GoalStatus.ACTIVE for g in goals)

    def test_mark_achieved_and_delete(self, initialized_db):
        repo = GoalRepository(initialized_db)

        async def run():
            goal_id = await repo.create(Goal(target_weight_kg=72, deadline=NOW.date()))
            await repo.mark_achieved(goal_id)
            achieved = await repo.get(goal_id)
            deleted = await repo.delete(goal_id)
            return achieved, deleted, await repo.list_all()

        achieved, deleted, remaining = asyncio.run(run())

        assert achieved.status == GoalStatus.ACHIEVED
        assert deleted is True
        assert remaining == []


class TestQuoteRepository:
    """Tests for QuoteRepository."""

    def test_random_from_empty(self, initialized_db):
        assert asyncio.run(QuoteRepository(initialized_db).get_random()) is None

    def test_duplicates_ignored(self, initialized_db):
        repo = QuoteRepository(initialized_db)

        async def run():
            await repo.create(Quote(text="One step at a time", author="Anon"))
            await repo.create(Quote(text="One step at a time", author="Anon"))
            return await repo.count(), await repo.get_random()

        count, quote = asyncio.run(run())

        assert count == 1
        assert quote.text == "One step at a time"
        assert quote.author == "Anon"
