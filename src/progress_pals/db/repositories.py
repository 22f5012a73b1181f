"""Data access layer for progress-pals."""

import logging
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..models.goal import Goal, GoalStatus
from ..models.measurement import Measurement
from ..models.profile import Profile
from ..models.quote import Quote
from .engine import get_db_path

logger = logging.getLogger(__name__)

# Dashboard history is capped at this many recent measurements
RECENT_MEASUREMENT_LIMIT = 100


def _parse_timestamp(value: str | None) -> datetime | None:
    return datetime.fromisoformat(value) if value else None


class ProfileRepository:
    """Repository for the user profile."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, profile: Profile) -> int:
        """Create the profile."""
        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO profiles (height_cm, target_weight_kg, birthdate, gender)
                VALUES (?, ?, ?, ?)
                """,
                (
                    data["height_cm"],
                    data["target_weight_kg"],
                    data["birthdate"],
                    data["gender"],
                ),
            )
            await db.commit()
            logger.info("Created profile %s", cursor.lastrowid)
            return cursor.lastrowid

    async def get_latest(self) -> Profile | None:
        """Get the most recently created/updated profile."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM profiles ORDER BY updated_at DESC, id DESC LIMIT 1"
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_profile(row)

    async def update(self, profile: Profile) -> None:
        """Update an existing profile."""
        if profile.id is None:
            raise ValueError("Profile must have an ID to update")

        data = profile.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE profiles SET
                    height_cm = ?, target_weight_kg = ?, birthdate = ?, gender = ?,
                    updated_at = CURRENT_TIMESTAMP
                WHERE id = ?
                """,
                (
                    data["height_cm"],
                    data["target_weight_kg"],
                    data["birthdate"],
                    data["gender"],
                    profile.id,
                ),
            )
            await db.commit()

    def _row_to_profile(self, row: aiosqlite.Row) -> Profile:
        """Convert a database row to a Profile."""
        data = {
            "height_cm": row["height_cm"],
            "target_weight_kg": row["target_weight_kg"],
            "birthdate": row["birthdate"],
            "gender": row["gender"],
        }
        return Profile.from_dict(
            data,
            id=row["id"],
            created_at=_parse_timestamp(row["created_at"]),
            updated_at=_parse_timestamp(row["updated_at"]),
        )


class MeasurementRepository:
    """Repository for weight measurements."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, measurement: Measurement) -> Measurement:
        """Store a measurement, stamping it with the current time if unset."""
        created_at = measurement.created_at or datetime.now()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO measurements (profile_id, weight_kg, created_at)
                VALUES (?, ?, ?)
                """,
                (measurement.profile_id, measurement.weight_kg, created_at.isoformat()),
            )
            await db.commit()
            return Measurement(
                id=cursor.lastrowid,
                profile_id=measurement.profile_id,
                weight_kg=measurement.weight_kg,
                created_at=created_at,
            )

    async def get(self, measurement_id: int) -> Measurement | None:
        """Get a measurement by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM measurements WHERE id = ?", (measurement_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_measurement(row)

    async def list_recent(
        self, profile_id: int | None = None, limit: int = RECENT_MEASUREMENT_LIMIT
    ) -> list[Measurement]:
        """Most recent measurements, newest-first."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if profile_id:
                cursor = await db.execute(
                    """
                    SELECT * FROM measurements
                    WHERE profile_id = ?
                    ORDER BY created_at DESC, id DESC
                    LIMIT ?
                    """,
                    (profile_id, limit),
                )
            else:
                cursor = await db.execute(
                    """
                    SELECT * FROM measurements
                    ORDER BY created_at DESC, id DESC
                    LIMIT ?
                    """,
                    (limit,),
                )
            rows = await cursor.fetchall()
            return [self._row_to_measurement(row) for row in rows]

    async def delete(self, measurement_id: int) -> bool:
        """Delete a measurement. Returns False if it did not exist."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "DELETE FROM measurements WHERE id = ?", (measurement_id,)
            )
            await db.commit()
            return cursor.rowcount > 0

    def _row_to_measurement(self, row: aiosqlite.Row) -> Measurement:
        """Convert a database row to a Measurement."""
        return Measurement(
            id=row["id"],
            profile_id=row["profile_id"],
            weight_kg=row["weight_kg"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class GoalRepository:
    """Repository for short-term goals."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, goal: Goal) -> int:
        """Create a goal."""
        data = goal.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO goals (profile_id, target_weight_kg, deadline, status)
                VALUES (?, ?, ?, ?)
                """,
                (goal.profile_id, data["target_weight_kg"], data["deadline"], data["status"]),
            )
            await db.commit()
            return cursor.lastrowid

    async def get(self, goal_id: int) -> Goal | None:
        """Get a goal by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM goals WHERE id = ?", (goal_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_goal(row)

    async def list_all(self, profile_id: int | None = None) -> list[Goal]:
        """List goals ordered by deadline."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if profile_id:
                cursor = await db.execute(
                    "SELECT * FROM goals WHERE profile_id = ? ORDER BY deadline, id",
                    (profile_id,),
                )
            else:
                cursor = await db.execute("SELECT * FROM goals ORDER BY deadline, id")
            rows = await cursor.fetchall()
            return [self._row_to_goal(row) for row in rows]

    async def mark_achieved(self, goal_id: int) -> None:
        """Persist the achieved status for a single goal."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "UPDATE goals SET status = ? WHERE id = ?",
                (GoalStatus.ACHIEVED.value, goal_id),
            )
            await db.commit()

    async def delete(self, goal_id: int) -> bool:
        """Delete a goal. Returns False if it did not exist."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("DELETE FROM goals WHERE id = ?", (goal_id,))
            await db.commit()
            return cursor.rowcount > 0

    def _row_to_goal(self, row: aiosqlite.Row) -> Goal:
        """Convert a database row to a Goal."""
        data = {
            "target_weight_kg": row["target_weight_kg"],
            "deadline": row["deadline"],
            "status": row["status"],
        }
        return Goal.from_dict(
            data,
            id=row["id"],
            profile_id=row["profile_id"],
            created_at=_parse_timestamp(row["created_at"]),
        )


class QuoteRepository:
    """Repository for inspirational quotes."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, quote: Quote) -> int:
        """Insert a quote, ignoring exact duplicates."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT OR IGNORE INTO quotes (text, author) VALUES (?, ?)",
                (quote.text, quote.author),
            )
            await db.commit()
            return cursor.lastrowid

    async def count(self) -> int:
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT COUNT(*) FROM quotes")
            row = await cursor.fetchone()
            return row[0]

    async def get_random(self) -> Quote | None:
        """Pick one quote uniformly at random."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM quotes ORDER BY RANDOM() LIMIT 1")
            row = await cursor.fetchone()
            if row is None:
                return None
            return Quote(id=row["id"], text=row["text"], author=row["author"])

