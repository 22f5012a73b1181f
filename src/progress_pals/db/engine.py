"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import DB_FILENAME, load_settings

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = load_settings().data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    logger.info("Initializing database at %s", db_path)
    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS profiles (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                height_cm REAL NOT NULL,
                target_weight_kg REAL,
                birthdate TEXT,
                gender TEXT NOT NULL DEFAULT 'prefer_not_to_say',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS measurements (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                profile_id INTEGER,
                weight_kg REAL NOT NULL,
                created_at TIMESTAMP NOT NULL,
                FOREIGN KEY (profile_id) REFERENCES profiles(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS goals (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                profile_id INTEGER,
                target_weight_kg REAL NOT NULL,
                deadline TEXT NOT NULL,
                status TEXT NOT NULL DEFAULT 'active',
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                FOREIGN KEY (profile_id) REFERENCES profiles(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS quotes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                text TEXT UNIQUE NOT NULL,
                author TEXT
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_measurements_profile_created
            ON measurements(profile_id, created_at)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_goals_profile
            ON goals(profile_id)
        """)

        await db.commit()
