"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from datetime import date, timedelta
from pathlib import Path

import pytest

from progress_pals.db.engine import init_db
from progress_pals.models.goal import Goal
from progress_pals.models.profile import Gender, Profile

from factories import NOW


@pytest.fixture
def now():
    """Fixed reference time for window and pace calculations."""
    return NOW


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def initialized_db(temp_db_path):
    """Temporary database with the schema created."""
    asyncio.run(init_db(temp_db_path))
    return temp_db_path


@pytest.fixture
def sample_profile():
    """A 170 cm profile with a long-term target of 68 kg."""
    return Profile(
        height_cm=170,
        target_weight_kg=68,
        birthdate=date(1990, 5, 17),
        gender=Gender.FEMALE,
        id=1,
    )


@pytest.fixture
def sample_goal():
    """Goal of 70 kg due two weeks after NOW."""
    return Goal(target_weight_kg=70, deadline=NOW.date() + timedelta(days=14), id=1)
