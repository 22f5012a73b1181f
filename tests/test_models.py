"""Tests for data models."""

from datetime import date, datetime

from progress_pals.models.goal import Goal, GoalStatus
from progress_pals.models.measurement import Measurement
from progress_pals.models.profile import Gender, Profile


class TestProfile:
    """Tests for Profile model."""

    def test_profile_to_dict(self, sample_profile):
        data = sample_profile.to_dict()

        assert data["height_cm"] == 170
        assert data["target_weight_kg"] == 68
        assert data["birthdate"] == "1990-05-17"
        assert data["gender"] == "female"

    def test_profile_from_dict_defaults(self):
        profile = Profile.from_dict({"height_cm": 182})

        assert profile.target_weight_kg is None
        assert profile.birthdate is None
        assert profile.gender == Gender.PREFER_NOT_TO_SAY

    def test_age(self, sample_profile):
        assert sample_profile.get_age(date(2026, 5, 16)) == 35
        assert sample_profile.get_age(date(2026, 5, 17)) == 36
        assert Profile(height_cm=170).get_age(date(2026, 1, 1)) is None

    def test_summary_without_target(self):
        summary = Profile(height_cm=170).get_summary()

        assert "Height: 170 cm" in summary
        assert "Target weight: not set" in summary
        assert "prefer not to say" in summary

    def test_summary_shows_age(self, sample_profile):
        summary = sample_profile.get_summary(today=date(2026, 10, 19))

        assert "Birthdate: 1990-05-17" in summary
        assert "Age: 36" in summary
        assert "Gender: female" in summary


class TestGoal:
    """Tests for Goal model."""

    def test_goal_from_dict(self):
        goal = Goal.from_dict(
            {"target_weight_kg": 70.5, "deadline": "2026-12-19", "status": "achieved"},
            id=4,
        )

        assert goal.id == 4
        assert goal.deadline == date(2026, 12, 19)
        assert goal.status == GoalStatus.ACHIEVED
        assert goal.get_status_display() == "Achieved"

    def test_goal_defaults_to_active(self):
        goal = Goal.from_dict({"target_weight_kg": 70, "deadline": "2026-12-19"})
        assert goal.status == GoalStatus.ACTIVE


class TestMeasurement:
    """Tests for Measurement model."""

    def test_measurement_to_dict(self):
        m = Measurement(weight_kg=72.4, created_at=datetime(2026, 10, 19, 7, 30), id=9)
        assert m.to_dict() == {
            "id": 9,
            "weight_kg": 72.4,
            "created_at": "2026-10-19T07:30:00",
        }

