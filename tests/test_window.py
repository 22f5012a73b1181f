"""Tests for 7-day trend and rolling average."""

from datetime import timedelta

import pytest

from progress_pals.analytics.window import (
    calculate_rolling_average,
    calculate_trend,
    ensure_newest_first,
    measurements_in_window,
)
from progress_pals.models.measurement import Measurement

from factories import NOW, make_history


class TestTrend:
    """Tests for calculate_trend."""

    def test_reference_scenario(self):
        """80 kg today after 82 kg six days ago is a 2 kg drop."""
        history = make_history((80, 0), (82, 6))
        assert calculate_trend(history, NOW) == pytest.approx(-2.0)

    def test_positive_when_gaining(self):
        history = make_history((75.5, 0), (74.0, 3), (74.5, 5))
        assert calculate_trend(history, NOW) == pytest.approx(1.0)

    def test_uses_only_window_endpoints(self):
        history = make_history((80, 1), (90, 3), (81, 6), (60, 10))
        assert calculate_trend(history, NOW) == pytest.approx(-1.0)

    @pytest.mark.parametrize(
        "entries",
        [
            (),
            ((80, 0),),
            ((80, 2), (82, 8)),
            ((80, 9), (82, 12)),
        ],
    )
    def test_undefined_with_fewer_than_two_in_window(self, entries):
        assert calculate_trend(make_history(*entries), NOW) is None

    def test_no_change(self):
        history = make_history((70, 0), (70, 2))
        assert calculate_trend(history, NOW) == 0


class TestRollingAverage:
    """Tests for calculate_rolling_average."""

    def test_reference_scenario(self):
        history = make_history((80, 0), (82, 6))
        assert calculate_rolling_average(history, NOW) == pytest.approx(81.0)

    def test_empty_window(self):
        assert calculate_rolling_average([], NOW) is None
        assert calculate_rolling_average(make_history((80, 8)), NOW) is None

    def test_single_measurement(self):
        assert calculate_rolling_average(make_history((77.3, 1)), NOW) == pytest.approx(77.3)

    def test_older_measurements_do_not_change_average(self):
        recent = make_history((80, 0), (82, 6))
        with_old = make_history((80, 0), (82, 6), (120, 8), (20, 30))

        assert calculate_rolling_average(with_old, NOW) == calculate_rolling_average(
            recent, NOW
        )


class TestWindow:
    """Tests for measurements_in_window and ordering checks."""

    def test_cutoff_is_inclusive(self):
        on_edge = Measurement(id=1, weight_kg=70, created_at=NOW - timedelta(days=7))
        just_outside = Measurement(
            id=2, weight_kg=71, created_at=NOW - timedelta(days=7, seconds=1)
        )

        assert measurements_in_window([on_edge, just_outside], NOW) == [on_edge]

    def test_preserves_order(self):
        history = make_history((80, 0), (81, 2), (82, 4))
        assert [m.weight_kg for m in measurements_in_window(history, NOW)] == [80, 81, 82]

    def test_newest_first_accepted(self):
        ensure_newest_first(make_history((80, 0), (81, 2), (82, 4)))

    def test_equal_timestamps_accepted(self):
        same = NOW - timedelta(days=1)
        ensure_newest_first(
            [Measurement(weight_kg=70, created_at=same), Measurement(weight_kg=71, created_at=same)]
        )

    def test_oldest_first_rejected(self):
        history = list(reversed(make_history((80, 0), (81, 2))))
        with pytest.raises(ValueError, match="newest-first"):
            ensure_newest_first(history)

    def test_missing_timestamp_rejected(self):
        history = [Measurement(weight_kg=70), Measurement(weight_kg=71, created_at=NOW)]
        with pytest.raises(ValueError):
            ensure_newest_first(history)
