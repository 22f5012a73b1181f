"""Dashboard view-state assembled from a profile and its history."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime

from ..models.goal import Goal
from ..models.measurement import Measurement
from ..models.profile import Profile
from ..models.quote import Quote
from .bmi import BMICategory, BMIZones, calculate_bmi, get_bmi_category, get_bmi_zone_boundaries
from .chart import ChartOptions, ChartPoint, YAxis, calculate_y_axis, select_chart_points
from .goals import GoalPace, evaluate_goal_pace, nearest_short_term_goal
from .window import calculate_rolling_average, calculate_trend, ensure_newest_first


@dataclass(frozen=True)
class DashboardStats:
    """Everything the dashboard renders, derived from one data snapshot."""

    profile: Profile
    measurements: list[Measurement]
    options: ChartOptions
    zones: BMIZones
    chart_points: list[ChartPoint]
    y_axis: YAxis
    latest_weight_kg: float | None = None
    current_bmi: float | None = None
    bmi_category: BMICategory | None = None
    trend_kg: float | None = None
    rolling_average_kg: float | None = None
    goal_paces: list[GoalPace] = field(default_factory=list)
    short_term_goal: Goal | None = None
    quote: Quote | None = None

    def to_dict(self) -> dict:
        """JSON-friendly representation for the API."""
        return {
            "profile": self.profile.to_dict(),
            "latest_weight_kg": self.latest_weight_kg,
            "current_bmi": self.current_bmi,
            "bmi_category": self.bmi_category.value if self.bmi_category else None,
            "bmi_zones": self.zones.to_dict(),
            "trend_kg": self.trend_kg,
            "rolling_average_kg": self.rolling_average_kg,
            "chart": {
                "options": {
                    "show_bmi_zones": self.options.show_bmi_zones,
                    "show_goal_line": self.options.show_goal_line,
                    "show_short_term_goal": self.options.show_short_term_goal,
                    "show_full_history": self.options.show_full_history,
                },
                "points": [p.to_dict() for p in self.chart_points],
                "y_axis": self.y_axis.to_dict(),
            },
            "goals": [pace.to_dict() for pace in self.goal_paces],
            "short_term_goal_id": self.short_term_goal.id if self.short_term_goal else None,
            "quote": self.quote.to_dict() if self.quote else None,
        }


def build_dashboard(
    profile: Profile,
    measurements: Sequence[Measurement],
    goals: Sequence[Goal],
    now: datetime,
    options: ChartOptions | None = None,
    quote: Quote | None = None,
) -> DashboardStats:
    """Compute all dashboard statistics.

    Args:
        profile: The user's profile (height, optional long-term target)
        measurements: Weight history, newest-first
        goals: Short-term goals in any order
        now: Reference time for the 7-day window and goal deadlines
        options: Chart toggles
        quote: Optional quote to pass through to the view

    Raises:
        ValueError: If measurements are not ordered newest-first
    """
    options = options or ChartOptions()
    ensure_newest_first(measurements)

    latest_weight = measurements[0].weight_kg if measurements else None
    current_bmi = None
    category = None
    if latest_weight is not None:
        current_bmi = calculate_bmi(latest_weight, profile.height_cm)
        category = get_bmi_category(current_bmi)

    zones = get_bmi_zone_boundaries(profile.height_cm)
    short_term_goal = nearest_short_term_goal(goals, latest_weight)

    points = select_chart_points(measurements, options)
    y_axis = calculate_y_axis(
        points,
        options,
        zones=zones,
        target_weight_kg=profile.target_weight_kg,
        short_term_target_kg=short_term_goal.target_weight_kg if short_term_goal else None,
    )

    return DashboardStats(
        profile=profile,
        measurements=list(measurements),
        options=options,
        zones=zones,
        chart_points=points,
        y_axis=y_axis,
        latest_weight_kg=latest_weight,
        current_bmi=current_bmi,
        bmi_category=category,
        trend_kg=calculate_trend(measurements, now),
        rolling_average_kg=calculate_rolling_average(measurements, now),
        goal_paces=[evaluate_goal_pace(g, latest_weight, now) for g in goals],
        short_term_goal=short_term_goal,
        quote=quote,
    )
