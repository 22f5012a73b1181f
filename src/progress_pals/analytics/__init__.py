"""Pure statistics over weight history: BMI, 7-day stats, chart domain, goal pace."""

from .bmi import BMICategory, BMIZones, calculate_bmi, get_bmi_category, get_bmi_zone_boundaries
from .chart import (
    ChartOptions,
    ChartPoint,
    YAxis,
    calculate_y_axis,
    generate_ticks,
    select_chart_points,
)
from .dashboard import DashboardStats, build_dashboard
from .goals import (
    GoalPace,
    days_until,
    evaluate_goal_pace,
    goals_reached_by,
    is_goal_achieved,
    nearest_short_term_goal,
)
from .window import (
    calculate_rolling_average,
    calculate_trend,
    ensure_newest_first,
    measurements_in_window,
)

__all__ = [
    "BMICategory",
    "BMIZones",
    "build_dashboard",
    "calculate_bmi",
    "calculate_rolling_average",
    "calculate_trend",
    "calculate_y_axis",
    "ChartOptions",
    "ChartPoint",
    "DashboardStats",
    "days_until",
    "ensure_newest_first",
    "evaluate_goal_pace",
    "generate_ticks",
    "get_bmi_category",
    "get_bmi_zone_boundaries",
    "GoalPace",
    "goals_reached_by",
    "is_goal_achieved",
    "measurements_in_window",
    "nearest_short_term_goal",
    "select_chart_points",
    "YAxis",
]
