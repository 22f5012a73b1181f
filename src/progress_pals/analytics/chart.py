"""Weight chart series selection and Y-axis domain derivation."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime

from ..models.measurement import Measurement
from .bmi import BMIZones

DEFAULT_POINT_LIMIT = 50
GOAL_LINE_POINT_LIMIT = 25  # Fewer points keep goal labels legible
TICK_STEP_KG = 5

# Padding around the plotted data and reference lines (kg)
DATA_PADDING_BELOW = 2
DATA_PADDING_ABOVE = 5
REFERENCE_PADDING = 5

# Axis range used when there is nothing to plot
EMPTY_WEIGHT_MIN = 0
EMPTY_WEIGHT_MAX = 100


@dataclass(frozen=True)
class ChartOptions:
    """Chart toggles chosen by the user for the current view."""

    show_bmi_zones: bool = False
    show_goal_line: bool = False
    show_short_term_goal: bool = False
    show_full_history: bool = False

    @property
    def any_goal_line(self) -> bool:
        return self.show_goal_line or self.show_short_term_goal

    def point_limit(self) -> int | None:
        """Maximum number of plotted points, None for no cap."""
        if self.show_full_history:
            return None
        if self.any_goal_line:
            return GOAL_LINE_POINT_LIMIT
        return DEFAULT_POINT_LIMIT


@dataclass(frozen=True)
class ChartPoint:
    """A single plotted measurement."""

    id: int | None
    date: str  # Axis label, e.g. "Oct 5"
    weight: float
    full_date: datetime | None  # Original timestamp for tooltips

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date,
            "weight": self.weight,
            "full_date": self.full_date.isoformat() if self.full_date else None,
        }


@dataclass(frozen=True)
class YAxis:
    """Y-axis domain and tick positions in kg."""

    min: float
    max: float
    ticks: list[int]

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "ticks": list(self.ticks)}


def format_chart_date(value: datetime) -> str:
    """Short axis label such as ``"Oct 5"``."""
    return f"{value:%b} {value.day}"


def select_chart_points(
    measurements: Sequence[Measurement], options: ChartOptions
) -> list[ChartPoint]:
    """Pick the measurements to plot, returned oldest-to-newest.

    ``measurements`` must be newest-first; the most recent ones are kept.
    """
    limit = options.point_limit()
    selected = list(measurements) if limit is None else list(measurements[:limit])
    selected.reverse()
    return [
        ChartPoint(
            id=m.id,
            date=format_chart_date(m.created_at) if m.created_at else "",
            weight=m.weight_kg,
            full_date=m.created_at,
        )
        for m in selected
    ]


def calculate_y_axis(
    points: Sequence[ChartPoint],
    options: ChartOptions,
    zones: BMIZones | None = None,
    target_weight_kg: float | None = None,
    short_term_target_kg: float | None = None,
) -> YAxis:
    """Derive the Y-axis domain for the plotted points and reference lines.

    The domain always contains the data with some padding. Each visible
    reference line widens it so the line stays on screen; BMI zones only
    extend the lower bound.
    """
    weights = [p.weight for p in points]
    weight_min = min(weights) if weights else EMPTY_WEIGHT_MIN
    weight_max = max(weights) if weights else EMPTY_WEIGHT_MAX

    lower_candidates = [weight_min - DATA_PADDING_BELOW]
    upper_candidates = [weight_max + DATA_PADDING_ABOVE]

    if options.show_bmi_zones and zones is not None:
        lower_candidates.append(zones.underweight - REFERENCE_PADDING)

    goal_lines = []
    if options.show_goal_line and target_weight_kg is not None:
        goal_lines.append(target_weight_kg)
    if options.show_short_term_goal and short_term_target_kg is not None:
        goal_lines.append(short_term_target_kg)

    for target in goal_lines:
        lower_candidates.append(target - REFERENCE_PADDING)
        upper_candidates.append(target + REFERENCE_PADDING)

    lower = min(lower_candidates)
    upper = max(upper_candidates)
    return YAxis(min=lower, max=upper, ticks=generate_ticks(lower, upper))


def generate_ticks(lower: float, upper: float, step: int = TICK_STEP_KG) -> list[int]:
    """Ticks at every multiple of ``step`` bracketing ``[lower, upper]``."""
    start = math.floor(lower / step) * step
    stop = math.ceil(upper / step) * step
    return list(range(start, stop + 1, step))
