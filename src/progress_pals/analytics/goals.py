"""Goal pace evaluation."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from ..models.goal import Goal, GoalStatus

AMBITIOUS_KG_PER_WEEK = 1.0
SAFE_KG_PER_WEEK = (0.5, 1.0)
MIN_WEEKS_REMAINING = 0.01  # Same-day deadlines still divide safely

AMBITIOUS_WARNING = (
    "This goal needs more than {limit:g} kg of loss per week. "
    "A safe, sustainable pace is {low:g}-{high:g} kg per week; "
    "consider a later deadline."
)


@dataclass(frozen=True)
class GoalPace:
    """Derived progress figures for one goal.

    Pace fields are None for achieved goals.
    """

    goal: Goal
    days_remaining: int
    is_achieved: bool
    weeks_remaining: float | None = None
    kg_to_lose: float | None = None
    kg_per_week: float | None = None
    is_ambitious: bool = False

    @property
    def warning(self) -> str | None:
        if not self.is_ambitious:
            return None
        low, high = SAFE_KG_PER_WEEK
        return AMBITIOUS_WARNING.format(limit=AMBITIOUS_KG_PER_WEEK, low=low, high=high)

    def to_dict(self) -> dict:
        return {
            "goal_id": self.goal.id,
            "target_weight_kg": self.goal.target_weight_kg,
            "deadline": self.goal.deadline.isoformat(),
            "status": self.goal.status.value,
            "days_remaining": self.days_remaining,
            "is_achieved": self.is_achieved,
            "weeks_remaining": self.weeks_remaining,
            "kg_to_lose": self.kg_to_lose,
            "kg_per_week": self.kg_per_week,
            "is_ambitious": self.is_ambitious,
            "warning": self.warning,
        }


def days_until(deadline: date, now: datetime) -> int:
    """Whole calendar days from today until the deadline, never negative."""
    return max(0, (deadline - now.date()).days)


def is_goal_achieved(goal: Goal, latest_weight_kg: float | None) -> bool:
    """Persisted status, or the latest weight already meets the target.

    A persisted achievement is never undone by a later, heavier weight.
    """
    if goal.status == GoalStatus.ACHIEVED:
        return True
    return latest_weight_kg is not None and latest_weight_kg <= goal.target_weight_kg


def evaluate_goal_pace(
    goal: Goal, latest_weight_kg: float | None, now: datetime
) -> GoalPace:
    """Compute days left and the weekly loss rate a goal requires."""
    if is_goal_achieved(goal, latest_weight_kg):
        return GoalPace(goal=goal, days_remaining=0, is_achieved=True)

    days_remaining = days_until(goal.deadline, now)
    weeks_remaining = max(days_remaining / 7, MIN_WEEKS_REMAINING)
    if latest_weight_kg is not None:
        kg_to_lose = latest_weight_kg - goal.target_weight_kg
    else:
        # Nothing logged yet; shown as the full target
        kg_to_lose = goal.target_weight_kg
    kg_per_week = kg_to_lose / weeks_remaining

    return GoalPace(
        goal=goal,
        days_remaining=days_remaining,
        is_achieved=False,
        weeks_remaining=weeks_remaining,
        kg_to_lose=kg_to_lose,
        kg_per_week=kg_per_week,
        is_ambitious=kg_per_week > AMBITIOUS_KG_PER_WEEK,
    )


def goals_reached_by(goals: Iterable[Goal], weight_kg: float) -> list[Goal]:
    """Active goals whose target the given weight meets."""
    return [
        g
        for g in goals
        if g.status == GoalStatus.ACTIVE and weight_kg <= g.target_weight_kg
    ]


def nearest_short_term_goal(
    goals: Iterable[Goal], latest_weight_kg: float | None
) -> Goal | None:
    """The unachieved goal with the earliest deadline."""
    open_goals = [g for g in goals if not is_goal_achieved(g, latest_weight_kg)]
    if not open_goals:
        return None
    return min(open_goals, key=lambda g: (g.deadline, g.id or 0))
