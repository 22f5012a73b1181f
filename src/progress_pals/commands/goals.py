"""Goal management commands."""

from datetime import datetime

import click

from ..analytics.goals import evaluate_goal_pace
from ..db.repositories import GoalRepository, MeasurementRepository
from ..services.goals import GoalService
from ..services.validation import ValidationError
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    format_table,
)


@click.group()
def goals():
    """Manage short-term weight goals."""
    pass


@goals.command("add")
@click.argument("target_weight_kg")
@click.option("--deadline", help="Deadline as YYYY-MM-DD (default: two months from today)")
@click.pass_context
@async_command
async def add(ctx: click.Context, target_weight_kg: str, deadline: str | None):
    """Add a goal to reach TARGET_WEIGHT_KG by a deadline."""
    ensure_initialized(ctx)

    try:
        goal = await GoalService().add_goal(target_weight_kg, deadline)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(
        f"Goal {goal.id} added: {goal.target_weight_kg:g} kg by {goal.deadline.isoformat()}"
    )

    latest = await MeasurementRepository().list_recent(limit=1)
    pace = evaluate_goal_pace(goal, latest[0].weight_kg if latest else None, datetime.now())
    if pace.warning:
        echo_warning(pace.warning)


@goals.command("list")
@click.pass_context
@async_command
async def list_goals(ctx: click.Context):
    """List goals with their pace."""
    ensure_initialized(ctx)

    all_goals = await GoalRepository().list_all()
    if not all_goals:
        echo_info("No goals yet. Add one with 'progress-pals goals add <kg>'.")
        return

    latest = await MeasurementRepository().list_recent(limit=1)
    latest_weight = latest[0].weight_kg if latest else None
    now = datetime.now()

    rows = []
    for goal in all_goals:
        pace = evaluate_goal_pace(goal, latest_weight, now)
        rows.append(
            [
                str(goal.id),
                f"{goal.target_weight_kg:g} kg",
                goal.deadline.isoformat(),
                "Achieved" if pace.is_achieved else goal.get_status_display(),
                str(pace.days_remaining),
                "" if pace.kg_per_week is None else f"{pace.kg_per_week:.2f}",
                "yes" if pace.is_ambitious else "",
            ]
        )

    click.echo(
        format_table(
            ["ID", "Target", "Deadline", "Status", "Days left", "kg/week", "Ambitious"],
            rows,
        )
    )


@goals.command("delete")
@click.argument("goal_id", type=int)
@click.pass_context
@async_command
async def delete_goal(ctx: click.Context, goal_id: int):
    """Delete a goal by ID."""
    ensure_initialized(ctx)

    if not await GoalService().delete_goal(goal_id):
        echo_error(f"Goal {goal_id} not found.")
        ctx.exit(1)
    echo_success(f"Deleted goal {goal_id}")
