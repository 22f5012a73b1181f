"""Weight logging commands."""

from datetime import datetime

import click

from ..db.repositories import MeasurementRepository
from ..services.validation import ValidationError
from ..services.weight_log import WeightLogService
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
)


@click.command("log")
@click.argument("weight_kg")
@click.option(
    "--at",
    "logged_at",
    type=click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%d %H:%M", "%Y-%m-%dT%H:%M:%S"]),
    help="When the weight was measured (default: now)",
)
@click.pass_context
@async_command
async def log_weight(ctx: click.Context, weight_kg: str, logged_at: datetime | None):
    """Log a weight measurement in kg.

    Any active goal the new weight reaches is marked as achieved.
    """
    ensure_initialized(ctx)

    service = WeightLogService()
    try:
        result = await service.log_weight(weight_kg, logged_at=logged_at)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    echo_success(f"Logged {result.measurement.weight_kg:g} kg (id {result.measurement.id})")
    for goal in result.achieved_goals:
        click.echo(
            click.style("  Goal reached! ", fg="green", bold=True)
            + f"{goal.target_weight_kg:g} kg (due {goal.deadline.isoformat()})"
        )


@click.command()
@click.option("--limit", "-n", default=20, show_default=True, help="Number of entries to show")
@click.pass_context
@async_command
async def history(ctx: click.Context, limit: int):
    """List recent measurements, newest first."""
    ensure_initialized(ctx)

    measurements = await MeasurementRepository().list_recent(limit=limit)
    if not measurements:
        echo_info("No measurements yet. Log one with 'progress-pals log <kg>'.")
        return

    rows = [
        [
            str(m.id),
            f"{m.weight_kg:g} kg",
            m.created_at.strftime("%Y-%m-%d %H:%M") if m.created_at else "",
        ]
        for m in measurements
    ]
    click.echo(format_table(["ID", "Weight", "Logged"], rows))


@click.command()
@click.argument("measurement_id", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete(ctx: click.Context, measurement_id: int, yes: bool):
    """Delete a measurement by ID."""
    ensure_initialized(ctx)

    repo = MeasurementRepository()
    measurement = await repo.get(measurement_id)
    if measurement is None:
        echo_error(f"Measurement {measurement_id} not found.")
        ctx.exit(1)

    if not yes and not click.confirm(f"Delete {measurement.weight_kg:g} kg entry?"):
        return

    await WeightLogService().delete_measurement(measurement_id)
    echo_success(f"Deleted measurement {measurement_id}")
