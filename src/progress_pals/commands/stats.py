"""Statistics summary command."""

from datetime import datetime

import click

from ..analytics.chart import ChartOptions
from ..services.dashboard import DashboardService
from .base import async_command, echo_info, echo_warning, ensure_initialized, format_kg


@click.command()
@click.option("--zones", is_flag=True, help="Show BMI zone weights for your height")
@click.pass_context
@async_command
async def stats(ctx: click.Context, zones: bool):
    """Show BMI, 7-day trend and average, and goal pace."""
    ensure_initialized(ctx)

    service = DashboardService()
    dashboard = await service.load(
        now=datetime.now(),
        options=ChartOptions(show_bmi_zones=zones),
        with_quote=False,
    )
    if dashboard is None:
        echo_info("No profile yet. Run 'progress-pals profile set' first.")
        return

    click.echo()
    click.echo(click.style("Current", bold=True))
    click.echo(f"  Weight:  {format_kg(dashboard.latest_weight_kg)}")
    if dashboard.current_bmi is not None:
        click.echo(f"  BMI:     {dashboard.current_bmi:.1f} ({dashboard.bmi_category.value})")
    else:
        click.echo("  BMI:     N/A")

    click.echo()
    click.echo(click.style("Last 7 days", bold=True))
    trend = dashboard.trend_kg
    sign = "+" if trend is not None and trend > 0 else ""
    click.echo(f"  Trend:   {sign}{format_kg(trend)}")
    click.echo(f"  Average: {format_kg(dashboard.rolling_average_kg)}")

    if zones:
        z = dashboard.zones
        click.echo()
        click.echo(click.style("BMI zones", bold=True))
        click.echo(f"  Underweight below {z.underweight:.1f} kg")
        click.echo(f"  Healthy           {z.underweight:.1f}-{z.healthy:.1f} kg")
        click.echo(f"  Overweight        {z.healthy:.1f}-{z.overweight:.1f} kg")
        click.echo(f"  Obese from        {z.overweight:.1f} kg")

    if dashboard.goal_paces:
        click.echo()
        click.echo(click.style("Goals", bold=True))
        for pace in dashboard.goal_paces:
            label = f"  {pace.goal.target_weight_kg:g} kg by {pace.goal.deadline.isoformat()}"
            if pace.is_achieved:
                click.echo(label + click.style("  [achieved]", fg="green"))
                continue
            click.echo(
                f"{label}  {pace.days_remaining} days left, "
                f"{pace.kg_per_week:.2f} kg/week needed"
            )
            if pace.warning:
                echo_warning(pace.warning)
