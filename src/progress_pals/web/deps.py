"""Request helpers shared by the routers."""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..analytics.chart import ChartOptions


def get_templates(request: Request) -> Jinja2Templates:
    """Get templates from app state."""
    return request.app.state.templates


def get_db_path(request: Request) -> Path:
    """Database path configured for this app instance."""
    return request.app.state.db_path


def chart_options_from_query(
    zones: bool = False,
    goal_line: bool = False,
    short_goal: bool = False,
    full: bool = False,
) -> ChartOptions:
    """Dependency mapping chart toggle query flags to ChartOptions."""
    return ChartOptions(
        show_bmi_zones=zones,
        show_goal_line=goal_line,
        show_short_term_goal=short_goal,
        show_full_history=full,
    )


def chart_query(options: ChartOptions) -> dict[str, str]:
    """Query flags that reproduce ``options`` on a dashboard URL."""
    flags = {
        "zones": options.show_bmi_zones,
        "goal_line": options.show_goal_line,
        "short_goal": options.show_short_term_goal,
        "full": options.show_full_history,
    }
    return {name: "true" for name, enabled in flags.items() if enabled}
