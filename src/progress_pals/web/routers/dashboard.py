"""Dashboard page."""

from datetime import datetime
from urllib.parse import urlencode

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...analytics.chart import ChartOptions
from ...services.dashboard import DashboardService
from ..chart_layout import ChartLayout
from ..deps import chart_options_from_query, chart_query, get_db_path, get_templates

router = APIRouter(tags=["dashboard"])

HISTORY_PAGE_SIZE = 4


@router.get("/", response_class=HTMLResponse)
async def dashboard_page(
    request: Request,
    options: ChartOptions = Depends(chart_options_from_query),
    history: int = HISTORY_PAGE_SIZE,
    error: str | None = None,
    achieved: int = 0,
):
    """Stats, chart, goals and measurement history."""
    templates = get_templates(request)

    service = DashboardService(get_db_path(request))
    stats = await service.load(now=datetime.now(), options=options)
    if stats is None:
        return RedirectResponse(url="/onboarding", status_code=302)

    history = max(history, HISTORY_PAGE_SIZE)
    visible = stats.measurements[:history]
    remaining = max(len(stats.measurements) - history, 0)
    load_more_url = "/?" + urlencode(
        {**chart_query(options), "history": history + HISTORY_PAGE_SIZE}
    )

    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "stats": stats,
            "options": options,
            "layout": ChartLayout(stats.y_axis, len(stats.chart_points)),
            "history_count": history,
            "load_more_url": load_more_url,
            "visible_measurements": visible,
            "remaining": remaining,
            "error": error,
            "achieved": achieved,
        },
    )
