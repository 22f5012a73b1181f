"""JSON API for dashboard data and mutations."""

from datetime import date, datetime

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel

from ...analytics.chart import ChartOptions
from ...services.dashboard import DashboardService
from ...services.goals import GoalService
from ...services.validation import ValidationError
from ...services.weight_log import WeightLogService
from ..deps import chart_options_from_query, get_db_path

router = APIRouter(prefix="/api", tags=["api"])


class MeasurementIn(BaseModel):
    weight_kg: float


class GoalIn(BaseModel):
    target_weight_kg: float
    deadline: date | None = None


@router.get("/dashboard")
async def get_dashboard(
    request: Request,
    options: ChartOptions = Depends(chart_options_from_query),
):
    """Derived dashboard statistics for the current data."""
    service = DashboardService(get_db_path(request))
    stats = await service.load(now=datetime.now(), options=options)
    if stats is None:
        raise HTTPException(status_code=404, detail="No profile found. Complete onboarding first.")
    return stats.to_dict()


@router.post("/measurements", status_code=201)
async def create_measurement(request: Request, body: MeasurementIn):
    """Log a weight; reports goals that became achieved."""
    service = WeightLogService(get_db_path(request))
    try:
        result = await service.log_weight(body.weight_kg)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {
        "measurement": result.measurement.to_dict(),
        "achieved_goal_ids": [g.id for g in result.achieved_goals],
    }


@router.delete("/measurements/{measurement_id}")
async def remove_measurement(request: Request, measurement_id: int):
    service = WeightLogService(get_db_path(request))
    if not await service.delete_measurement(measurement_id):
        raise HTTPException(status_code=404, detail="Measurement not found")
    return {"status": "deleted"}


@router.post("/goals", status_code=201)
async def create_goal(request: Request, body: GoalIn):
    """Add a goal (default deadline two months out)."""
    service = GoalService(get_db_path(request))
    try:
        goal = await service.add_goal(body.target_weight_kg, body.deadline)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"id": goal.id, **goal.to_dict()}


@router.delete("/goals/{goal_id}")
async def remove_goal(request: Request, goal_id: int):
    if not await GoalService(get_db_path(request)).delete_goal(goal_id):
        raise HTTPException(status_code=404, detail="Goal not found")
    return {"status": "deleted"}
