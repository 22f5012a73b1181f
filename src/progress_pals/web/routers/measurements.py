"""Measurement form routes."""

from urllib.parse import urlencode

from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse

from ...services.validation import ValidationError
from ...services.weight_log import WeightLogService
from ..deps import get_db_path

router = APIRouter(prefix="/measurements", tags=["measurements"])


@router.post("")
async def add_measurement(request: Request, weight_kg: str = Form("")):
    """Log a weight and return to the dashboard."""
    service = WeightLogService(get_db_path(request))
    try:
        result = await service.log_weight(weight_kg)
    except ValidationError as e:
        return RedirectResponse(url="/?" + urlencode({"error": str(e)}), status_code=302)

    query = {"achieved": len(result.achieved_goals)} if result.achieved_goals else {}
    url = "/?" + urlencode(query) if query else "/"
    return RedirectResponse(url=url, status_code=302)


@router.post("/{measurement_id}/delete")
async def delete_measurement(request: Request, measurement_id: int):
    """Delete a measurement."""
    service = WeightLogService(get_db_path(request))
    await service.delete_measurement(measurement_id)
    return RedirectResponse(url="/", status_code=302)
