"""Goal form routes."""

from urllib.parse import urlencode

from fastapi import APIRouter, Form, Request
from fastapi.responses import RedirectResponse

from ...services.goals import GoalService
from ...services.validation import ValidationError
from ..deps import get_db_path

router = APIRouter(prefix="/goals", tags=["goals"])


@router.post("")
async def add_goal(
    request: Request,
    target_weight_kg: str = Form(""),
    deadline: str = Form(""),
):
    """Add a short-term goal; the deadline defaults to two months out."""
    service = GoalService(get_db_path(request))
    try:
        await service.add_goal(target_weight_kg, deadline or None)
    except ValidationError as e:
        return RedirectResponse(url="/?" + urlencode({"error": str(e)}), status_code=302)
    return RedirectResponse(url="/", status_code=302)


@router.post("/{goal_id}/delete")
async def delete_goal(request: Request, goal_id: int):
    """Delete a goal."""
    await GoalService(get_db_path(request)).delete_goal(goal_id)
    return RedirectResponse(url="/", status_code=302)
