"""Onboarding (profile) routes."""

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ...db.repositories import ProfileRepository
from ...models.profile import Gender
from ...services.profile import build_profile, save_profile
from ...services.validation import ValidationError
from ..deps import get_db_path, get_templates

router = APIRouter(prefix="/onboarding", tags=["onboarding"])


def _render(request: Request, form: dict, error: str | None = None, status_code: int = 200):
    return get_templates(request).TemplateResponse(
        request,
        "onboarding.html",
        {
            "form": form,
            "error": error,
            "genders": [g.value for g in Gender],
        },
        status_code=status_code,
    )


@router.get("", response_class=HTMLResponse)
async def onboarding_page(request: Request):
    """Profile form, pre-filled when a profile exists."""
    profile = await ProfileRepository(get_db_path(request)).get_latest()
    form = {"height_cm": "", "target_weight_kg": "", "birthdate": "", "gender": ""}
    if profile:
        form = {
            "height_cm": f"{profile.height_cm:g}",
            "target_weight_kg": (
                f"{profile.target_weight_kg:g}" if profile.target_weight_kg is not None else ""
            ),
            "birthdate": profile.birthdate.isoformat() if profile.birthdate else "",
            "gender": profile.gender.value,
        }
    return _render(request, form)


@router.post("")
async def submit_onboarding(
    request: Request,
    height_cm: str = Form(""),
    target_weight_kg: str = Form(""),
    birthdate: str = Form(""),
    gender: str = Form(""),
):
    """Create or update the profile."""
    form = {
        "height_cm": height_cm,
        "target_weight_kg": target_weight_kg,
        "birthdate": birthdate,
        "gender": gender,
    }
    try:
        profile = build_profile(height_cm, target_weight_kg, birthdate, gender)
    except ValidationError as e:
        return _render(request, form, error=str(e), status_code=400)

    await save_profile(profile, get_db_path(request))
    return RedirectResponse(url="/", status_code=302)
