"""Profile commands."""

import click
import questionary
from questionary import Style

from ..db.repositories import ProfileRepository
from ..models.profile import Gender, Profile
from ..services.profile import build_profile, save_profile
from ..services.validation import (
    ValidationError,
    validate_birthdate,
    validate_height,
    validate_weight,
)
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized

custom_style = Style(
    [
        ("qmark", "fg:#7c3aed bold"),
        ("question", "bold"),
        ("answer", "fg:#f97316 bold"),
        ("pointer", "fg:#7c3aed bold"),
        ("highlighted", "fg:#7c3aed bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _validator(check):
    """Adapt a validation function to questionary's True-or-message protocol."""

    def validate(value: str):
        try:
            check(value)
        except ValidationError as e:
            return str(e)
        return True

    return validate


def _optional(check):
    return lambda value: None if value.strip() == "" else check(value)


def _profile_defaults(current: Profile | None) -> dict:
    """Saved profile values in the same shape as the command options."""
    if current is None:
        return {}
    return {
        "height_cm": current.height_cm,
        "target_weight_kg": current.target_weight_kg,
        "birthdate": current.birthdate.isoformat() if current.birthdate else None,
        "gender": current.gender.value,
    }


def _as_text(value) -> str:
    if value is None:
        return ""
    return f"{value:g}" if isinstance(value, float | int) else str(value)


async def prompt_profile_fields(supplied: dict, defaults: dict) -> dict:
    """Ask for any profile field not supplied on the command line.

    Saved values are offered as the prompt defaults.
    """
    answers = dict(supplied)

    if answers.get("height_cm") is None:
        answers["height_cm"] = await questionary.text(
            "Height (cm)?",
            default=_as_text(defaults.get("height_cm")),
            validate=_validator(validate_height),
            style=custom_style,
        ).ask_async()

    if answers.get("target_weight_kg") is None:
        answers["target_weight_kg"] = await questionary.text(
            "Long-term target weight in kg (leave empty to skip)?",
            default=_as_text(defaults.get("target_weight_kg")),
            validate=_validator(_optional(lambda v: validate_weight(v, "Target weight"))),
            style=custom_style,
        ).ask_async()

    if answers.get("birthdate") is None:
        answers["birthdate"] = await questionary.text(
            "Birthdate (YYYY-MM-DD, leave empty to skip)?",
            default=_as_text(defaults.get("birthdate")),
            validate=_validator(validate_birthdate),
            style=custom_style,
        ).ask_async()

    if answers.get("gender") is None:
        answers["gender"] = await questionary.select(
            "Gender?",
            choices=[
                questionary.Choice("Male", Gender.MALE.value),
                questionary.Choice("Female", Gender.FEMALE.value),
                questionary.Choice("Other", Gender.OTHER.value),
                questionary.Choice("Prefer not to say", Gender.PREFER_NOT_TO_SAY.value),
            ],
            default=defaults.get("gender", Gender.PREFER_NOT_TO_SAY.value),
            style=custom_style,
        ).ask_async()

    return answers


@click.group()
def profile():
    """View or edit your body profile."""
    pass


@profile.command("show")
@click.pass_context
@async_command
async def show(ctx: click.Context):
    """Show the current profile."""
    ensure_initialized(ctx)

    current = await ProfileRepository().get_latest()
    if current is None:
        echo_info("No profile yet. Run 'progress-pals profile set' to create one.")
        return

    click.echo()
    click.echo(click.style("Profile", bold=True))
    click.echo("=" * 30)
    click.echo(current.get_summary().rstrip())


@profile.command("set")
@click.option("--height", "height_cm", type=float, help="Height in cm (50-300)")
@click.option("--target", "target_weight_kg", type=float, help="Long-term target weight in kg")
@click.option("--birthdate", help="Birthdate as YYYY-MM-DD")
@click.option(
    "--gender",
    type=click.Choice([g.value for g in Gender]),
    help="Gender",
)
@click.option("--no-input", is_flag=True, help="Never prompt; keep saved values for options not given")
@click.pass_context
@async_command
async def set_profile(
    ctx: click.Context,
    height_cm: float | None,
    target_weight_kg: float | None,
    birthdate: str | None,
    gender: str | None,
    no_input: bool,
):
    """Create or update the profile.

    Options not given are asked for interactively, defaulting to the saved
    profile. With --no-input the saved values are kept as they are.

    Examples:

        progress-pals profile set --height 170 --target 68
    """
    ensure_initialized(ctx)

    supplied = {
        "height_cm": height_cm,
        "target_weight_kg": target_weight_kg,
        "birthdate": birthdate,
        "gender": gender,
    }
    defaults = _profile_defaults(await ProfileRepository().get_latest())
    if no_input:
        fields = {
            key: defaults.get(key) if value is None else value
            for key, value in supplied.items()
        }
    else:
        fields = await prompt_profile_fields(supplied, defaults)

    try:
        new_profile = build_profile(**fields)
    except ValidationError as e:
        echo_error(str(e))
        ctx.exit(1)

    saved = await save_profile(new_profile)
    echo_success("Profile saved")
    click.echo(saved.get_summary().rstrip())
