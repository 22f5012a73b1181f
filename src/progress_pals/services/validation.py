"""Input validation for values entering the system.

Analytics code assumes these checks have already passed.
"""

from datetime import date

from ..models.profile import Gender

WEIGHT_MIN_KG = 20
WEIGHT_MAX_KG = 300
HEIGHT_MIN_CM = 50
HEIGHT_MAX_CM = 300


class ValidationError(ValueError):
    """Raised when user input is outside the accepted range."""


def _parse_number(value: str | float | int | None, label: str) -> float:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{label} is required")
    try:
        number = float(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{label} must be a number") from e
    if number != number:  # NaN
        raise ValidationError(f"{label} must be a number")
    return number


def validate_weight(value: str | float | int | None, label: str = "Weight") -> float:
    """Parse a weight in kg, which must be between 20 and 300."""
    weight = _parse_number(value, label)
    if weight < WEIGHT_MIN_KG or weight > WEIGHT_MAX_KG:
        raise ValidationError(
            f"{label} must be between {WEIGHT_MIN_KG} and {WEIGHT_MAX_KG} kg"
        )
    return weight


def validate_height(value: str | float | int | None) -> float:
    """Parse a height in cm, which must be between 50 and 300."""
    height = _parse_number(value, "Height")
    if height < HEIGHT_MIN_CM or height > HEIGHT_MAX_CM:
        raise ValidationError(
            f"Height must be between {HEIGHT_MIN_CM} and {HEIGHT_MAX_CM} cm"
        )
    return height


def validate_birthdate(value: str | date | None, today: date | None = None) -> date | None:
    """Parse an ISO birthdate; empty input means not provided."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError("Birthdate must be a date (YYYY-MM-DD)") from e
    if value > (today or date.today()):
        raise ValidationError("Birthdate cannot be in the future")
    return value


def validate_gender(value: str | None) -> Gender:
    """Map a form value to Gender; empty input means prefer not to say."""
    if not value:
        return Gender.PREFER_NOT_TO_SAY
    try:
        return Gender(value)
    except ValueError as e:
        choices = ", ".join(g.value for g in Gender)
        raise ValidationError(f"Gender must be one of: {choices}") from e


def validate_deadline(value: str | date | None, today: date) -> date | None:
    """Parse a goal deadline; empty input means use the default."""
    if value is None or value == "":
        return None
    if isinstance(value, str):
        try:
            value = date.fromisoformat(value.strip())
        except ValueError as e:
            raise ValidationError("Deadline must be a date (YYYY-MM-DD)") from e
    if value < today:
        raise ValidationError("Deadline cannot be in the past")
    return value
