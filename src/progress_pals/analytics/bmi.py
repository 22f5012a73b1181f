"""Body Mass Index calculations."""

from dataclasses import dataclass
from enum import Enum

# Category thresholds (kg/m^2). A value equal to a threshold belongs to the
# category above it.
UNDERWEIGHT_BELOW = 18.5
OVERWEIGHT_FROM = 25.0
OBESE_FROM = 30.0


class BMICategory(str, Enum):
    """WHO adult BMI categories."""

    UNDERWEIGHT = "Underweight"
    HEALTHY = "Healthy"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


@dataclass(frozen=True)
class BMIZones:
    """Body weights (kg) at which BMI crosses each threshold for one height."""

    underweight: float  # BMI 18.5
    healthy: float  # BMI 25
    overweight: float  # BMI 30

    def to_dict(self) -> dict:
        return {
            "underweight": self.underweight,
            "healthy": self.healthy,
            "overweight": self.overweight,
        }


def calculate_bmi(weight_kg: float, height_cm: float) -> float:
    """Calculate BMI from weight in kilograms and height in centimeters."""
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def get_bmi_category(bmi: float) -> BMICategory:
    """Classify a BMI value."""
    if bmi < UNDERWEIGHT_BELOW:
        return BMICategory.UNDERWEIGHT
    if bmi < OVERWEIGHT_FROM:
        return BMICategory.HEALTHY
    if bmi < OBESE_FROM:
        return BMICategory.OVERWEIGHT
    return BMICategory.OBESE


def get_bmi_zone_boundaries(height_cm: float) -> BMIZones:
    """Return the weight at each BMI threshold for a given height.

    Inverts the BMI formula, so ``calculate_bmi(zones.healthy, height_cm)``
    gives back 25.
    """
    height_m = height_cm / 100
    h2 = height_m * height_m
    return BMIZones(
        underweight=UNDERWEIGHT_BELOW * h2,
        healthy=OVERWEIGHT_FROM * h2,
        overweight=OBESE_FROM * h2,
    )
