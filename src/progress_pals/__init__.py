"""progress-pals: personal weight tracking with BMI, trends and goals."""

__version__ = "0.1.0"
