from __future__ import annotations

import math

from .models import ActivityLevel
from .units import MassUnit, to_kg

ACTIVITY_CHOICES: dict[int, ActivityLevel] = {
    1: ActivityLevel.LOW,
    2: ActivityLevel.MODERATE,
    3: ActivityLevel.HIGH,
}


class InputError(ValueError):
    """Raw user input that cannot become a validated value."""


def _parse_float(text: str, message: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise InputError(message) from None
    if not math.isfinite(value):
        raise InputError(message)
    return value


def parse_unit(text: str) -> MassUnit:
    try:
        return MassUnit(text.strip().lower())
    except ValueError:
        raise InputError("Invalid unit. Please use 'kg' or 'lbs'.") from None


def parse_weight(text: str) -> float:
    """Parse ``"30 kg"`` or ``"66 lbs"`` into kilograms."""
    parts = text.strip().lower().split()
    if len(parts) != 2:
        raise InputError("Invalid input format. Please try again.")
    value = _parse_float(parts[0], "Invalid number format. Please enter a valid number for weight.")
    unit = parse_unit(parts[1])
    if value <= 0:
        raise InputError("Weight must be a positive number.")
    return to_kg(value, unit)


def parse_activity_choice(text: str) -> ActivityLevel:
    try:
        choice = int(text.strip())
    except ValueError:
        raise InputError("Invalid input. Please enter a number.") from None
    if choice not in ACTIVITY_CHOICES:
        raise InputError("Invalid choice. Please enter 1, 2, or 3.")
    return ACTIVITY_CHOICES[choice]


def parse_positive_amount(text: str, label: str = "Amount") -> float:
    value = _parse_float(text.strip(), "Invalid input. Please enter a valid number.")
    if value <= 0:
        raise InputError(f"{label} must be a positive number.")
    return value
