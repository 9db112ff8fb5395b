"""Common types and helpers shared across models."""

import math
from enum import StrEnum


class TemperatureUnit(StrEnum):
    CELSIUS = "C"
    FAHRENHEIT = "F"


def js_round(value: float) -> int:
    """Round half up toward +inf, like JavaScript's Math.round.

    Python's round() uses banker's rounding, which would turn 22.5 into 22.
    """
    return math.floor(value + 0.5)
