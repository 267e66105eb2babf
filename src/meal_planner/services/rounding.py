"""Rounding helpers shared by the planner."""

import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """Round halves away from zero for positive values, like nutrition labels."""
    if math.isnan(value) or math.isinf(value):
        return 0.0
    multiplier = 10**decimals
    return math.floor(value * multiplier + 0.5) / multiplier


def percent_of(achieved: float, target: float) -> float:
    """Return achieved as a percentage of target, zero for empty targets."""
    if target <= 0:
        return 0.0
    return achieved / target * 100
