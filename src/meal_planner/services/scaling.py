"""Bounded post-hoc scaling of fallback meals."""

from dataclasses import replace

from meal_planner.domain.plans import MealResult, MealTarget, PortionChoice
from meal_planner.services.rounding import round_half_up

POOR_SCORE_THRESHOLD = 50.0
MIN_SCALE_FACTOR = 0.8
MAX_SCALE_FACTOR = 1.3


def implied_scale_factor(result: MealResult, target: MealTarget) -> float | None:
    """Return target / achieved calories, or None when nothing was achieved."""
    if result.calories <= 0:
        return None
    return target.calories / result.calories


def needs_scaling(result: MealResult) -> bool:
    """Only poor fallback results are candidates for scaling."""
    return result.from_fallback and result.score > POOR_SCORE_THRESHOLD


def apply_scaling(result: MealResult, target: MealTarget) -> MealResult:
    """Scale every portion of a poor fallback result by one bounded factor.

    The implied factor must lie within [0.8, 1.3]; otherwise the result is
    returned unscaled. Achieved nutrition is multiplied by the factor rather
    than recomputed from the rounded grams.
    """
    if not needs_scaling(result):
        return result
    implied = implied_scale_factor(result, target)
    if implied is None or not MIN_SCALE_FACTOR <= implied <= MAX_SCALE_FACTOR:
        return result
    factor = min(implied, MAX_SCALE_FACTOR)
    portions = tuple(
        PortionChoice(
            food_id=choice.food_id, grams=round_half_up(choice.grams * factor)
        )
        for choice in result.portions
    )
    return replace(
        result,
        portions=portions,
        calories=result.calories * factor,
        protein=result.protein * factor,
        scale_factor=factor,
    )
