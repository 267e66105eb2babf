"""Split a daily goal into per-meal targets."""

from meal_planner.domain.plans import DailyTargets, MealTarget
from meal_planner.services.rounding import round_half_up

PROTEIN_CALORIE_SHARE = 0.25
CALORIES_PER_GRAM_PROTEIN = 4

# (calorie share, protein share) per slot
SLOT_SHARES = {
    "breakfast": (0.25, 0.20),
    "lunch": (0.40, 0.40),
    "dinner": (0.35, 0.40),
}


def default_protein_target(calories: float) -> float:
    """Protein grams covering a quarter of the calories."""
    return round_half_up(calories * PROTEIN_CALORIE_SHARE / CALORIES_PER_GRAM_PROTEIN)


def decompose_targets(calories: float, protein: float | None = None) -> DailyTargets:
    """Return the daily targets with breakfast, lunch and dinner sub-targets.

    Callers must pass a positive calorie goal; it is not validated here.
    """
    daily_protein = protein if protein else default_protein_target(calories)
    slots = {
        slot: MealTarget(
            calories=round_half_up(calories * calorie_share),
            protein=round_half_up(daily_protein * protein_share),
        )
        for slot, (calorie_share, protein_share) in SLOT_SHARES.items()
    }
    return DailyTargets(
        calories=calories,
        protein=daily_protein,
        breakfast=slots["breakfast"],
        lunch=slots["lunch"],
        dinner=slots["dinner"],
    )
