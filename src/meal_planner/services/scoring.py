"""Nutrition evaluation and scoring of portion combinations."""

from collections.abc import Mapping

from meal_planner.domain.foods import Food
from meal_planner.domain.plans import FoodCombination, MealTarget, ScoredCombination
from meal_planner.services.rounding import percent_of

PROTEIN_ERROR_WEIGHT = 2


def combination_nutrition(
    combination: FoodCombination, foods: Mapping[str, Food]
) -> tuple[float, float] | None:
    """Return achieved (calories, protein), or None if a food is unknown."""
    calories = 0.0
    protein = 0.0
    for choice in combination:
        food = foods.get(choice.food_id)
        if food is None:
            return None
        calories += food.nutrition_per_100.calories * choice.grams / 100
        protein += food.nutrition_per_100.protein * choice.grams / 100
    return calories, protein


def score_nutrition(target: MealTarget, calories: float, protein: float) -> float:
    """Weighted absolute deviation from the target; lower is better."""
    calorie_error = abs(target.calories - calories)
    protein_error = abs(target.protein - protein)
    return calorie_error + protein_error * PROTEIN_ERROR_WEIGHT


def evaluate_combination(
    template_id: str,
    combination: FoodCombination,
    target: MealTarget,
    foods: Mapping[str, Food],
) -> ScoredCombination | None:
    """Score a combination against a meal target.

    Returns None when any food in the combination cannot be resolved.
    """
    nutrition = combination_nutrition(combination, foods)
    if nutrition is None:
        return None
    calories, protein = nutrition
    return ScoredCombination(
        template_id=template_id,
        portions=combination,
        calories=calories,
        protein=protein,
        score=score_nutrition(target, calories, protein),
        calorie_accuracy=percent_of(calories, target.calories),
        protein_accuracy=percent_of(protein, target.protein),
    )


def protein_density(combination: FoodCombination, foods: Mapping[str, Food]) -> float:
    """Protein grams per 100 kcal for a combination, skipping unknown foods."""
    calories = 0.0
    protein = 0.0
    for choice in combination:
        food = foods.get(choice.food_id)
        if food is None:
            continue
        calories += food.nutrition_per_100.calories * choice.grams / 100
        protein += food.nutrition_per_100.protein * choice.grams / 100
    if calories <= 0:
        return 0.0
    return protein / calories * 100
