"""Assemble per-slot results into a generated meal plan."""

from collections.abc import Callable, Mapping
from datetime import UTC, datetime
from uuid import UUID, uuid4

from meal_planner.domain.foods import Food
from meal_planner.domain.plans import (
    DailyTargets,
    GeneratedMealPlan,
    MealResult,
    PlanAccuracy,
    PlanLineItem,
)
from meal_planner.domain.templates import MEAL_SLOTS, SNACKS
from meal_planner.services.rounding import percent_of, round_half_up


def build_line_items(
    result: MealResult | None, foods: Mapping[str, Food]
) -> list[PlanLineItem]:
    """Convert a meal result into display line items.

    Foods missing from the lookup are left out of the meal.
    """
    if result is None:
        return []
    items: list[PlanLineItem] = []
    for choice in result.portions:
        food = foods.get(choice.food_id)
        if food is None:
            continue
        nutrition = food.nutrition_per_100
        items.append(
            PlanLineItem(
                food_id=food.id,
                name=food.name or "Unknown Food",
                kurdish_name=food.kurdish_name,
                arabic_name=food.arabic_name,
                grams=choice.grams,
                display_portion=f"{choice.grams:g}g",
                calories=round_half_up(nutrition.calories * choice.grams / 100),
                protein=round_half_up(nutrition.protein * choice.grams / 100, 1),
                carbs=round_half_up(nutrition.carbs * choice.grams / 100, 1),
                fat=round_half_up(nutrition.fat * choice.grams / 100, 1),
            )
        )
    return items


def plan_name(generated_at: datetime, plan_id: UUID) -> str:
    """Name carrying the generation time; the id suffix keeps names unique."""
    return f"Meal Plan {generated_at:%Y-%m-%d %H:%M:%S} #{plan_id.hex[:8]}"


def assemble_plan(
    results: Mapping[str, MealResult | None],
    targets: DailyTargets,
    foods: Mapping[str, Food],
    *,
    clock: Callable[[], datetime] | None = None,
    id_factory: Callable[[], UUID] = uuid4,
) -> GeneratedMealPlan:
    """Build the caller-facing plan with totals and accuracy."""
    meals = {slot: build_line_items(results.get(slot), foods) for slot in MEAL_SLOTS}
    meals[SNACKS] = []

    items = [item for slot_items in meals.values() for item in slot_items]
    calories = sum(item.calories for item in items)
    protein = sum(item.protein for item in items)
    carbs = sum(item.carbs for item in items)
    fat = sum(item.fat for item in items)

    generated_at = clock() if clock else datetime.now(tz=UTC)
    plan_id = id_factory()
    return GeneratedMealPlan(
        id=plan_id,
        name=plan_name(generated_at, plan_id),
        generated_at=generated_at,
        meals=meals,
        total_calories=round_half_up(calories),
        total_protein=round_half_up(protein),
        total_carbs=round_half_up(carbs),
        total_fat=round_half_up(fat),
        accuracy=PlanAccuracy(
            calories=percent_of(calories, targets.calories),
            protein=percent_of(protein, targets.protein),
        ),
        targets=targets,
    )
