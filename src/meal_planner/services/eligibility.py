"""Template eligibility rules for a meal slot."""

from collections.abc import Collection, Iterable, Mapping

from meal_planner.domain.foods import Food
from meal_planner.domain.templates import MealTemplate


def filter_eligible_templates(
    templates: Iterable[MealTemplate],
    meal_slot: str,
    dietary_tags: Collection[str],
    excluded_base_names: Collection[str],
    foods: Mapping[str, Food],
) -> list[MealTemplate]:
    """Return templates usable for the slot under the active constraints."""
    required_tags = set(dietary_tags)
    excluded = set(excluded_base_names)
    return [
        template
        for template in templates
        if template.is_valid
        and meal_slot in template.meal_slots
        and required_tags <= template.tags
        and not contains_excluded_food(template, excluded, foods)
    ]


def contains_excluded_food(
    template: MealTemplate, excluded: Collection[str], foods: Mapping[str, Food]
) -> bool:
    """Check whether any resolved food of the template is excluded.

    Foods missing from the lookup are not treated as excluded.
    """
    if not excluded:
        return False
    for food_id in template.food_ids:
        food = foods.get(food_id)
        if food is not None and food.base_name in excluded:
            return True
    return False
