"""Supabase-backed meal template catalog."""

from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.foods import safe_number
from meal_planner.domain.templates import FoodSlot, MealTemplate
from meal_planner.services.templates import TemplateRepository


@dataclass
class SupabaseTemplateRepository(TemplateRepository):
    """Reads templates from the ``meal_templates`` table."""

    client: Client

    def list_templates(
        self, meal_slot: str, dietary_tags: list[str]
    ) -> list[MealTemplate]:
        """Return templates for a slot carrying all of the given tags."""
        query = (
            self.client.table("meal_templates")
            .select("*")
            .contains("meal_types", [meal_slot])
        )
        if dietary_tags:
            query = query.contains("tags", list(dietary_tags))
        response = query.execute()
        return [_parse_template(row) for row in response.data or []]


def _parse_template(row: dict[str, object]) -> MealTemplate:
    """Parse a template row into a domain model."""
    if not row.get("id"):
        raise RuntimeError("Meal template row without an id")
    prep_time = row.get("prep_time")
    if not isinstance(prep_time, int | float):
        prep_time = None
    return MealTemplate(
        id=str(row["id"]),
        name=str(row.get("name") or ""),
        meal_slots=frozenset(row.get("meal_types") or []),
        food_slots=tuple(_parse_food_slot(item) for item in row.get("foods") or []),
        tags=frozenset(row.get("tags") or []),
        description=row.get("description"),
        difficulty=row.get("difficulty"),
        prep_time_minutes=int(prep_time) if prep_time is not None else None,
    )


def _parse_food_slot(item: dict[str, object]) -> FoodSlot:
    portions = [safe_number(value) for value in item.get("allowed_portions") or []]
    return FoodSlot(
        food_id=str(item.get("food_id") or ""),
        allowed_portions=tuple(grams for grams in portions if grams > 0),
    )
