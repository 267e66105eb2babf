"""Supabase-backed food catalog."""

import json
from dataclasses import dataclass

from supabase import Client

from meal_planner.domain.foods import CORE_NUTRIENTS, Food, NutritionPer100
from meal_planner.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Reads foods from the ``foods`` table."""

    client: Client

    def get_foods(self, food_ids: list[str]) -> list[Food]:
        """Return the foods that exist for the given ids."""
        if not food_ids:
            return []
        response = (
            self.client.table("foods").select("*").in_("id", list(food_ids)).execute()
        )
        return [_parse_food(row) for row in response.data or []]


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row; flat macro columns back up a missing nutrition JSON."""
    if not row.get("id"):
        raise RuntimeError("Food row without an id")
    raw_nutrition = row.get("nutrition_per_100")
    if isinstance(raw_nutrition, str):
        try:
            raw_nutrition = json.loads(raw_nutrition)
        except json.JSONDecodeError:
            raw_nutrition = None
    if not isinstance(raw_nutrition, dict):
        raw_nutrition = {key: row.get(key) for key in CORE_NUTRIENTS}
    name = str(row.get("name") or "")
    return Food(
        id=str(row["id"]),
        name=name,
        base_name=str(row.get("base_name") or name),
        nutrition_per_100=NutritionPer100.from_raw(raw_nutrition),
        kurdish_name=row.get("kurdish_name"),
        arabic_name=row.get("arabic_name"),
        category=row.get("category"),
    )
