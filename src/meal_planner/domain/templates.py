"""Meal template domain models."""

from dataclasses import dataclass, field

BREAKFAST = "breakfast"
LUNCH = "lunch"
DINNER = "dinner"
SNACKS = "snacks"

MEAL_SLOTS = (BREAKFAST, LUNCH, DINNER)


@dataclass(frozen=True)
class FoodSlot:
    """One ingredient position in a template with its discrete portions."""

    food_id: str
    allowed_portions: tuple[float, ...]


@dataclass(frozen=True)
class MealTemplate:
    """Reusable recipe skeleton with parameterized portions."""

    id: str
    name: str
    meal_slots: frozenset[str]
    food_slots: tuple[FoodSlot, ...]
    tags: frozenset[str] = field(default_factory=frozenset)
    description: str | None = None
    difficulty: str | None = None
    prep_time_minutes: int | None = None

    @property
    def is_valid(self) -> bool:
        """Templates without food slots cannot produce a meal."""
        return len(self.food_slots) > 0

    @property
    def food_ids(self) -> list[str]:
        return [slot.food_id for slot in self.food_slots]
