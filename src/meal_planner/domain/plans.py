"""Domain models for generated meal plans."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealTarget:
    """Calorie and protein goal for a single meal slot."""

    calories: float
    protein: float


@dataclass(frozen=True)
class DailyTargets:
    """Overall daily goal split into per-slot targets."""

    calories: float
    protein: float
    breakfast: MealTarget
    lunch: MealTarget
    dinner: MealTarget

    def for_slot(self, meal_slot: str) -> MealTarget:
        """Return the target for a meal slot name."""
        return getattr(self, meal_slot)


@dataclass(frozen=True)
class PortionChoice:
    """A food with the grams picked for it."""

    food_id: str
    grams: float


FoodCombination = tuple[PortionChoice, ...]


@dataclass(frozen=True)
class ScoredCombination:
    """A valid combination with its achieved nutrition and score."""

    template_id: str
    portions: FoodCombination
    calories: float
    protein: float
    score: float
    calorie_accuracy: float
    protein_accuracy: float


@dataclass(frozen=True)
class MealResult:
    """Chosen combination for one meal slot."""

    template_id: str
    portions: FoodCombination
    calories: float
    protein: float
    score: float
    from_fallback: bool = False
    scale_factor: float = 1.0


@dataclass(frozen=True)
class PlanLineItem:
    """A resolved food line in a generated plan."""

    food_id: str
    name: str
    grams: float
    display_portion: str
    calories: float
    protein: float
    carbs: float
    fat: float
    kurdish_name: str | None = None
    arabic_name: str | None = None


@dataclass(frozen=True)
class PlanAccuracy:
    """Achieved totals as a percentage of the daily targets."""

    calories: float
    protein: float


@dataclass(frozen=True)
class GeneratedMealPlan:
    """A full day plan produced by one generation call."""

    id: UUID
    name: str
    generated_at: datetime
    meals: dict[str, list[PlanLineItem]]
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fat: float
    accuracy: PlanAccuracy
    targets: DailyTargets
