"""Food catalog domain models."""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field

CORE_NUTRIENTS = ("calories", "protein", "carbs", "fat")


def safe_number(value: object) -> float:
    """Coerce a raw nutrient value to a finite float, defaulting to zero."""
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value)
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


@dataclass(frozen=True)
class NutritionPer100:
    """Nutrient amounts per 100 grams, keyed by nutrient name."""

    values: Mapping[str, float] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Mapping[str, object] | None) -> "NutritionPer100":
        """Build a profile from an untrusted mapping."""
        cleaned = {key: safe_number(value) for key, value in (raw or {}).items()}
        for nutrient in CORE_NUTRIENTS:
            cleaned.setdefault(nutrient, 0.0)
        return cls(values=cleaned)

    def get(self, nutrient: str) -> float:
        """Return the amount of a nutrient, zero when absent."""
        return self.values.get(nutrient, 0.0)

    @property
    def calories(self) -> float:
        return self.get("calories")

    @property
    def protein(self) -> float:
        return self.get("protein")

    @property
    def carbs(self) -> float:
        return self.get("carbs")

    @property
    def fat(self) -> float:
        return self.get("fat")


@dataclass(frozen=True)
class Food:
    """A food from the shared catalog."""

    id: str
    name: str
    base_name: str
    nutrition_per_100: NutritionPer100
    kurdish_name: str | None = None
    arabic_name: str | None = None
    category: str | None = None
