"""Enumerate portion assignments for a template."""

import itertools
from collections.abc import Iterator, Sequence

from meal_planner.domain.plans import FoodCombination, PortionChoice
from meal_planner.domain.templates import FoodSlot


def expand_portions(food_slots: Sequence[FoodSlot]) -> Iterator[FoodCombination]:
    """Yield every portion combination, first slot varying slowest."""
    if not food_slots:
        return
    portion_options = [
        [
            PortionChoice(food_id=slot.food_id, grams=grams)
            for grams in slot.allowed_portions
        ]
        for slot in food_slots
    ]
    for combination in itertools.product(*portion_options):
        yield tuple(combination)


def count_combinations(food_slots: Sequence[FoodSlot]) -> int:
    """Return how many combinations expand_portions will yield."""
    if not food_slots:
        return 0
    total = 1
    for slot in food_slots:
        total *= len(slot.allowed_portions)
    return total
