"""Algorithmic meal plan generation."""

import logging
import random
from collections.abc import Callable, Collection, Iterable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime

from meal_planner.domain.foods import Food
from meal_planner.domain.plans import (
    GeneratedMealPlan,
    MealResult,
    MealTarget,
    ScoredCombination,
)
from meal_planner.domain.templates import MEAL_SLOTS, MealTemplate
from meal_planner.services.assembly import assemble_plan
from meal_planner.services.combinations import count_combinations, expand_portions
from meal_planner.services.eligibility import filter_eligible_templates
from meal_planner.services.foods import FoodCatalogService
from meal_planner.services.rounding import percent_of
from meal_planner.services.scaling import apply_scaling
from meal_planner.services.scoring import evaluate_combination, protein_density
from meal_planner.services.selection import select_combination
from meal_planner.services.targets import decompose_targets
from meal_planner.services.templates import TemplateCatalogService

LOW_PROTEIN_ACCURACY = 90.0
DENSITY_SAMPLE_SIZE = 3

_logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class MealPlanService:
    """Builds breakfast, lunch and dinner from templates to hit daily targets."""

    food_catalog: FoodCatalogService
    template_catalog: TemplateCatalogService
    rng: random.Random = field(default_factory=random.Random)
    clock: Callable[[], datetime] = _utc_now
    debug: bool = False

    async def generate_meal_plan(  # noqa: PLR0913
        self,
        target_calories: float,
        target_protein: float | None = None,
        dietary_tags: Collection[str] = (),
        excluded_base_names: Collection[str] = (),
        known_foods: Iterable[Food] = (),
    ) -> GeneratedMealPlan:
        """Generate a plan; slots without a usable template stay empty."""
        self.food_catalog.prime(known_foods)
        targets = decompose_targets(target_calories, target_protein)
        _logger.info(
            "Generating meal plan: calories=%s protein=%s tags=%s excluded=%s",
            targets.calories,
            targets.protein,
            sorted(dietary_tags),
            sorted(excluded_base_names),
        )

        foods: dict[str, Food] = {}
        unresolved: set[str] = set()
        results: dict[str, MealResult | None] = {}
        for meal_slot in MEAL_SLOTS:
            target = targets.for_slot(meal_slot)
            candidates = await self.template_catalog.list_eligible_templates(
                meal_slot, dietary_tags
            )
            requested = [
                food_id
                for template in candidates
                for food_id in template.food_ids
                if food_id not in unresolved
            ]
            slot_foods = await self.food_catalog.resolve_foods(requested)
            unresolved.update(set(requested).difference(slot_foods))
            foods.update(slot_foods)
            results[meal_slot] = self.solve_slot(
                meal_slot,
                target,
                candidates,
                slot_foods,
                dietary_tags=dietary_tags,
                excluded_base_names=excluded_base_names,
            )

        plan = assemble_plan(results, targets, foods, clock=self.clock)
        _logger.info(
            "Meal plan generated: %s kcal (%.1f%%), %sg protein (%.1f%%)",
            plan.total_calories,
            plan.accuracy.calories,
            plan.total_protein,
            plan.accuracy.protein,
        )
        return plan

    def solve_slot(  # noqa: PLR0913
        self,
        meal_slot: str,
        target: MealTarget,
        candidates: Iterable[MealTemplate],
        foods: Mapping[str, Food],
        *,
        dietary_tags: Collection[str] = (),
        excluded_base_names: Collection[str] = (),
    ) -> MealResult | None:
        """Pick and adjust the combination for one meal slot.

        Runs without I/O: every food must already be in ``foods``.
        """
        candidates = list(candidates)
        eligible = filter_eligible_templates(
            candidates, meal_slot, dietary_tags, excluded_base_names, foods
        )
        _logger.info(
            "%s: target %s kcal / %sg protein, %s of %s templates eligible",
            meal_slot,
            target.calories,
            target.protein,
            len(eligible),
            len(candidates),
        )
        if not eligible:
            _logger.warning("No meal templates found for %s", meal_slot)
            return None
        if self.debug:
            self._log_protein_density(eligible, foods)

        scored = _score_templates(eligible, target, foods)
        selection = select_combination(scored, self.rng)
        if selection is None:
            _logger.warning("No suitable combination found for %s", meal_slot)
            return None
        if selection.result.from_fallback:
            _logger.info(
                "%s: no combination within the accuracy band, using best score %.1f",
                meal_slot,
                selection.result.score,
            )
        else:
            _logger.info(
                "%s: %s combinations from %s templates within the accuracy band,"
                " picked template %s",
                meal_slot,
                selection.qualifying_count,
                selection.qualifying_templates,
                selection.result.template_id,
            )

        result = apply_scaling(selection.result, target)
        if result.scale_factor != 1.0:
            _logger.info("%s: scaled portions by %.2fx", meal_slot, result.scale_factor)
        protein_accuracy = percent_of(result.protein, target.protein)
        if protein_accuracy < LOW_PROTEIN_ACCURACY:
            _logger.warning(
                "%s: low protein %.1f%% (%.0fg of %sg)",
                meal_slot,
                protein_accuracy,
                result.protein,
                target.protein,
            )
        return result

    def _log_protein_density(
        self, templates: list[MealTemplate], foods: Mapping[str, Food]
    ) -> None:
        for template in templates[:DENSITY_SAMPLE_SIZE]:
            first = next(expand_portions(template.food_slots), ())
            _logger.info(
                "Template %s: %.1f g protein per 100 kcal, %s combinations",
                template.name,
                protein_density(first, foods),
                count_combinations(template.food_slots),
            )


def _score_templates(
    templates: Iterable[MealTemplate], target: MealTarget, foods: Mapping[str, Food]
) -> list[ScoredCombination]:
    scored: list[ScoredCombination] = []
    for template in templates:
        for combination in expand_portions(template.food_slots):
            evaluated = evaluate_combination(template.id, combination, target, foods)
            if evaluated is not None:
                scored.append(evaluated)
    return scored
