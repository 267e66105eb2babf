"""Best-fit selection with variety sampling across templates."""

import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from functools import reduce

from meal_planner.domain.plans import MealResult, ScoredCombination

QUALITY_BAND_LOW = 97.0
QUALITY_BAND_HIGH = 103.0


@dataclass(frozen=True)
class SlotSelection:
    """Outcome of selecting a combination for one meal slot."""

    result: MealResult
    qualifying_count: int
    qualifying_templates: int


def in_quality_band(combination: ScoredCombination) -> bool:
    """Both calorie and protein accuracy within the quality band."""
    return (
        QUALITY_BAND_LOW <= combination.calorie_accuracy <= QUALITY_BAND_HIGH
        and QUALITY_BAND_LOW <= combination.protein_accuracy <= QUALITY_BAND_HIGH
    )


def find_best_fit(scored: Iterable[ScoredCombination]) -> ScoredCombination | None:
    """Return the lowest-score combination; earlier ones win ties."""

    def keep_lower(
        best: ScoredCombination | None, candidate: ScoredCombination
    ) -> ScoredCombination:
        if best is None or candidate.score < best.score:
            return candidate
        return best

    return reduce(keep_lower, scored, None)


def group_by_template(
    scored: Iterable[ScoredCombination],
) -> dict[str, list[ScoredCombination]]:
    """Group combinations by template id, keeping first-seen order."""
    groups: dict[str, list[ScoredCombination]] = {}
    for combination in scored:
        groups.setdefault(combination.template_id, []).append(combination)
    return groups


def select_combination(
    scored: Sequence[ScoredCombination], rng: random.Random
) -> SlotSelection | None:
    """Pick the slot's combination.

    A template is drawn uniformly among those with quality-band combinations,
    then one of its qualifying combinations. Without any qualifying
    combination the best-scoring one is returned as a fallback.
    """
    qualifying = [item for item in scored if in_quality_band(item)]
    groups = group_by_template(qualifying)
    if groups:
        template_id = rng.choice(list(groups))
        chosen = rng.choice(groups[template_id])
        return SlotSelection(
            result=_to_result(chosen, from_fallback=False),
            qualifying_count=len(qualifying),
            qualifying_templates=len(groups),
        )

    best = find_best_fit(scored)
    if best is None:
        return None
    return SlotSelection(
        result=_to_result(best, from_fallback=True),
        qualifying_count=0,
        qualifying_templates=0,
    )


def _to_result(combination: ScoredCombination, *, from_fallback: bool) -> MealResult:
    return MealResult(
        template_id=combination.template_id,
        portions=combination.portions,
        calories=combination.calories,
        protein=combination.protein,
        score=combination.score,
        from_fallback=from_fallback,
    )
