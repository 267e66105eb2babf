"""Tests for post-hoc scaling of fallback meals."""

import pytest

from meal_planner.domain.plans import MealResult, MealTarget, PortionChoice
from meal_planner.services.scaling import (
    MAX_SCALE_FACTOR,
    MIN_SCALE_FACTOR,
    apply_scaling,
)

LUNCH = MealTarget(calories=800, protein=60)


def _result(
    calories: float,
    protein: float,
    score: float,
    *,
    from_fallback: bool = True,
) -> MealResult:
    return MealResult(
        template_id="beef_samun",
        portions=(
            PortionChoice(food_id="beef", grams=150),
            PortionChoice(food_id="samun", grams=100),
        ),
        calories=calories,
        protein=protein,
        score=score,
        from_fallback=from_fallback,
    )


def test_poor_fallback_is_scaled_uniformly() -> None:
    result = _result(665, 49.5, 156)

    scaled = apply_scaling(result, LUNCH)

    factor = 800 / 665
    assert scaled.scale_factor == pytest.approx(factor)
    assert MIN_SCALE_FACTOR <= scaled.scale_factor <= MAX_SCALE_FACTOR
    assert [choice.grams for choice in scaled.portions] == [180, 120]
    assert scaled.calories == pytest.approx(800)
    assert scaled.protein == pytest.approx(49.5 * factor)
    assert scaled.score == result.score


def test_band_selection_is_never_scaled() -> None:
    result = _result(665, 49.5, 156, from_fallback=False)

    assert apply_scaling(result, LUNCH) is result


def test_acceptable_fallback_is_not_scaled() -> None:
    result = _result(780, 59, 40)

    assert apply_scaling(result, LUNCH) is result


def test_scaling_skipped_when_implied_factor_exceeds_maximum() -> None:
    result = _result(330, 62, 474)

    unchanged = apply_scaling(result, LUNCH)

    assert unchanged is result
    assert unchanged.scale_factor == 1.0


def test_scaling_skipped_when_implied_factor_below_minimum() -> None:
    result = _result(1200, 80, 440)

    assert apply_scaling(result, LUNCH) is result


def test_minimum_factor_is_inclusive() -> None:
    result = _result(1000, 60, 200)

    scaled = apply_scaling(result, LUNCH)

    assert scaled.scale_factor == pytest.approx(0.8)
    assert [choice.grams for choice in scaled.portions] == [120, 80]


def test_zero_calorie_result_is_not_scaled() -> None:
    result = _result(0, 0, 920)

    assert apply_scaling(result, LUNCH) is result


def test_maximum_factor_is_inclusive() -> None:
    result = _result(1000, 60, 300)

    scaled = apply_scaling(result, MealTarget(calories=1300, protein=60))

    assert scaled.scale_factor == pytest.approx(MAX_SCALE_FACTOR)
    assert [choice.grams for choice in scaled.portions] == [195, 130]
    assert scaled.calories == pytest.approx(1300)


def test_fallback_scoring_exactly_threshold_is_not_scaled() -> None:
    result = _result(750, 60, 50)

    assert apply_scaling(result, LUNCH) is result
