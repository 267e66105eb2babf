"""Tests for container wiring."""

import asyncio

from meal_planner.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)
    assert container.meal_plan_service is not None
    assert container.meal_plan_service.food_catalog is container.food_catalog
    asyncio.run(container.close_resources())


def test_planner_seed_fixes_random_source(settings) -> None:
    seeded = settings.model_copy(update={"planner_seed": 11})

    first = build_container(seeded).meal_plan_service.rng.random()
    second = build_container(seeded).meal_plan_service.rng.random()

    assert first == second
