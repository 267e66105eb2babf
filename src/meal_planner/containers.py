"""Dependency container wiring for the application."""

import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from meal_planner.adapters.supabase_food_repository import SupabaseFoodRepository
from meal_planner.adapters.supabase_template_repository import (
    SupabaseTemplateRepository,
)
from meal_planner.config import Settings
from meal_planner.services.cache import InMemoryCache
from meal_planner.services.foods import FoodCatalogService
from meal_planner.services.meal_plans import MealPlanService
from meal_planner.services.templates import TemplateCatalogService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_catalog: FoodCatalogService
    template_catalog: TemplateCatalogService
    meal_plan_service: MealPlanService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    food_cache = InMemoryCache()
    template_cache = InMemoryCache()
    food_catalog = FoodCatalogService(
        repository=SupabaseFoodRepository(supabase_client),
        cache=food_cache,
        food_ttl_seconds=resolved_settings.food_cache_ttl_seconds,
        retry_attempts=resolved_settings.catalog_retry_attempts,
        debug=resolved_settings.debug,
    )
    template_catalog = TemplateCatalogService(
        repository=SupabaseTemplateRepository(supabase_client),
        cache=template_cache,
        template_ttl_seconds=resolved_settings.template_cache_ttl_seconds,
        retry_attempts=resolved_settings.catalog_retry_attempts,
        debug=resolved_settings.debug,
    )
    meal_plan_service = MealPlanService(
        food_catalog=food_catalog,
        template_catalog=template_catalog,
        rng=random.Random(resolved_settings.planner_seed),
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        food_cache.clear()
        template_cache.clear()

    return AppContainer(
        settings=resolved_settings,
        food_catalog=food_catalog,
        template_catalog=template_catalog,
        meal_plan_service=meal_plan_service,
        close_resources=close_resources,
    )
