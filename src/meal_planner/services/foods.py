"""Food catalog service with cache-first lookups."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.foods import Food
from meal_planner.services.cache import Cache
from meal_planner.services.retry import call_with_retry

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Read access to the food catalog."""

    def get_foods(self, food_ids: list[str]) -> list[Food]:
        """Return the foods that exist for the given ids."""


@dataclass
class FoodCatalogService:
    """Resolves food ids, hitting the repository only for cache misses."""

    repository: FoodRepository
    cache: Cache
    food_ttl_seconds: int = 86400
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    debug: bool = False

    def prime(self, foods: Iterable[Food]) -> int:
        """Load foods the caller already holds into the cache."""
        count = 0
        for food in foods:
            self.cache.set(_cache_key(food.id), food, ttl_seconds=self.food_ttl_seconds)
            count += 1
        return count

    def cached_food(self, food_id: str) -> Food | None:
        """Return a food from the cache without touching the repository."""
        cached = self.cache.get(_cache_key(food_id))
        if isinstance(cached, Food):
            return cached
        return None

    async def resolve_food(self, food_id: str) -> Food | None:
        """Return one food, or None when the catalog does not know it."""
        foods = await self.resolve_foods([food_id])
        return foods.get(food_id)

    async def resolve_foods(self, food_ids: Iterable[str]) -> dict[str, Food]:
        """Resolve many ids at once; unknown ids are absent from the result."""
        resolved: dict[str, Food] = {}
        missing: list[str] = []
        for food_id in dict.fromkeys(food_ids):
            cached = self.cached_food(food_id)
            if cached is not None:
                resolved[food_id] = cached
            else:
                missing.append(food_id)

        if not missing:
            return resolved

        fetched = await call_with_retry(
            lambda: self.repository.get_foods(missing),
            action=f"get_foods:{len(missing)}",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        for food in fetched:
            self.cache.set(_cache_key(food.id), food, ttl_seconds=self.food_ttl_seconds)
            resolved[food.id] = food
        if self.debug:
            _logger.info(
                "Food catalog fetch: requested=%s found=%s", len(missing), len(fetched)
            )
        unresolved = [food_id for food_id in missing if food_id not in resolved]
        if unresolved:
            _logger.warning("Unresolved food ids: %s", ", ".join(unresolved))
        return resolved


def _cache_key(food_id: str) -> str:
    return f"food:{food_id}"
