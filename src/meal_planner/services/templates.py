"""Meal template catalog service."""

import logging
from collections.abc import Collection
from dataclasses import dataclass
from typing import Protocol

from meal_planner.domain.templates import MealTemplate
from meal_planner.services.cache import Cache
from meal_planner.services.retry import call_with_retry

_logger = logging.getLogger(__name__)


class TemplateRepository(Protocol):
    """Read access to meal templates."""

    def list_templates(
        self, meal_slot: str, dietary_tags: list[str]
    ) -> list[MealTemplate]:
        """Return templates for a slot carrying all of the given tags."""


@dataclass
class TemplateCatalogService:
    """Lists candidate templates per slot with caching."""

    repository: TemplateRepository
    cache: Cache
    template_ttl_seconds: int = 3600
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3
    debug: bool = False

    async def list_eligible_templates(
        self, meal_slot: str, dietary_tags: Collection[str] = ()
    ) -> list[MealTemplate]:
        """Return candidate templates for a meal slot and dietary tags."""
        tags = sorted(set(dietary_tags))
        cache_key = f"templates:{meal_slot}:{','.join(tags)}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        templates = await call_with_retry(
            lambda: self.repository.list_templates(meal_slot, tags),
            action=f"list_templates:{meal_slot}",
            retry_attempts=self.retry_attempts,
            retry_delay_seconds=self.retry_delay_seconds,
        )
        self.cache.set(cache_key, templates, ttl_seconds=self.template_ttl_seconds)
        if self.debug:
            _logger.info(
                "Template catalog: slot=%s tags=%s results=%s",
                meal_slot,
                tags,
                len(templates),
            )
        return templates
