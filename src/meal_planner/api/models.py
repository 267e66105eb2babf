"""Pydantic models for the meal plan API."""

from pydantic import BaseModel, Field


class MealPlanRequest(BaseModel):
    """Request body for generating a meal plan."""

    calories: float = Field(gt=0)
    protein: float | None = Field(default=None, gt=0)
    dietary_tags: list[str] = Field(default_factory=list)
    excluded_base_names: list[str] = Field(default_factory=list)
