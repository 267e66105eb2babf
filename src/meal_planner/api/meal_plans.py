"""Meal plan endpoints with simple token auth."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from meal_planner.api.models import MealPlanRequest
from meal_planner.config import parse_tag_list
from meal_planner.domain.templates import MEAL_SLOTS

if TYPE_CHECKING:
    from meal_planner.containers import AppContainer

router = APIRouter(tags=["meal-plans"])


def _get_api_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.api_token


async def require_api_token(
    x_api_token: str | None = Header(default=None),
    api_token: str = Depends(_get_api_token),
) -> None:
    """Ensure requests include a valid API token."""
    if not x_api_token or x_api_token != api_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/meal-plans", dependencies=[Depends(require_api_token)])
async def generate_meal_plan(
    payload: MealPlanRequest, request: Request
) -> dict[str, object]:
    """Generate a fresh meal plan for the given targets."""
    container: AppContainer = request.app.state.container
    plan = await container.meal_plan_service.generate_meal_plan(
        target_calories=payload.calories,
        target_protein=payload.protein,
        dietary_tags=payload.dietary_tags,
        excluded_base_names=payload.excluded_base_names,
    )
    return {"plan": plan}


@router.get("/meal-templates", dependencies=[Depends(require_api_token)])
async def list_meal_templates(
    request: Request, meal_slot: str, tags: str | None = None
) -> dict[str, object]:
    """List candidate templates for a meal slot and comma separated tags."""
    if meal_slot not in MEAL_SLOTS:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"meal_slot must be one of: {', '.join(MEAL_SLOTS)}",
        )
    container: AppContainer = request.app.state.container
    templates = await container.template_catalog.list_eligible_templates(
        meal_slot, parse_tag_list(tags)
    )
    return {"templates": templates}
