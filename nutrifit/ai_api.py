"""JSON endpoints backed by the assistant gateway (``/api/ai``)."""

from __future__ import annotations

import logging

from flask import Blueprint, g

from .assistant import MealPlanParams, WorkoutPlanParams, get_assistant
from .errors import AI_UNAVAILABLE, AssistantServiceError
from .http_errors import api_error, api_success
from .rate_limit import check_tier
from .schemas import ApiChat, ApiMealPlan, ApiWellness, ApiWorkoutPlan
from .validation import validate_body

log = logging.getLogger(__name__)

bp = Blueprint("ai_api", __name__, url_prefix="/api/ai")


@bp.before_request
def _ai_tier() -> None:
    check_tier("ai")


@bp.post("/chat")
@validate_body(ApiChat)
def chat():
    body: ApiChat = g.validated_body
    try:
        response = get_assistant().chat(body.message, body.user_goals, body.context)
    except AssistantServiceError as exc:
        return api_error(500, "Failed to process chat request", str(exc))
    return api_success(response=response)


@bp.post("/workout-plan")
@validate_body(ApiWorkoutPlan)
def workout_plan():
    body: ApiWorkoutPlan = g.validated_body
    params = WorkoutPlanParams(
        goal=body.goal,
        fitness_level=body.fitness_level or "beginner",
        days_per_week=body.days_per_week or 3,
        duration=body.duration or 30,
        equipment=body.equipment or "none",
        preferences=body.preferences or {},
    )
    try:
        plan = get_assistant().generate_workout_plan(params)
    except Exception:
        log.exception("Workout plan request failed")
        return api_error(500, "Failed to generate workout plan", AI_UNAVAILABLE)
    return api_success(plan=plan)


@bp.post("/meal-plan")
@validate_body(ApiMealPlan)
def meal_plan():
    body: ApiMealPlan = g.validated_body
    params = MealPlanParams(
        goal=body.goal,
        dietary_restrictions=body.dietary_restrictions or [],
        calories=body.calories or 2000,
        meals_per_day=body.meals_per_day or 3,
        preferences=body.preferences or {},
    )
    try:
        plan = get_assistant().generate_meal_plan(params)
    except Exception:
        log.exception("Meal plan request failed")
        return api_error(500, "Failed to generate meal plan", AI_UNAVAILABLE)
    return api_success(plan=plan)


@bp.post("/wellness-advice")
@validate_body(ApiWellness)
def wellness_advice():
    body: ApiWellness = g.validated_body
    try:
        advice = get_assistant().get_wellness_advice(body.topic, body.user_goals, body.current_habits)
    except Exception:
        log.exception("Wellness advice request failed")
        return api_error(500, "Failed to get wellness advice", AI_UNAVAILABLE)
    return api_success(advice=advice)


__all__ = ["bp"]
