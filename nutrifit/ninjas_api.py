"""JSON endpoints for nutrition, recipe and exercise lookups (``/api/ninjas``)."""

from __future__ import annotations

from flask import Blueprint, g
from pydantic import ValidationError as SchemaError

from .http_errors import api_error, api_success
from .ninjas import Envelope, get_ninjas
from .rate_limit import check_tier
from .schemas import (
    ExercisesMuscleQuery,
    ExercisesQuery,
    NutritionItemQuery,
    NutritionQuery,
    RecipesQuery,
    muscle_param_schema,
)
from .validation import validate_query

bp = Blueprint("ninjas_api", __name__, url_prefix="/api/ninjas")

MISSING_FILTER = "At least one search parameter is required (name, type, muscle, difficulty, or equipment)"


@bp.before_request
def _post_tier() -> None:
    check_tier("post")


def _respond(result: Envelope):
    if not result.get("success"):
        return api_error(500, result.get("error") or "Request failed")
    return api_success(data=result.get("data"))


@bp.get("/nutrition")
@validate_query(NutritionQuery)
def nutrition():
    q: NutritionQuery = g.validated_query
    return _respond(get_ninjas().get_nutrition_info(q.query))


@bp.get("/nutrition-item")
@validate_query(NutritionItemQuery)
def nutrition_item():
    q: NutritionItemQuery = g.validated_query
    return _respond(get_ninjas().get_nutrition_item(q.item, q.quantity))


@bp.get("/recipes")
@validate_query(RecipesQuery)
def recipes():
    q: RecipesQuery = g.validated_query
    return _respond(get_ninjas().search_recipes(q.query))


@bp.get("/exercises")
@validate_query(ExercisesQuery)
def exercises():
    q: ExercisesQuery = g.validated_query
    if not q.has_filter():
        return api_error(400, MISSING_FILTER)
    return _respond(
        get_ninjas().get_exercises(
            name=q.name,
            type=q.type,
            muscle=q.muscle,
            difficulty=q.difficulty,
            equipment=q.equipment,
        )
    )


@bp.get("/exercises/muscle/<muscle>")
@validate_query(ExercisesMuscleQuery)
def exercises_for_muscle(muscle: str):
    try:
        muscle = muscle_param_schema.validate_python(muscle)
    except SchemaError:
        return api_error(400, "Invalid muscle parameter")
    q: ExercisesMuscleQuery = g.validated_query
    limit = q.limit if q.limit is not None else 10
    offset = q.offset if q.offset is not None else 0
    return _respond(get_ninjas().get_all_exercises_for_muscle(muscle, limit, offset))


__all__ = ["bp"]
