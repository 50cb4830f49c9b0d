from __future__ import annotations

from typing import Any

from flask import Blueprint

bp = Blueprint("health_api", __name__)


@bp.get("/health")
def health() -> tuple[dict[str, Any], int]:
    # Liveness only; no upstream checks
    return {"status": "ok", "app": "NutriFit"}, 200
