"""Flask application factory.

Provides:
 - Configuration from the environment (``.env`` honoured) with overrides
 - Client handles for the card store, the completion API and API Ninjas,
   resolved once and parked on ``app.extensions``
 - Three-tier rate limiting (general on every request, post/ai per route)
 - Request id + timing headers and the ``{error, message}`` error envelope
 - Blueprint registration (pages, /api/ai, /api/ninjas, health)
"""

from __future__ import annotations

import atexit
import logging
import time
import uuid
from typing import Any

from dotenv import load_dotenv
from flask import Flask, g, request
from werkzeug.wrappers.response import Response

from .ai_api import bp as ai_api_bp
from .assistant import EXTENSION_KEY as ASSISTANT_EXT, Assistant
from .card_repo import EXTENSION_KEY as STORE_EXT, CardStore
from .config import Config
from .db import create_all, init_store
from .errors import register_error_handlers
from .health_api import bp as health_bp
from .logging_setup import configure_logging
from .ninjas import EXTENSION_KEY as NINJAS_EXT, NinjasClient
from .ninjas_api import bp as ninjas_api_bp
from .pages import bp as pages_bp
from .rate_limit import LIMITER_EXT, TIERS_EXT, check_tier, tiers_from_config
from .rate_limiter import build_rate_limiter

CONFIG_EXT = "nutrifit.config"


def create_app(config_override: dict[str, Any] | None = None) -> Flask:
    load_dotenv()
    app = Flask(__name__, static_url_path="/static")

    # --- Configuration ---
    cfg = Config.from_env()
    if config_override:
        known = {k: v for k, v in config_override.items() if hasattr(cfg, k)}
        if known:
            cfg.override(known)
    app.config.update(cfg.to_flask_dict())
    if config_override:
        for k, v in config_override.items():  # also allow direct Flask config keys
            if k.isupper():
                app.config[k] = v

    log = configure_logging(logging.DEBUG if app.debug else logging.INFO)

    # --- Client handles ---
    store_state = init_store(cfg.database_url)
    if app.config.get("TESTING") or app.config.get("AUTO_CREATE_TABLES"):
        # Fresh databases in tests/dev; Alembic owns the schema elsewhere
        if cfg.database_url:
            create_all(store_state)
    app.extensions[CONFIG_EXT] = cfg
    app.extensions[STORE_EXT] = CardStore(store_state)
    app.extensions[ASSISTANT_EXT] = Assistant.from_config(cfg)
    ninjas = NinjasClient.from_config(cfg)
    atexit.register(ninjas.close)
    app.extensions[NINJAS_EXT] = ninjas
    app.extensions[LIMITER_EXT] = build_rate_limiter(cfg.rate_limit_backend)
    app.extensions[TIERS_EXT] = tiers_from_config(cfg)
    log.info(
        "NutriFit configured store=%s assistant=%s rate_limit=%s",
        "on" if cfg.database_url else "off",
        "on" if app.extensions[ASSISTANT_EXT].configured else "fallback",
        cfg.rate_limit_backend,
    )

    # --- Error handling ---
    register_error_handlers(app)

    # --- Request id / timing / general tier ---
    @app.before_request
    def _before_req() -> None:
        g._t0 = time.perf_counter()
        g.request_id = request.headers.get("X-Request-Id") or str(uuid.uuid4())
        check_tier("general")

    @app.after_request
    def _after_req(resp: Response) -> Response:
        dur_ms = int((time.perf_counter() - getattr(g, "_t0", time.perf_counter())) * 1000)
        rid = getattr(g, "request_id", None) or str(uuid.uuid4())
        resp.headers["X-Request-Id"] = rid
        resp.headers["X-Request-Duration-ms"] = str(dur_ms)
        log.info("%s %s -> %s (%dms)", request.method, request.path, resp.status_code, dur_ms)
        return resp

    # --- Register blueprints ---
    app.register_blueprint(pages_bp)
    app.register_blueprint(ai_api_bp)
    app.register_blueprint(ninjas_api_bp)
    app.register_blueprint(health_bp)
    return app


__all__ = ["create_app"]
