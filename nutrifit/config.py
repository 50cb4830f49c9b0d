from __future__ import annotations

import os
from dataclasses import dataclass


def _int_env(name: str, default: int) -> int:
    # Unset, empty or non-numeric values fall back to the default (mirrors `Number(x) || d`)
    raw = (os.getenv(name) or "").strip()
    try:
        value = int(raw)
    except ValueError:
        return default
    return value or default


def _opt_env(name: str) -> str | None:
    raw = (os.getenv(name) or "").strip()
    return raw or None


@dataclass
class Config:
    secret_key: str = "change-me"
    database_url: str | None = None  # None -> card store unconfigured
    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_max_tokens_chat: int = 350  # Berry chat, wellness
    openai_max_tokens_plans: int = 550  # workout & meal plans
    openai_temperature: float = 0.7
    rate_limit_backend: str = "memory"
    rate_limit_window_ms: int = 15 * 60 * 1000
    rate_limit_max_general: int = 200
    rate_limit_max_post: int = 50
    rate_limit_max_ai: int = 20
    exercise_api_key: str | None = None
    nutrition_api_key: str | None = None
    recipe_api_key: str | None = None
    ninjas_base_url: str = "https://api.api-ninjas.com/v1"
    ninjas_timeout: float = 10.0

    @classmethod
    def from_env(cls) -> Config:
        return cls(
            secret_key=os.getenv("SECRET_KEY", "change-me"),
            database_url=_opt_env("DATABASE_URL"),
            openai_api_key=_opt_env("OPENAI_API_KEY"),
            openai_model=os.getenv("OPENAI_MODEL") or "gpt-3.5-turbo",
            openai_max_tokens_chat=_int_env("OPENAI_MAX_TOKENS_CHAT", 350),
            openai_max_tokens_plans=_int_env("OPENAI_MAX_TOKENS_PLANS", 550),
            rate_limit_backend=(os.getenv("RATE_LIMIT_BACKEND", "memory").strip().lower() or "memory"),
            rate_limit_window_ms=_int_env("RATE_LIMIT_WINDOW_MS", 15 * 60 * 1000),
            rate_limit_max_general=_int_env("RATE_LIMIT_MAX_GENERAL", 200),
            rate_limit_max_post=_int_env("RATE_LIMIT_MAX_POST", 50),
            rate_limit_max_ai=_int_env("RATE_LIMIT_MAX_AI", 20),
            exercise_api_key=_opt_env("EXERCISE_API_KEY"),
            nutrition_api_key=_opt_env("NUTRITION_API_KEY"),
            recipe_api_key=_opt_env("RECIPE_API_KEY"),
            ninjas_timeout=float(os.getenv("NINJAS_TIMEOUT") or "10"),
        )

    def override(self, d: dict):
        for k, v in d.items():
            if hasattr(self, k):
                setattr(self, k, v)

    # Data API keys fall back to the exercise key when the specific one is not set.
    def ninjas_key(self, kind: str) -> str | None:
        if kind == "nutrition":
            return self.nutrition_api_key or self.exercise_api_key
        if kind == "recipe":
            return self.recipe_api_key or self.exercise_api_key
        return self.exercise_api_key

    def to_flask_dict(self):
        return {
            "SECRET_KEY": self.secret_key,
            "SQLALCHEMY_DATABASE_URI": self.database_url,
            "RATE_LIMIT_WINDOW_MS": self.rate_limit_window_ms,
            "SESSION_COOKIE_HTTPONLY": True,
            "SESSION_COOKIE_SAMESITE": "Lax",
        }
