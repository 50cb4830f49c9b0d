"""Assistant gateway: prompt construction, completion call, fallbacks.

``chat`` only falls back when the completion credential is missing or
rejected; any other failure surfaces as ``AssistantServiceError``. The plan
and wellness helpers always degrade to static text.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any

import openai
from flask import current_app

from . import prompts
from .clients import ClientState, Configured, build_openai_client
from .config import Config
from .errors import AssistantServiceError

log = logging.getLogger(__name__)

EXTENSION_KEY = "nutrifit.assistant"


@dataclass
class WorkoutPlanParams:
    goal: str
    fitness_level: str = "beginner"
    days_per_week: int = 3
    duration: int = 30
    equipment: str = "none"
    preferences: dict[str, Any] = field(default_factory=dict)


@dataclass
class MealPlanParams:
    goal: str
    dietary_restrictions: list[str] = field(default_factory=list)
    calories: int = 2000
    meals_per_day: int = 3
    preferences: dict[str, Any] = field(default_factory=dict)


def mentions_berry(message: str) -> bool:
    lowered = message.lower()
    return any(m in lowered for m in prompts.BERRY_MENTIONS)


def build_user_message(message: str, user_goals: str | None = None, context: str | None = None) -> str:
    text = message
    if mentions_berry(message):
        text = f"{prompts.NAME_MENTION_MARKER} {text}"
    if user_goals:
        text += f"\n\nMy goals: {user_goals}"
    if context:
        text += f"\n\nContext: {context}"
    return text


def fallback_reply(message: str) -> str:
    lowered = message.lower()
    if "workout" in lowered or "exercise" in lowered:
        return prompts.FALLBACK_WORKOUT_TIP
    if "nutrition" in lowered or "meal" in lowered or "diet" in lowered:
        return prompts.FALLBACK_NUTRITION_TIP
    return prompts.FALLBACK_GENERAL_TIP


def workout_plan_prompt(params: WorkoutPlanParams) -> str:
    return prompts.WORKOUT_PLAN_PROMPT.format(
        days_per_week=params.days_per_week,
        goal=params.goal,
        fitness_level=params.fitness_level,
        duration=params.duration,
        equipment=params.equipment,
        preferences=json.dumps(params.preferences),
    )


def meal_plan_prompt(params: MealPlanParams) -> str:
    return prompts.MEAL_PLAN_PROMPT.format(
        meals_per_day=params.meals_per_day,
        goal=params.goal,
        calories=params.calories,
        restrictions=", ".join(params.dietary_restrictions) or "none",
        preferences=json.dumps(params.preferences),
    )


def wellness_prompt(topic: str | None, user_goals: str | None, current_habits: str | None) -> str:
    return prompts.WELLNESS_PROMPT.format(
        topic=topic or "general wellness",
        goals_line=f"User's goals: {user_goals}" if user_goals else "",
        habits_line=f"Current habits: {current_habits}" if current_habits else "",
    )


class Assistant:
    """Wraps the completion client handle resolved at startup."""

    def __init__(
        self,
        client_state: ClientState,
        model: str = "gpt-3.5-turbo",
        max_tokens_chat: int = 350,
        max_tokens_plans: int = 550,
        temperature: float = 0.7,
    ) -> None:
        self.client_state = client_state
        self.model = model
        self.max_tokens_chat = max_tokens_chat
        self.max_tokens_plans = max_tokens_plans
        self.temperature = temperature

    @classmethod
    def from_config(cls, cfg: Config, client_state: ClientState | None = None) -> Assistant:
        return cls(
            client_state if client_state is not None else build_openai_client(cfg),
            model=cfg.openai_model,
            max_tokens_chat=cfg.openai_max_tokens_chat,
            max_tokens_plans=cfg.openai_max_tokens_plans,
            temperature=cfg.openai_temperature,
        )

    @property
    def configured(self) -> bool:
        return isinstance(self.client_state, Configured)

    def _complete(self, user_prompt: str, max_tokens: int) -> str:
        # Callers check ``configured`` first
        client = self.client_state.client  # type: ignore[union-attr]
        resp = client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": prompts.SYSTEM_PROMPT},
                {"role": "user", "content": user_prompt},
            ],
            temperature=self.temperature,
            max_tokens=max_tokens,
        )
        return resp.choices[0].message.content or ""

    def chat(self, message: str, user_goals: str | None = None, context: str | None = None) -> str:
        if not self.configured:
            return prompts.MISSING_KEY_NOTICE + fallback_reply(message)
        try:
            return self._complete(build_user_message(message, user_goals, context), self.max_tokens_chat)
        except openai.AuthenticationError:
            log.warning("Completion credential rejected; answering with fallback advice")
            return prompts.MISSING_KEY_NOTICE + fallback_reply(message)
        except Exception as exc:
            log.exception("Chat completion failed")
            raise AssistantServiceError() from exc

    def generate_workout_plan(self, params: WorkoutPlanParams) -> str:
        if self.configured:
            try:
                return self._complete(workout_plan_prompt(params), self.max_tokens_plans)
            except Exception:
                log.warning("Workout plan completion failed; using static plan", exc_info=True)
        return prompts.FALLBACK_WORKOUT_PLAN.format(days_per_week=params.days_per_week, goal=params.goal)

    def generate_meal_plan(self, params: MealPlanParams) -> str:
        if self.configured:
            try:
                return self._complete(meal_plan_prompt(params), self.max_tokens_plans)
            except Exception:
                log.warning("Meal plan completion failed; using static plan", exc_info=True)
        return prompts.FALLBACK_MEAL_PLAN.format(goal=params.goal, calories=params.calories)

    def get_wellness_advice(
        self,
        topic: str | None = None,
        user_goals: str | None = None,
        current_habits: str | None = None,
    ) -> str:
        if self.configured:
            try:
                return self._complete(wellness_prompt(topic, user_goals, current_habits), self.max_tokens_chat)
            except Exception:
                log.warning("Wellness completion failed; using static advice", exc_info=True)
        return prompts.FALLBACK_WELLNESS


def get_assistant() -> Assistant:
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    "Assistant",
    "WorkoutPlanParams",
    "MealPlanParams",
    "mentions_berry",
    "build_user_message",
    "fallback_reply",
    "get_assistant",
]
