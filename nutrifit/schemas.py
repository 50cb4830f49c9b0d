"""Input schemas for every accepted request shape.

Every model ignores unknown fields (they never reach the sanitized value),
trims strings and enforces inclusive bounds. Numeric fields accept numeric
strings as posted by HTML forms.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Annotated, Any, Literal, Optional

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    Field,
    StringConstraints,
    TypeAdapter,
    field_validator,
)

MAX_TITLE = 200
MAX_TEXT = 2000
MAX_PROMPT = 2000
MAX_NAME = 100
MAX_MESSAGE = 2000
MAX_GOAL = 200
MAX_TOPIC = 200
MAX_QUERY = 300
MAX_ITEM = 200
MAX_LIMIT = 100

DAYS = ("sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday")
Day = Literal["sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday"]

NAME_PATTERN = r"^[A-Za-z\s\-']{2,}$"


def _text(max_length: int, *, allow_empty: bool = False) -> Any:
    return Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=0 if allow_empty else 1, max_length=max_length),
    ]


Title = _text(MAX_TITLE)
Clock = _text(10)
Notes = _text(MAX_TEXT, allow_empty=True)
Label50 = _text(50)
Label20 = _text(20)
Label100 = _text(100)
Label200 = _text(200)
BodyPart = _text(200, allow_empty=True)
Prompt = _text(MAX_PROMPT)
Message = _text(MAX_MESSAGE)
Goal = _text(MAX_GOAL)
GoalOrBlank = _text(MAX_GOAL, allow_empty=True)
TopicOrBlank = _text(MAX_TOPIC, allow_empty=True)
SearchQuery = _text(MAX_QUERY)
Item = _text(MAX_ITEM)


Name = Annotated[str, StringConstraints(strip_whitespace=True, max_length=MAX_NAME, pattern=NAME_PATTERN)]


class Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True, populate_by_name=True)


# --- Sign-in & cards ---------------------------------------------------------


class SignIn(Schema):
    first_name: Name = Field(alias="firstName")
    last_name: Name = Field(alias="lastName")


class _CardBase(Schema):
    title: Title
    day: Day
    time: Clock


class NutriCard(_CardBase):
    carbs: Optional[int] = Field(default=None, ge=0)
    protein: Optional[int] = Field(default=None, ge=0)
    fat: Optional[int] = Field(default=None, ge=0)
    base: Optional[Notes] = None
    main: Optional[Notes] = None
    side: Optional[Notes] = None
    extras: Optional[Notes] = None
    notes: Optional[Notes] = None

    @field_validator("carbs", "protein", "fat", mode="before")
    @classmethod
    def _blank_macro_is_null(cls, v: Any) -> Any:
        # Empty form inputs are stored as NULL, never "" or NaN
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v


class _ExerciseCard(_CardBase):
    exercise_type: Label50 = Field(alias="exerciseType")
    duration: int = Field(ge=1, le=600)
    intensity: Label20
    equipment: Optional[Notes] = None


class FitCard(_ExerciseCard):
    muscle_groups: Optional[Notes] = Field(default=None, alias="muscleGroups")
    notes: Optional[Notes] = None


class RecoveryCard(_ExerciseCard):
    body_part: Optional[BodyPart] = Field(default=None, alias="bodyPart")
    precautions: Optional[Notes] = None
    instructions: Optional[Notes] = None


class AskBerry(Schema):
    prompt: Prompt


class CardType(str, Enum):
    NUTRI = "nutri-card"
    FIT = "fit-card"
    RECOVERY = "recovery-card"


CARD_SCHEMAS: dict[CardType, type[_CardBase]] = {
    CardType.NUTRI: NutriCard,
    CardType.FIT: FitCard,
    CardType.RECOVERY: RecoveryCard,
}

_DIGITS = re.compile(r"^\d+$")
_UUID = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


def _digits_or_uuid(value: str) -> str:
    if _DIGITS.match(value) or _UUID.match(value):
        return value
    raise ValueError("must be a numeric id or a UUID")


CardId = Annotated[str, StringConstraints(min_length=1), AfterValidator(_digits_or_uuid)]

card_type_schema: TypeAdapter[CardType] = TypeAdapter(CardType)
card_id_schema: TypeAdapter[str] = TypeAdapter(CardId)


# --- /api/ai -----------------------------------------------------------------


class ApiChat(Schema):
    message: Message
    user_goals: Optional[GoalOrBlank] = Field(default=None, alias="userGoals")
    context: Optional[Notes] = None


class ApiWorkoutPlan(Schema):
    goal: Goal
    fitness_level: Optional[Label50] = Field(default=None, alias="fitnessLevel")
    days_per_week: Optional[int] = Field(default=None, ge=1, le=7, alias="daysPerWeek")
    duration: Optional[int] = Field(default=None, ge=5, le=180)
    equipment: Optional[Label100] = None
    preferences: Optional[dict[str, Any]] = None


class ApiMealPlan(Schema):
    goal: Goal
    dietary_restrictions: Optional[list[Annotated[str, StringConstraints(max_length=100)]]] = Field(
        default=None, alias="dietaryRestrictions"
    )
    calories: Optional[int] = Field(default=None, ge=500, le=10000)
    meals_per_day: Optional[int] = Field(default=None, ge=1, le=6, alias="mealsPerDay")
    preferences: Optional[dict[str, Any]] = None


class ApiWellness(Schema):
    topic: Optional[TopicOrBlank] = None
    user_goals: Optional[GoalOrBlank] = Field(default=None, alias="userGoals")
    current_habits: Optional[Notes] = Field(default=None, alias="currentHabits")


# --- /api/ninjas query params ------------------------------------------------


class NutritionQuery(Schema):
    query: SearchQuery


class NutritionItemQuery(Schema):
    item: Item
    quantity: Optional[Label50] = None


class RecipesQuery(Schema):
    query: SearchQuery


class ExercisesQuery(Schema):
    name: Optional[SearchQuery] = None
    type: Optional[Label50] = None
    muscle: Optional[Label100] = None
    difficulty: Optional[Label20] = None
    equipment: Optional[Label200] = None

    def has_filter(self) -> bool:
        return any((self.name, self.type, self.muscle, self.difficulty, self.equipment))


class ExercisesMuscleQuery(Schema):
    limit: Optional[int] = Field(default=None, ge=1, le=MAX_LIMIT)
    offset: Optional[int] = Field(default=None, ge=0)


muscle_param_schema: TypeAdapter[str] = TypeAdapter(Label100)


__all__ = [
    "DAYS",
    "SignIn",
    "NutriCard",
    "FitCard",
    "RecoveryCard",
    "AskBerry",
    "CardType",
    "CARD_SCHEMAS",
    "card_type_schema",
    "card_id_schema",
    "ApiChat",
    "ApiWorkoutPlan",
    "ApiMealPlan",
    "ApiWellness",
    "NutritionQuery",
    "NutritionItemQuery",
    "RecipesQuery",
    "ExercisesQuery",
    "ExercisesMuscleQuery",
    "muscle_param_schema",
]
