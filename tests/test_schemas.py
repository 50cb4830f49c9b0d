import pytest
from pydantic import ValidationError

from nutrifit.schemas import (
    ApiChat,
    ApiMealPlan,
    ApiWorkoutPlan,
    CardType,
    ExercisesMuscleQuery,
    ExercisesQuery,
    FitCard,
    NutriCard,
    RecoveryCard,
    SignIn,
    card_id_schema,
    card_type_schema,
)


def test_signin_trims_and_drops_unknown_fields():
    v = SignIn.model_validate({"firstName": "  Ada ", "lastName": "O'Neil-Smith", "role": "admin"})
    assert v.first_name == "Ada"
    assert v.last_name == "O'Neil-Smith"
    assert "role" not in v.model_dump()


@pytest.mark.parametrize("name", ["A", "R2D2", "", "   ", "Ada!"])
def test_signin_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        SignIn.model_validate({"firstName": name, "lastName": "Lovelace"})


def test_signin_rejects_names_over_100_chars():
    with pytest.raises(ValidationError):
        SignIn.model_validate({"firstName": "a" * 101, "lastName": "Lovelace"})


def test_nutri_card_blank_macros_become_none():
    v = NutriCard.model_validate(
        {"title": "Oats", "day": "monday", "time": "08:00", "carbs": "", "protein": "  ", "fat": "7"}
    )
    assert v.carbs is None
    assert v.protein is None
    assert v.fat == 7


def test_nutri_card_rejects_negative_macro_and_unknown_day():
    with pytest.raises(ValidationError):
        NutriCard.model_validate({"title": "Oats", "day": "monday", "time": "08:00", "carbs": -1})
    with pytest.raises(ValidationError):
        NutriCard.model_validate({"title": "Oats", "day": "funday", "time": "08:00"})


def test_nutri_card_strips_unknown_id():
    v = NutriCard.model_validate({"title": "Oats", "day": "sunday", "time": "08:00", "id": "999"})
    assert "id" not in v.model_dump()


def test_fit_card_duration_bounds_and_coercion():
    base = {"title": "Legs", "day": "friday", "time": "07:00", "exerciseType": "strength", "intensity": "high"}
    assert FitCard.model_validate({**base, "duration": "45"}).duration == 45
    for bad in ("0", "601", "abc"):
        with pytest.raises(ValidationError):
            FitCard.model_validate({**base, "duration": bad})


def test_recovery_card_requires_exercise_type():
    with pytest.raises(ValidationError):
        RecoveryCard.model_validate(
            {"title": "Stretch", "day": "monday", "time": "20:00", "duration": 15, "intensity": "low"}
        )
    v = RecoveryCard.model_validate(
        {
            "title": "Stretch",
            "day": "monday",
            "time": "20:00",
            "exerciseType": "mobility",
            "duration": 15,
            "intensity": "low",
            "bodyPart": "hips",
        }
    )
    assert v.body_part == "hips"


def test_card_type_and_id():
    assert card_type_schema.validate_python("fit-card") is CardType.FIT
    with pytest.raises(ValidationError):
        card_type_schema.validate_python("users")
    assert card_id_schema.validate_python("42") == "42"
    assert card_id_schema.validate_python("3f1c2a7e-5b0d-4c1e-9a8f-0123456789ab")
    for bad in ("12a", "../etc", "-1", ""):
        with pytest.raises(ValidationError):
            card_id_schema.validate_python(bad)


def test_api_chat_requires_non_blank_message():
    with pytest.raises(ValidationError):
        ApiChat.model_validate({"message": "   "})
    v = ApiChat.model_validate({"message": "hi", "userGoals": None, "context": "beginner"})
    assert v.user_goals is None
    assert v.context == "beginner"


def test_plan_bounds():
    with pytest.raises(ValidationError):
        ApiWorkoutPlan.model_validate({"goal": "strength", "daysPerWeek": 8})
    with pytest.raises(ValidationError):
        ApiMealPlan.model_validate({"goal": "cut", "calories": 499})
    v = ApiMealPlan.model_validate({"goal": "cut", "dietaryRestrictions": ["vegan"], "mealsPerDay": "4"})
    assert v.meals_per_day == 4
    assert v.dietary_restrictions == ["vegan"]


def test_exercise_queries():
    assert not ExercisesQuery.model_validate({}).has_filter()
    assert ExercisesQuery.model_validate({"muscle": "biceps"}).has_filter()
    with pytest.raises(ValidationError):
        ExercisesMuscleQuery.model_validate({"limit": "101"})
    with pytest.raises(ValidationError):
        ExercisesMuscleQuery.model_validate({"offset": "-1"})
