"""Schemas for a generated weekly plan.

These models are the normalized plan: camelCase on the wire, snake_case in
Python. Numeric fields accept the float or numeric-string values generative
models tend to emit and round them to whole numbers.
"""

import math
from typing import Annotated, Any, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _whole_number(value: Any) -> Any:
    # non-finite values are left for int validation to reject
    if isinstance(value, bool):
        return value
    if isinstance(value, float):
        return round(value) if math.isfinite(value) else value
    if isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return value
        return round(number) if math.isfinite(number) else value
    return value


def _empty_if_null(value: Any) -> Any:
    return [] if value is None else value


def _text(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


WholeNumber = Annotated[int, BeforeValidator(_whole_number), Field(ge=0)]
EmptyIfNull = BeforeValidator(_empty_if_null)


class PlanModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MacroSplit(PlanModel):
    """Macronutrient targets in grams."""

    protein: WholeNumber = 0
    carbs: WholeNumber = 0
    fats: WholeNumber = 0


class MealItem(PlanModel):
    name: str
    calories: WholeNumber = 0
    macros: MacroSplit = Field(default_factory=MacroSplit)
    ingredients: Annotated[List[str], EmptyIfNull] = Field(default_factory=list)


class DailyMealPlan(PlanModel):
    day_name: str
    breakfast: MealItem
    lunch: MealItem
    dinner: MealItem
    snack: MealItem


class Exercise(PlanModel):
    name: str
    sets: Annotated[int, BeforeValidator(_whole_number), Field(gt=0)]
    reps: Annotated[str, BeforeValidator(_text)]
    description: str = ""


class DailyWorkout(PlanModel):
    day_name: str
    focus: str
    duration_minutes: WholeNumber = 0
    exercises: Annotated[List[Exercise], EmptyIfNull] = Field(default_factory=list)


class ComprehensivePlan(PlanModel):
    """A full week of meals and workouts with calorie and macro targets."""

    summary: str
    daily_calories: WholeNumber
    macro_target: MacroSplit
    weekly_meals: List[DailyMealPlan] = Field(default_factory=list)
    weekly_workouts: List[DailyWorkout] = Field(default_factory=list)
    shopping_list: List[str] = Field(default_factory=list)
