"""Schemas for the user's biometric profile.

Field names are snake_case in Python and camelCase on the wire
(``heightCm``, ``activityLevel``...). Absent or null fields fall back to
defaults instead of failing validation.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .plan_schema import ComprehensivePlan


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class Goal(str, Enum):
    LOSE_FAT = "lose_fat"
    MAINTAIN = "maintain"
    GAIN_MUSCLE = "gain_muscle"
    ATHLETIC_PERFORMANCE = "athletic_performance"


def _slug(value: Any) -> Any:
    """Turn display labels such as 'Lose Fat' into enum values ('lose_fat')."""
    if isinstance(value, str):
        return value.strip().lower().replace("-", " ").replace(" ", "_")
    return value


class Profile(BaseModel):
    """Normalized biometric and goal inputs for plan generation."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    age: int = Field(25, ge=0, examples=[30], description="Age in years")
    gender: Gender = Field(Gender.MALE, examples=["male"])
    height_cm: float = Field(175, gt=0, examples=[180], description="Height in centimeters")
    weight_kg: float = Field(75, gt=0, examples=[82.5], description="Weight in kilograms")
    goal: Goal = Field(Goal.LOSE_FAT, examples=["gain_muscle"])
    activity_level: str = Field("Active", examples=["Moderately Active"])
    dietary_restrictions: str = Field("", examples=["vegetarian, low sodium"], description="Comma-separated")
    allergies: str = Field("", examples=["peanuts, shellfish"], description="Comma-separated")

    @field_validator("*", mode="before")
    @classmethod
    def _null_means_default(cls, value, info):
        if value is None:
            return cls.model_fields[info.field_name].get_default()
        return value

    @field_validator("gender", "goal", mode="before")
    @classmethod
    def _accept_display_labels(cls, value):
        return _slug(value)


class SavePlanRequest(Profile):
    """Profile fields plus the plan to persist alongside them."""

    plan_json: Optional[ComprehensivePlan] = Field(None, alias="plan_json")


class SavedProfile(Profile):
    """Stored profile as returned to its owner."""

    plan_json: Optional[ComprehensivePlan] = Field(None, alias="plan_json")
    updated_at: Optional[datetime] = None
