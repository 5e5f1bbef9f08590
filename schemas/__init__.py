"""Pydantic schema package for request and response models."""

from .plan_schema import MacroSplit, MealItem, DailyMealPlan, Exercise, DailyWorkout, ComprehensivePlan
from .profile_schema import Gender, Goal, Profile, SavePlanRequest, SavedProfile
from .auth_schema import RegisterRequest, LoginRequest, Identity
from .response_schema import ApiResponse

__all__ = [
    "MacroSplit",
    "MealItem",
    "DailyMealPlan",
    "Exercise",
    "DailyWorkout",
    "ComprehensivePlan",
    "Gender",
    "Goal",
    "Profile",
    "SavePlanRequest",
    "SavedProfile",
    "RegisterRequest",
    "LoginRequest",
    "Identity",
    "ApiResponse",
]
