"""Schemas for saved meals, saved workouts and progress logs."""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MealSaveRequest(BaseModel):
    day: str = Field(..., min_length=1, examples=["Monday"], description="Free-form day label or ISO date")
    meals: Any = Field(None, description="Meals for the day, stored as-is")


class MealRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: str
    meals: Any = None
    updated_at: Optional[datetime] = None


class WorkoutSaveRequest(BaseModel):
    day: str = Field(..., min_length=1, examples=["Monday"])
    focus: str = Field(..., examples=["Push (Chest/Shoulders/Triceps)"])
    exercises: List[Any] = Field(..., description="Exercises for the day, stored as-is")


class WorkoutRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day: str
    focus: str
    exercises: List[Any]
    updated_at: Optional[datetime] = None


class WeightLogRequest(BaseModel):
    weight: float = Field(..., gt=0, examples=[81.4], description="Body weight in kilograms")
    date: Optional[str] = Field(None, examples=["2024-05-01T08:00:00Z"], description="ISO timestamp, defaults to now")


class ProgressRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str
    weight: Optional[float] = None
    photo_url: Optional[str] = None
    date: str


class PhotoUploadResponse(BaseModel):
    url: str
