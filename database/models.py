"""SQLAlchemy ORM models for the plan service.

Rows are keyed by the identity id issued by the external identity provider.
Structured payloads (plan documents, meal blobs, exercise lists) are stored
as JSON columns; the models carry no business logic.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, JSON
from sqlalchemy.orm import declarative_base
from datetime import datetime, timezone

Base = declarative_base()


def utcnow():
    return datetime.now(timezone.utc)


class Profile(Base):
    """A user's biometric profile together with their latest plan."""

    __tablename__ = "profiles"
    id = Column(String, primary_key=True)
    age = Column(Integer, nullable=False)
    gender = Column(String, nullable=False)
    height = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)
    goal = Column(String, nullable=False)
    activity_level = Column(String, nullable=False)
    diet_preferences = Column(JSON, nullable=False, default=list)
    allergies = Column(JSON, nullable=False, default=list)
    plan_json = Column(JSON, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class MealPlan(Base):
    """Meals saved for one day label."""

    __tablename__ = "meal_plans"
    user_id = Column(String, primary_key=True)
    day = Column(String, primary_key=True)
    meals = Column(JSON, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class Workout(Base):
    """Workout saved for one day label."""

    __tablename__ = "workouts"
    user_id = Column(String, primary_key=True)
    day = Column(String, primary_key=True)
    focus = Column(String, nullable=False)
    exercises = Column(JSON, nullable=False, default=list)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)


class ProgressLog(Base):
    """Append-only progress entry: a weight reading or a photo reference."""

    __tablename__ = "progress_logs"
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String, nullable=False, index=True)
    type = Column(String, nullable=False)  # weight | photo
    weight = Column(Float, nullable=True)
    photo_url = Column(String, nullable=True)
    date = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
