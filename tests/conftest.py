"""Shared fixtures: in-memory database, fake external clients, API client."""

import copy
import json
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("GEMINI_API_KEY", "")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.exceptions import Unauthorized
from database.models import Base
from schemas.auth_schema import Identity

DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


def _meal(name, calories):
    return {
        "name": name,
        "calories": calories,
        "macros": {"protein": 30, "carbs": 40, "fats": 12},
        "ingredients": [f"{name} base", "olive oil"],
    }


def _document(days=7):
    workouts = []
    meals = []
    for i, day in enumerate(DAYS[:days]):
        rest = day in ("Saturday", "Sunday")
        workouts.append({
            "day_name": day,
            "focus": "Rest" if rest else ["Push", "Pull", "Legs", "Upper Body", "Lower Body"][i],
            "duration_minutes": 0 if rest else 75,
            "exercises": [] if rest else [
                {"name": "Dumbbell Incline Press", "sets": 3, "reps": "3x8", "description": "Slow eccentric"},
                {"name": "Pec Deck Fly", "sets": 3, "reps": "12-15", "description": "Squeeze at peak"},
            ],
        })
        meals.append({
            "day_name": day,
            "breakfast": _meal(f"{day} Oats", 550),
            "lunch": _meal(f"{day} Chicken Bowl", 750),
            "dinner": _meal(f"{day} Salmon", 800),
            "snack": _meal(f"{day} Yogurt", 300),
        })
    return {
        "summary": "High-protein recomposition with a moderate deficit.",
        "daily_calories": 2400,
        "macros": {"protein": 170, "carbs": 240, "fats": 75},
        "weekly_workouts": workouts,
        "weekly_meals": meals,
        "shopping_list": ["Oats", "Chicken breast", "Salmon", "Greek yogurt"],
    }


@pytest.fixture
def plan_document():
    """A valid generator document covering all 7 days."""
    return copy.deepcopy(_document())


class FakeBackend:
    """Generative backend returning canned text or raising a canned error."""

    def __init__(self, text=None, error=None):
        self.text = text
        self.error = error
        self.prompts = []

    def generate(self, prompt):
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


class FakeIdentityProvider:
    def __init__(self):
        self.tokens = {
            "token-alice": Identity(id="user-alice", email="alice@example.com"),
            "token-bob": Identity(id="user-bob", email="bob@example.com"),
        }
        self.accounts = {}

    def verify(self, token):
        if token not in self.tokens:
            raise Unauthorized("Invalid or expired token")
        return self.tokens[token]

    def register(self, email, password):
        self.accounts[email] = password
        return {"user": {"id": f"user-{email}", "email": email}}

    def login(self, email, password):
        if self.accounts.get(email) != password:
            raise Unauthorized("Invalid login credentials")
        return {"access_token": f"token-{email}", "user": {"email": email}}


class FakeObjectStore:
    def __init__(self):
        self.uploads = {}

    def upload(self, path, data, content_type):
        self.uploads[path] = (data, content_type)
        return f"https://storage.example.com/progress-photos/{path}"


@pytest.fixture
def fake_backend():
    """Factory: fake_backend(text=...) or fake_backend(error=...)."""
    return FakeBackend


@pytest.fixture
def valid_backend(plan_document):
    return FakeBackend(text=json.dumps(plan_document))


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider()


@pytest.fixture
def object_store():
    return FakeObjectStore()


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def backend_holder(valid_backend):
    """Mutable slot so API tests can swap the backend mid-test."""
    return {"backend": valid_backend}


@pytest.fixture
def client(session_factory, backend_holder, identity_provider, object_store):
    from main import app
    from api import deps
    from database.deps import get_db_read, get_db_write

    def _session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_write] = _session
    app.dependency_overrides[get_db_read] = _session
    app.dependency_overrides[deps.get_generative_backend] = lambda: backend_holder["backend"]
    app.dependency_overrides[deps.get_identity_provider] = lambda: identity_provider
    app.dependency_overrides[deps.get_object_store] = lambda: object_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def alice():
    return Identity(id="user-alice", email="alice@example.com")


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer token-alice"}

