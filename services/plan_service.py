"""Plan service.

Orchestrates plan generation (prompt -> generative backend -> normalizer)
and the identity-scoped persistence of profiles, plans, saved meals,
workouts and progress logs.

Failure policy differs by operation. `generate` absorbs every failure into
the fallback plan. Persistence and lookup failures are raised to the caller
as `PersistenceError` / `NotFoundError`.
"""

import time
from typing import Any, List, Optional

from sqlalchemy.orm import Session

from core.exceptions import ConfigurationError, NotFoundError
from core.logger import get_logger
from core.repository import BaseRepository
from database import models
from schemas.auth_schema import Identity
from schemas.plan_schema import ComprehensivePlan
from schemas.profile_schema import Profile, SavedProfile
from schemas.tracking_schema import MealRecord, ProgressRecord, WorkoutRecord
from services.field_mapping import profile_from_storage, profile_to_storage
from services.generative_backend import GenerativeBackend
from services.object_store import ObjectStore
from services.plan_normalizer import fallback_plan, normalize
from services.prompt_builder import build_prompt

logger = get_logger("services.plan_service")

WEEKDAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]


def _day_sort_key(day: str):
    label = day.strip().lower()
    if label in WEEKDAYS:
        return (0, WEEKDAYS.index(label), label)
    return (1, 0, label)


class PlanService:
    """Generate-or-fallback plus identity-scoped save and fetch operations.

    Collaborators are injected so tests can substitute fakes:

    Args:
        session: SQLAlchemy session for the current request.
        backend: Generative backend used by `generate`.
        object_store: Blob store used by `upload_progress_photo`.
    """

    def __init__(
        self,
        session: Optional[Session] = None,
        backend: Optional[GenerativeBackend] = None,
        object_store: Optional[ObjectStore] = None,
    ):
        self.session = session
        self.backend = backend
        self.object_store = object_store

    def _repository(self, model):
        if self.session is None:
            raise ConfigurationError("Plan service has no database session")
        return BaseRepository(model, self.session)

    # Generation

    def generate(self, profile: Profile) -> ComprehensivePlan:
        """Return a generated plan for ``profile``, or the fallback plan.

        One attempt, no retries. Never raises.
        """
        started = time.monotonic()
        try:
            if self.backend is None:
                raise ConfigurationError("No generative backend configured")
            prompt = build_prompt(profile)
            raw_text = self.backend.generate(prompt)
            plan = normalize(raw_text)
        except Exception as exc:
            logger.warning("Plan generation degraded to fallback after %.1fs: %r", time.monotonic() - started, exc)
            return fallback_plan()

        logger.info("Plan generation finished in %.1fs", time.monotonic() - started)
        return plan

    # Profile and plan

    def save_plan(self, identity: Identity, profile: Profile, plan: Optional[ComprehensivePlan]) -> SavedProfile:
        """Upsert the identity's profile and plan; the previous plan is replaced."""
        row = models.Profile(
            id=identity.id,
            plan_json=plan.model_dump(by_alias=True, mode="json") if plan is not None else None,
            updated_at=models.utcnow(),
            **profile_to_storage(profile),
        )
        saved = self._repository(models.Profile).upsert(row)
        logger.info("Saved profile and plan for %s", identity.id)
        return self._to_saved_profile(saved)

    def fetch_profile(self, identity: Identity) -> SavedProfile:
        row = self._repository(models.Profile).get_by_id(identity.id)
        if row is None:
            raise NotFoundError("Profile", identity.id, message="Profile not found")
        return self._to_saved_profile(row)

    @staticmethod
    def _to_saved_profile(row: models.Profile) -> SavedProfile:
        return SavedProfile.model_validate({
            **profile_from_storage(row),
            "plan_json": row.plan_json,
            "updated_at": row.updated_at,
        })

    # Saved meals and workouts

    def save_meal(self, identity: Identity, day: str, meals: Any) -> MealRecord:
        row = models.MealPlan(user_id=identity.id, day=day, meals=meals, updated_at=models.utcnow())
        return MealRecord.model_validate(self._repository(models.MealPlan).upsert(row))

    def get_meal(self, identity: Identity, day: str) -> MealRecord:
        row = self._repository(models.MealPlan).get_by_id((identity.id, day))
        if row is None:
            raise NotFoundError("Meals", day, message="Meals not found for this day")
        return MealRecord.model_validate(row)

    def save_workout(self, identity: Identity, day: str, focus: str, exercises: List[Any]) -> WorkoutRecord:
        row = models.Workout(
            user_id=identity.id, day=day, focus=focus, exercises=exercises, updated_at=models.utcnow()
        )
        return WorkoutRecord.model_validate(self._repository(models.Workout).upsert(row))

    def get_week_workouts(self, identity: Identity) -> List[WorkoutRecord]:
        rows = self._repository(models.Workout).list_by(user_id=identity.id)
        rows.sort(key=lambda r: _day_sort_key(r.day))
        return [WorkoutRecord.model_validate(r) for r in rows]

    # Progress logs (append-only)

    def log_weight(self, identity: Identity, weight: float, date: Optional[str] = None) -> ProgressRecord:
        row = models.ProgressLog(
            user_id=identity.id,
            type="weight",
            weight=weight,
            date=date or models.utcnow().isoformat(),
        )
        return ProgressRecord.model_validate(self._repository(models.ProgressLog).add(row))

    def upload_progress_photo(self, identity: Identity, data: bytes, filename: str, mimetype: str) -> str:
        """Store the photo externally, record a reference row, return its public URL."""
        if self.object_store is None:
            raise ConfigurationError("No object store configured")

        path = f"{identity.id}/{int(time.time() * 1000)}_{filename}"
        url = self.object_store.upload(path, data, mimetype)
        row = models.ProgressLog(
            user_id=identity.id,
            type="photo",
            photo_url=url,
            date=models.utcnow().isoformat(),
        )
        self._repository(models.ProgressLog).add(row)
        logger.info("Stored progress photo for %s at %s", identity.id, path)
        return url
