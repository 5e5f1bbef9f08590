"""API dependencies: external clients, the plan service and the access gate.

Each request gets freshly constructed collaborators built from settings;
tests swap them through ``app.dependency_overrides``.
"""

from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from core.config import Settings, get_settings
from database.deps import get_db_read, get_db_write
from schemas.auth_schema import Identity
from services.access_gate import AccessControlGate
from services.generative_backend import GeminiBackend, GenerativeBackend
from services.identity_provider import IdentityProvider, SupabaseIdentityProvider
from services.object_store import ObjectStore, SupabaseObjectStore
from services.plan_service import PlanService

# auto_error=False so a missing header reaches the gate and gets the 401 envelope
security = HTTPBearer(auto_error=False)


def get_generative_backend(settings: Settings = Depends(get_settings)) -> GenerativeBackend:
    return GeminiBackend(
        api_key=settings.GEMINI_API_KEY,
        model_name=settings.GEMINI_MODEL,
        timeout=settings.GENERATION_TIMEOUT_SECONDS,
    )


def get_identity_provider(settings: Settings = Depends(get_settings)) -> IdentityProvider:
    return SupabaseIdentityProvider(settings)


def get_object_store(settings: Settings = Depends(get_settings)) -> ObjectStore:
    return SupabaseObjectStore(settings)


def get_plan_service(
    db: Session = Depends(get_db_write),
    backend: GenerativeBackend = Depends(get_generative_backend),
    object_store: ObjectStore = Depends(get_object_store),
) -> PlanService:
    """Plan service bound to a write session."""
    return PlanService(session=db, backend=backend, object_store=object_store)


def get_plan_reader(db: Session = Depends(get_db_read)) -> PlanService:
    """Plan service bound to a read session, for lookups only."""
    return PlanService(session=db)


def get_current_identity(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    provider: IdentityProvider = Depends(get_identity_provider),
) -> Identity:
    """Verify the bearer token and attach the identity to this request."""
    token = credentials.credentials if credentials else None
    identity = AccessControlGate(provider).authenticate(token)
    request.state.identity = identity
    return identity
