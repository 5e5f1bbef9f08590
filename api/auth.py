"""Authentication routes.

Registration and login are delegated to the identity provider; `/me`
returns the identity the access gate attached to the request.
"""

from typing import Any

from fastapi import APIRouter, Depends

from api.deps import get_current_identity, get_identity_provider
from core.logger import get_logger
from schemas import ApiResponse, Identity, LoginRequest, RegisterRequest
from services.identity_provider import IdentityProvider

logger = get_logger("api.auth")
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=ApiResponse[Any])
def register(payload: RegisterRequest, provider: IdentityProvider = Depends(get_identity_provider)):
    data = provider.register(payload.email, payload.password)
    logger.info("Registered %s", payload.email)
    return ApiResponse(data=data)


@router.post("/login", response_model=ApiResponse[Any])
def login(payload: LoginRequest, provider: IdentityProvider = Depends(get_identity_provider)):
    return ApiResponse(data=provider.login(payload.email, payload.password))


@router.get("/me", response_model=ApiResponse[Identity])
def me(identity: Identity = Depends(get_current_identity)):
    return ApiResponse(data=identity)
