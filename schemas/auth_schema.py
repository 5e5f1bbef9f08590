"""Schemas for registration, login and the authenticated identity."""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    email: EmailStr = Field(..., examples=["athlete@example.com"])
    password: str = Field(..., min_length=6, description="At least 6 characters")


class LoginRequest(BaseModel):
    email: EmailStr = Field(..., examples=["athlete@example.com"])
    password: str = Field(..., min_length=1)


class Identity(BaseModel):
    """Minimal identity attached to a request after token verification."""

    id: str
    email: Optional[str] = None
