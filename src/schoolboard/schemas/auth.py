"""Authentication-related Pydantic schemas."""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpRequest(BaseModel):
    """Schema for creating a new identity."""

    email: EmailStr
    password: str = Field(..., description="Account password")
    username: str | None = Field(
        None,
        description="Requested username; defaults to the local part of the email",
    )


class SignInRequest(BaseModel):
    """Schema for password sign-in."""

    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    """Access token returned after sign-up or sign-in."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field("bearer", description="Token type (always 'bearer')")
    user_id: uuid.UUID
    email: str


class IdentityResponse(BaseModel):
    """The signed-in identity."""

    id: uuid.UUID
    email: str
    user_metadata: dict[str, Any]
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
