"""Profile-related Pydantic schemas."""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

USERNAME_MIN, USERNAME_MAX = 3, 30
BIO_MAX = 500
AVATAR_URL_MAX = 2048

Username = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=USERNAME_MIN,
        max_length=USERNAME_MAX,
        pattern=r"^[A-Za-z0-9_.-]+$",
    ),
]


class ProfileUpdateRequest(BaseModel):
    """Schema for updating the caller's profile.

    Omitted fields are left unchanged; ``null`` or a blank string clears
    ``bio``/``avatar_url``.
    """

    username: Username | None = Field(None, description="New username (3-30 characters)")
    bio: Annotated[str, StringConstraints(strip_whitespace=True, max_length=BIO_MAX)] | None = (
        Field(None, description="Short biography")
    )
    avatar_url: (
        Annotated[str, StringConstraints(strip_whitespace=True, max_length=AVATAR_URL_MAX)] | None
    ) = Field(None, description="Link to an avatar image")

    @field_validator("bio", "avatar_url")
    @classmethod
    def blank_is_none(cls, value: str | None) -> str | None:
        return value or None


class ProfileResponse(BaseModel):
    """Response schema for profile information."""

    id: uuid.UUID
    username: str
    bio: str | None
    avatar_url: str | None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class AuthorSummary(BaseModel):
    id: uuid.UUID
    username: str

    model_config = ConfigDict(from_attributes=True)
