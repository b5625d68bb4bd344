"""School-related Pydantic schemas."""

import uuid
from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator

SCHOOL_NAME_MAX = 200
LOCATION_MAX = 200

SchoolName = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=SCHOOL_NAME_MAX)
]
SchoolLocation = Annotated[str, StringConstraints(strip_whitespace=True, max_length=LOCATION_MAX)]
MembershipStatus = Literal["current", "past"]


class SchoolCreate(BaseModel):
    """Schema for adding a new school; a blank location is stored as NULL."""

    name: SchoolName
    location: SchoolLocation | None = None

    @field_validator("location")
    @classmethod
    def blank_location_is_none(cls, value: str | None) -> str | None:
        return value or None


class SchoolResponse(BaseModel):
    """Schema for school information returned by the API."""

    id: uuid.UUID
    name: str
    location: str | None
    created_at: datetime
    created_by: uuid.UUID | None

    model_config = ConfigDict(from_attributes=True)


class SchoolOption(BaseModel):
    """Minimal school entry for pickers."""

    id: uuid.UUID
    name: str

    model_config = ConfigDict(from_attributes=True)


class SchoolSummary(BaseModel):
    id: uuid.UUID
    name: str
    location: str | None = None

    model_config = ConfigDict(from_attributes=True)


class UserSchoolCreate(BaseModel):
    """Schema for linking the caller to a school."""

    school_id: uuid.UUID
    status: MembershipStatus


class UserSchoolUpdate(BaseModel):
    status: MembershipStatus


class UserSchoolResponse(BaseModel):
    """A profile's link to a school, with the school embedded."""

    id: uuid.UUID
    user_id: uuid.UUID
    school_id: uuid.UUID
    status: str
    added_at: datetime
    school: SchoolSummary

    model_config = ConfigDict(from_attributes=True)
