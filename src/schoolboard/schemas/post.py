"""Post-related Pydantic schemas."""

import uuid
from datetime import datetime
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from .profile import AuthorSummary
from .school import SchoolOption

TITLE_MIN, TITLE_MAX = 5, 200
CONTENT_MIN, CONTENT_MAX = 20, 5000

PostTitle = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=TITLE_MIN, max_length=TITLE_MAX)
]
PostContent = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=CONTENT_MIN, max_length=CONTENT_MAX),
]
PostType = Literal["pro", "con", "general"]


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Fields are declared in form order so the first reported error matches
    the first field a reader would fix.
    """

    title: PostTitle
    content: PostContent
    school_id: uuid.UUID
    post_type: PostType = Field("general", description="One of pro, con, general")


class PostUpdate(BaseModel):
    title: PostTitle | None = None
    content: PostContent | None = None
    post_type: PostType | None = None


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: uuid.UUID
    user_id: uuid.UUID
    school_id: uuid.UUID
    title: str
    content: str
    post_type: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class PostWithAuthor(PostResponse):
    author: AuthorSummary


class PostWithSchool(PostResponse):
    school: SchoolOption


class PostWithAuthorAndSchool(PostResponse):
    author: AuthorSummary
    school: SchoolOption
