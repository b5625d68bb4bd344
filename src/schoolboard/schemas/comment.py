"""Comment-related Pydantic schemas."""

import uuid
from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints

from .profile import AuthorSummary

COMMENT_MAX = 2000

CommentText = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=COMMENT_MAX)
]


class CommentCreate(BaseModel):
    content: CommentText


class CommentUpdate(BaseModel):
    content: CommentText


class CommentResponse(BaseModel):
    id: uuid.UUID
    post_id: uuid.UUID
    user_id: uuid.UUID
    content: str
    created_at: datetime
    updated_at: datetime
    author: AuthorSummary

    model_config = ConfigDict(from_attributes=True)
