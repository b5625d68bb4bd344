"""Vote-related Pydantic schemas."""

import uuid
from typing import Literal

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for casting a vote."""

    post_id: uuid.UUID
    vote_type: Literal["upvote", "downvote"] = Field(
        ..., description="Repeating your current vote withdraws it"
    )


class VoteStatus(BaseModel):
    """The caller's vote on a post after an operation."""

    post_id: uuid.UUID
    vote_type: Literal["upvote", "downvote"] | None


class VoteTallyResponse(BaseModel):
    upvotes: int
    downvotes: int
    score: int
