# src/schoolboard/api/v1/endpoints/votes.py
"""Vote-related endpoints for the Schoolboard API."""

import uuid

from fastapi import APIRouter, Response, status

from schoolboard.api.v1.dependencies import MemberStoreDep, StoreDep
from schoolboard.schemas.vote import VoteCreate, VoteStatus
from schoolboard.services import post_service, vote_service

router = APIRouter(prefix="/votes", tags=["votes"])


@router.post("", response_model=VoteStatus)
@router.post("/", response_model=VoteStatus, include_in_schema=False)
async def cast_vote(payload: VoteCreate, store: MemberStoreDep) -> VoteStatus:
    """Vote on a post.

    Voting the same way twice withdraws the vote; voting the other way
    switches it.
    """
    post = post_service.get_post(store, payload.post_id)
    vote = vote_service.cast_vote(store, post, payload.vote_type)
    return VoteStatus(post_id=post.id, vote_type=vote.vote_type if vote else None)


@router.get("/{post_id}/mine", response_model=VoteStatus)
async def get_my_vote(post_id: uuid.UUID, store: StoreDep) -> VoteStatus:
    """The caller's vote on a post; ``vote_type`` is null if none."""
    vote = vote_service.get_my_vote(store, post_id)
    return VoteStatus(post_id=post_id, vote_type=vote.vote_type if vote else None)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def retract_vote(post_id: uuid.UUID, store: MemberStoreDep) -> Response:
    vote_service.retract_vote(store, post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
