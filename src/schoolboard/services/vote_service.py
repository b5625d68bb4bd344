"""Voting on posts."""
from __future__ import annotations

import uuid
from collections.abc import Iterable
from dataclasses import dataclass

from schoolboard.models import Post, Vote
from schoolboard.schemas.vote import VoteCreate
from schoolboard.services.store import Store
from schoolboard.services.validation import validate

__all__ = [
    "VoteTally",
    "cast_vote",
    "get_my_vote",
    "list_votes",
    "retract_vote",
    "tally_votes",
]


@dataclass(frozen=True)
class VoteTally:
    upvotes: int = 0
    downvotes: int = 0

    @property
    def score(self) -> int:
        return self.upvotes - self.downvotes


def tally_votes(votes: Iterable[Vote]) -> VoteTally:
    """Count fetched vote rows; there are no stored counters."""
    up = down = 0
    for vote in votes:
        if vote.vote_type == "upvote":
            up += 1
        elif vote.vote_type == "downvote":
            down += 1
    return VoteTally(upvotes=up, downvotes=down)


def list_votes(store: Store, post_ids: Iterable[uuid.UUID]) -> list[Vote]:
    ids = list(post_ids)
    if not ids:
        return []
    return store.query(Vote).filter(Vote.post_id.in_(ids)).all()


def get_my_vote(store: Store, post_id: uuid.UUID) -> Vote | None:
    if store.caller.user_id is None:
        return None
    return store.query(Vote).filter(
        Vote.post_id == post_id,
        Vote.user_id == store.caller.user_id,
    ).first()


def _handle_existing_vote(store: Store, existing: Vote, vote_type: str) -> Vote | None:
    if existing.vote_type == vote_type:
        # Repeating the same vote toggles it off.
        store.delete(existing)
        return None
    return store.update(existing, {"vote_type": vote_type})


def cast_vote(store: Store, post: Post, vote_type: str) -> Vote | None:
    """Record the caller's vote on ``post``.

    A first vote inserts a row, repeating the same vote removes it, and
    switching direction updates the existing row in place.

    Returns:
        The resulting vote, or None when the vote was withdrawn.
    """
    vote_type = validate(VoteCreate, post_id=post.id, vote_type=vote_type).vote_type
    existing = get_my_vote(store, post.id)
    if existing is not None:
        result = _handle_existing_vote(store, existing, vote_type)
    else:
        result = store.insert(
            Vote(post_id=post.id, user_id=store.caller.user_id, vote_type=vote_type)
        )
    store.commit()
    return result


def retract_vote(store: Store, post_id: uuid.UUID) -> bool:
    """Remove the caller's vote; returns False if there was none."""
    existing = get_my_vote(store, post_id)
    if existing is None:
        return False
    store.delete(existing)
    store.commit()
    return True
