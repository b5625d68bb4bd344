"""Helpers for comments on posts."""
from __future__ import annotations

import uuid

from sqlalchemy.orm import joinedload

from schoolboard.models import Comment, Post
from schoolboard.schemas.comment import CommentCreate
from schoolboard.services.store import Store
from schoolboard.services.validation import validate

__all__ = ["add_comment", "delete_comment", "get_comment", "list_comments", "update_comment"]


def _validate_comment(content: str | None) -> str:
    return validate(CommentCreate, content=content).content


def list_comments(store: Store, post_id: uuid.UUID) -> list[Comment]:
    """Return a post's comments, oldest first."""
    return (
        store.query(Comment)
        .options(joinedload(Comment.author))
        .filter(Comment.post_id == post_id)
        .order_by(Comment.created_at)
        .all()
    )


def get_comment(store: Store, comment_id: uuid.UUID) -> Comment:
    return store.get(Comment, comment_id, label="Comment")


def add_comment(store: Store, post: Post, *, content: str | None) -> Comment:
    comment = Comment(
        post_id=post.id,
        user_id=store.caller.user_id,
        content=_validate_comment(content),
    )
    store.insert(comment)
    store.commit()
    return comment


def update_comment(store: Store, comment: Comment, *, content: str | None) -> Comment:
    store.update(comment, {"content": _validate_comment(content)})
    store.commit()
    return comment


def delete_comment(store: Store, comment: Comment) -> None:
    store.delete(comment)
    store.commit()
