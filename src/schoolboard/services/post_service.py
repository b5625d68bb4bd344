"""Service-level helpers for creating and managing posts."""
from __future__ import annotations

import logging
import uuid

from sqlalchemy import desc
from sqlalchemy.orm import joinedload

from schoolboard.core.errors import NotFound
from schoolboard.models import Post, School
from schoolboard.schemas.post import PostCreate, PostUpdate
from schoolboard.services.store import Store
from schoolboard.services.validation import validate

__all__ = [
    "create_post",
    "delete_post",
    "get_post",
    "list_profile_posts",
    "list_recent_posts",
    "list_school_posts",
    "update_post",
    "validate_post_input",
]

logger = logging.getLogger(__name__)


def validate_post_input(
    *,
    title: str | None,
    content: str | None,
    school_id: uuid.UUID | None,
    post_type: str | None = "general",
) -> PostCreate:
    """Check the post form fields in display order and report the first failure."""
    return validate(
        PostCreate, title=title, content=content, school_id=school_id, post_type=post_type
    )


def create_post(store: Store, data: PostCreate) -> Post:
    """Persist a post authored by the caller."""
    if store.db.get(School, data.school_id) is None:
        raise NotFound("School not found")
    post = Post(
        user_id=store.caller.user_id,
        school_id=data.school_id,
        title=data.title,
        content=data.content,
        post_type=data.post_type,
    )
    store.insert(post)
    store.commit()
    logger.info("Post %s created on school %s", post.id, post.school_id)
    return post


def get_post(store: Store, post_id: uuid.UUID) -> Post:
    return store.get(Post, post_id, label="Post")


def update_post(
    store: Store,
    post: Post,
    *,
    title: str | None = None,
    content: str | None = None,
    post_type: str | None = None,
) -> Post:
    """Edit the caller's own post; ``updated_at`` is refreshed by the store trigger."""
    update = validate(PostUpdate, title=title, content=content, post_type=post_type)
    changes = update.model_dump(exclude_none=True)
    if not changes:
        return post
    store.update(post, changes)
    store.commit()
    return post


def delete_post(store: Store, post: Post) -> None:
    """Delete a post; its comments and votes go with it."""
    post_id = post.id
    store.delete(post)
    store.commit()
    logger.info("Post %s deleted", post_id)


def list_recent_posts(store: Store, *, limit: int) -> list[Post]:
    """Newest posts across all schools with author and school loaded."""
    return (
        store.query(Post)
        .options(joinedload(Post.author), joinedload(Post.school))
        .order_by(desc(Post.created_at))
        .limit(limit)
        .all()
    )


def list_school_posts(store: Store, school_id: uuid.UUID) -> list[Post]:
    return (
        store.query(Post)
        .options(joinedload(Post.author))
        .filter(Post.school_id == school_id)
        .order_by(desc(Post.created_at))
        .all()
    )


def list_profile_posts(store: Store, profile_id: uuid.UUID) -> list[Post]:
    return (
        store.query(Post)
        .options(joinedload(Post.school))
        .filter(Post.user_id == profile_id)
        .order_by(desc(Post.created_at))
        .all()
    )
