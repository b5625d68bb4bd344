# src/schoolboard/api/v1/endpoints/posts.py
"""Post-related endpoints for the Schoolboard API."""

import uuid

from fastapi import APIRouter, Query, Response, status

from schoolboard.api.v1.dependencies import MemberStoreDep, StoreDep
from schoolboard.models import Comment, Post
from schoolboard.schemas.comment import CommentCreate, CommentResponse
from schoolboard.schemas.post import (
    PostCreate,
    PostResponse,
    PostUpdate,
    PostWithAuthorAndSchool,
)
from schoolboard.services import comment_service, post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostWithAuthorAndSchool])
@router.get("/", response_model=list[PostWithAuthorAndSchool], include_in_schema=False)
async def list_posts(
    store: StoreDep,
    limit: int = Query(10, ge=1, le=100, description="Maximum number of posts to return"),
) -> list[Post]:
    """List the newest posts across all schools."""
    return post_service.list_recent_posts(store, limit=limit)


@router.get("/{post_id}", response_model=PostWithAuthorAndSchool)
async def get_post(post_id: uuid.UUID, store: StoreDep) -> Post:
    return post_service.get_post(store, post_id)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/", response_model=PostResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
async def create_post(payload: PostCreate, store: MemberStoreDep) -> Post:
    """Publish a review on a school.

    Fields are checked in order (title, content, school, type) and the first
    failing rule is reported.
    """
    return post_service.create_post(store, payload)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(post_id: uuid.UUID, payload: PostUpdate, store: MemberStoreDep) -> Post:
    """Edit a post. Only its author may do so."""
    post = post_service.get_post(store, post_id)
    return post_service.update_post(
        store,
        post,
        title=payload.title,
        content=payload.content,
        post_type=payload.post_type,
    )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: uuid.UUID, store: MemberStoreDep) -> Response:
    """Delete a post along with its comments and votes."""
    post = post_service.get_post(store, post_id)
    post_service.delete_post(store, post)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(post_id: uuid.UUID, store: StoreDep) -> list[Comment]:
    post_service.get_post(store, post_id)
    return comment_service.list_comments(store, post_id)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: uuid.UUID,
    payload: CommentCreate,
    store: MemberStoreDep,
) -> Comment:
    post = post_service.get_post(store, post_id)
    return comment_service.add_comment(store, post, content=payload.content)
