# src/schoolboard/api/v1/endpoints/comments.py
"""Comment endpoints for the Schoolboard API.

Comments are listed and created under ``/posts/{post_id}/comments``; this
router only edits and removes them.
"""

import uuid

from fastapi import APIRouter, Response, status

from schoolboard.api.v1.dependencies import MemberStoreDep
from schoolboard.models import Comment
from schoolboard.schemas.comment import CommentResponse, CommentUpdate
from schoolboard.services import comment_service

router = APIRouter(prefix="/comments", tags=["comments"])


@router.patch("/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: uuid.UUID,
    payload: CommentUpdate,
    store: MemberStoreDep,
) -> Comment:
    comment = comment_service.get_comment(store, comment_id)
    return comment_service.update_comment(store, comment, content=payload.content)


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: uuid.UUID, store: MemberStoreDep) -> Response:
    comment = comment_service.get_comment(store, comment_id)
    comment_service.delete_comment(store, comment)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
