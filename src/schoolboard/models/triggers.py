"""Row-level triggers expressed as SQLAlchemy mapper events."""

from __future__ import annotations

from typing import Any

from sqlalchemy import event

from schoolboard.db.time import utcnow

from .comment import Comment
from .post import Post


def _touch_updated_at(_mapper: Any, _connection: Any, target: Post | Comment) -> None:
    # Overrides any client-supplied value.
    target.updated_at = utcnow()


for _model in (Post, Comment):
    event.listen(_model, "before_update", _touch_updated_at)
