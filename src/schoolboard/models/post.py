# src/schoolboard/models/post.py
"""SQLAlchemy models for school reviews."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolboard.db.session import Base
from schoolboard.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .profile import Profile
    from .school import School
    from .vote import Vote

POST_TYPES = ("pro", "con", "general")


class Post(Base):
    """A review of a school: a pro, a con, or general discussion."""

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("post_type IN ('pro', 'con', 'general')", name="ck_posts_post_type"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    school_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("schools.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_type: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    # Maintained by the before_update trigger in models.triggers.
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    author: Mapped[Profile] = relationship("Profile", back_populates="posts")
    school: Mapped[School] = relationship("School", back_populates="posts")
    comments: Mapped[list[Comment]] = relationship(
        "Comment", back_populates="post", cascade="all, delete", passive_deletes=True
    )
    votes: Mapped[list[Vote]] = relationship(
        "Vote", back_populates="post", cascade="all, delete", passive_deletes=True
    )
