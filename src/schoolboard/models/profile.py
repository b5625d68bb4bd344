# src/schoolboard/models/profile.py
"""Public profile attached one-to-one to an identity."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolboard.db.session import Base
from schoolboard.db.time import utcnow

if TYPE_CHECKING:
    from .identity import AuthIdentity
    from .post import Post
    from .school import UserSchool


class Profile(Base):
    """Public persona of an identity.

    The primary key is the identity id itself, so an identity can never own
    more than one profile.
    """

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("auth_identities.id", ondelete="CASCADE"),
        primary_key=True,
    )
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    identity: Mapped[AuthIdentity] = relationship("AuthIdentity", back_populates="profile")
    posts: Mapped[list[Post]] = relationship(
        "Post", back_populates="author", cascade="all, delete", passive_deletes=True
    )
    user_schools: Mapped[list[UserSchool]] = relationship(
        "UserSchool", back_populates="profile", cascade="all, delete", passive_deletes=True
    )
