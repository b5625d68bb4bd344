# src/schoolboard/models/school.py
"""SQLAlchemy models for schools and the profile/school link table."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolboard.db.session import Base
from schoolboard.db.time import utcnow

if TYPE_CHECKING:
    from .post import Post
    from .profile import Profile

USER_SCHOOL_STATUSES = ("current", "past")


class School(Base):
    """A school that members review; names are unique across the forum."""

    __tablename__ = "schools"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, index=True
    )
    # Survives the creator's account deletion.
    created_by: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("auth_identities.id", ondelete="SET NULL"),
        nullable=True,
    )

    posts: Mapped[list[Post]] = relationship(
        "Post", back_populates="school", cascade="all, delete", passive_deletes=True
    )
    members: Mapped[list[UserSchool]] = relationship(
        "UserSchool", back_populates="school", cascade="all, delete", passive_deletes=True
    )


class UserSchool(Base):
    """Link between a profile and a school they attend or attended."""

    __tablename__ = "user_schools"
    __table_args__ = (
        CheckConstraint("status IN ('current', 'past')", name="ck_user_schools_status"),
        # At most one current and one past link per (user, school).
        UniqueConstraint("user_id", "school_id", "status", name="uq_user_schools_user_school_status"),
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
    )
    status: Mapped[str] = mapped_column(Text, nullable=False)
    added_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    profile: Mapped[Profile] = relationship("Profile", back_populates="user_schools")
    school: Mapped[School] = relationship("School", back_populates="members")
