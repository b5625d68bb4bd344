# src/schoolboard/models/identity.py
"""SQLAlchemy models for authenticated identities and their sessions."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import TYPE_CHECKING, Any

from sqlalchemy import JSON, DateTime, ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from schoolboard.db.session import Base
from schoolboard.db.time import utcnow

if TYPE_CHECKING:
    from .profile import Profile


class AuthIdentity(Base):
    """Sign-in identity; owns exactly one profile once provisioned."""

    __tablename__ = "auth_identities"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password_hash: Mapped[str] = mapped_column(Text, nullable=False)
    # Free-form sign-up metadata (e.g. the requested username).
    user_metadata: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    profile: Mapped[Profile | None] = relationship(
        "Profile",
        back_populates="identity",
        uselist=False,
        cascade="all, delete",
        passive_deletes=True,
    )
    sessions: Mapped[list[AuthSession]] = relationship(
        "AuthSession",
        back_populates="identity",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class AuthSession(Base):
    """A signed-in session; tokens naming a revoked session are refused."""

    __tablename__ = "auth_sessions"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    identity_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("auth_identities.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    revoked_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    identity: Mapped[AuthIdentity] = relationship("AuthIdentity", back_populates="sessions")

    @property
    def active(self) -> bool:
        """Return True while the session has not been signed out."""
        return self.revoked_at is None
