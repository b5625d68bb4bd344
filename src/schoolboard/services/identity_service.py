"""Sign-up, sign-in, and session management."""
from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from schoolboard.core import security
from schoolboard.core.errors import (
    AuthenticationFailure,
    IntegrityFailure,
    NotFound,
    ValidationFailure,
)
from schoolboard.core.settings import settings
from schoolboard.db.time import utcnow
from schoolboard.models import AuthIdentity, AuthSession
from schoolboard.services.policy import Caller
from schoolboard.services.provisioning import provision_profile

__all__ = [
    "IssuedSession",
    "delete_identity",
    "get_identity",
    "resolve_caller",
    "sign_in",
    "sign_out",
    "sign_up",
]

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid login credentials"


@dataclass(frozen=True)
class IssuedSession:
    """Result of a successful sign-up or sign-in."""

    identity: AuthIdentity
    session: AuthSession
    access_token: str


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _open_session(db: Session, identity: AuthIdentity) -> IssuedSession:
    session = AuthSession(identity_id=identity.id)
    db.add(session)
    db.commit()
    db.refresh(session)
    token = security.create_access_token(identity.id, session.id)
    return IssuedSession(identity=identity, session=session, access_token=token)


def sign_up(
    db: Session,
    *,
    email: str,
    password: str,
    username: str | None = None,
) -> IssuedSession:
    """Create an identity, provision its profile, and open a session.

    Raises:
        ValidationFailure: If the password is too short.
        IntegrityFailure: If the email is already registered.
    """
    if len(password) < settings.password_min_length:
        raise ValidationFailure(
            f"Password must be at least {settings.password_min_length} characters"
        )

    normalized = _normalize_email(email)
    metadata: dict[str, str] = {}
    if username and username.strip():
        metadata["username"] = username.strip()

    identity = AuthIdentity(
        email=normalized,
        password_hash=security.hash_password(password),
        user_metadata=metadata,
    )
    db.add(identity)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise IntegrityFailure("User already registered", kind="unique") from err
    db.refresh(identity)
    logger.info("Created identity %s", identity.id)

    # Post-commit hook; never fails the sign-up.
    provision_profile(db, identity)

    return _open_session(db, identity)


def sign_in(db: Session, *, email: str, password: str) -> IssuedSession:
    """Verify credentials and open a new session."""
    identity = db.query(AuthIdentity).filter(
        AuthIdentity.email == _normalize_email(email)
    ).first()
    if identity is None or not security.verify_password(identity.password_hash, password):
        raise AuthenticationFailure(INVALID_CREDENTIALS)

    issued = _open_session(db, identity)
    logger.info("Identity %s signed in (session %s)", identity.id, issued.session.id)
    return issued


def sign_out(db: Session, caller: Caller) -> None:
    """Revoke the caller's current session."""
    if caller.session_id is None:
        raise AuthenticationFailure()
    session = db.get(AuthSession, caller.session_id)
    if session is None or not session.active:
        raise AuthenticationFailure()
    session.revoked_at = utcnow()
    db.commit()
    logger.info("Identity %s signed out (session %s)", caller.user_id, caller.session_id)


def resolve_caller(db: Session, token: str) -> Caller:
    """Turn a bearer token into a :class:`Caller`.

    Raises:
        AuthenticationFailure: If the token is invalid or its session is gone.
    """
    identity_id, session_id = security.decode_access_token(token)
    session = db.get(AuthSession, session_id)
    if session is None or not session.active or session.identity_id != identity_id:
        raise AuthenticationFailure()
    return Caller(user_id=identity_id, session_id=session_id)


def get_identity(db: Session, caller: Caller) -> AuthIdentity:
    """Return the identity behind an authenticated caller."""
    if caller.user_id is None:
        raise AuthenticationFailure()
    identity = db.get(AuthIdentity, caller.user_id)
    if identity is None:
        raise AuthenticationFailure("User not found")
    return identity


def delete_identity(db: Session, identity_id: uuid.UUID) -> None:
    """Delete an identity; its profile and everything it owns cascade."""
    identity = db.get(AuthIdentity, identity_id)
    if identity is None:
        raise NotFound("User not found")
    db.delete(identity)
    db.commit()
    logger.info("Deleted identity %s", identity_id)
