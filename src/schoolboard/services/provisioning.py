"""Profile auto-provisioning for newly created identities.

Runs after the identity row is committed. It never raises: a failure leaves
the identity without a profile, and the next authenticated request retries
through :func:`ensure_profile`.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from schoolboard.core.settings import settings
from schoolboard.models import AuthIdentity, Profile

__all__ = ["derive_username", "ensure_profile", "provision_profile", "username_candidates"]

logger = logging.getLogger(__name__)


def derive_username(identity: AuthIdentity) -> str:
    """Return the requested username, or the local part of the email."""
    metadata = identity.user_metadata or {}
    requested = metadata.get("username")
    if isinstance(requested, str) and requested.strip():
        return requested.strip()
    return identity.email.split("@", 1)[0]


def username_candidates(base: str, identity_id: uuid.UUID) -> Iterator[str]:
    """Yield ``base``, then ``base1``, ``base2``, ... and finally an id-derived name."""
    yield base
    for suffix in range(1, settings.username_provision_attempts):
        yield f"{base}{suffix}"
    yield f"{base}-{identity_id.hex[:8]}"


def provision_profile(db: Session, identity: AuthIdentity) -> Profile | None:
    """Create the profile row for ``identity`` if it does not exist yet.

    Returns:
        The profile, or None when every candidate username collided or the
        store refused the insert.
    """
    existing = db.get(Profile, identity.id)
    if existing is not None:
        return existing

    identity_id = identity.id
    base = derive_username(identity)
    for candidate in username_candidates(base, identity_id):
        if db.query(Profile.id).filter(Profile.username == candidate).first() is not None:
            logger.warning("Username %r already taken; trying next candidate", candidate)
            continue

        profile = Profile(id=identity_id, username=candidate)
        db.add(profile)
        try:
            db.commit()
        except IntegrityError as err:
            # Lost a race for the username, or the profile now exists.
            db.rollback()
            logger.warning("Profile insert for %s rejected: %s", identity_id, err.orig)
            existing = db.get(Profile, identity_id)
            if existing is not None:
                return existing
            continue
        except SQLAlchemyError:
            db.rollback()
            logger.exception("Profile provisioning failed for identity %s", identity_id)
            return None

        logger.info("Provisioned profile %r for identity %s", candidate, identity_id)
        return profile

    logger.error("Could not provision a profile for identity %s", identity_id)
    return None


def ensure_profile(db: Session, identity_id: uuid.UUID) -> Profile | None:
    """Return the identity's profile, provisioning it on first use if missing."""
    profile = db.get(Profile, identity_id)
    if profile is not None:
        return profile
    identity = db.get(AuthIdentity, identity_id)
    if identity is None:
        return None
    return provision_profile(db, identity)
