"""Password hashing and access-token helpers."""
from __future__ import annotations

import uuid
from datetime import UTC, datetime, timedelta
from typing import Any

import nacl.pwhash
from jose import JWTError, jwt
from nacl.exceptions import InvalidkeyError

from schoolboard.core.errors import AuthenticationFailure
from schoolboard.core.settings import settings

_ARGON2_LIMITS: dict[str, tuple[int, int]] = {
    "interactive": (
        nacl.pwhash.argon2id.OPSLIMIT_INTERACTIVE,
        nacl.pwhash.argon2id.MEMLIMIT_INTERACTIVE,
    ),
    "moderate": (
        nacl.pwhash.argon2id.OPSLIMIT_MODERATE,
        nacl.pwhash.argon2id.MEMLIMIT_MODERATE,
    ),
    "min": (
        nacl.pwhash.argon2id.OPSLIMIT_MIN,
        nacl.pwhash.argon2id.MEMLIMIT_MIN,
    ),
}


def hash_password(password: str) -> str:
    """Return an argon2id hash string for the password."""
    opslimit, memlimit = _ARGON2_LIMITS.get(
        settings.password_hash_strength, _ARGON2_LIMITS["interactive"]
    )
    hashed = nacl.pwhash.argon2id.str(
        password.encode("utf-8"),
        opslimit=opslimit,
        memlimit=memlimit,
    )
    return hashed.decode("ascii")


def verify_password(password_hash: str, password: str) -> bool:
    """Check a password against a stored hash.

    Returns:
        True if the password matches; False otherwise.
    """
    try:
        return nacl.pwhash.verify(password_hash.encode("ascii"), password.encode("utf-8"))
    except InvalidkeyError:
        return False


def create_access_token(
    subject: uuid.UUID,
    session_id: uuid.UUID,
    extra_claims: dict[str, Any] | None = None,
) -> str:
    """Create a JWT access token bound to an identity and a session."""
    to_encode: dict[str, Any] = {"sub": str(subject), "sid": str(session_id)}
    if extra_claims:
        to_encode.update(extra_claims)
    expire = datetime.now(UTC) + timedelta(minutes=settings.access_token_expire_minutes)
    to_encode["exp"] = expire
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> tuple[uuid.UUID, uuid.UUID]:
    """Decode a token and return ``(identity_id, session_id)``.

    Raises:
        AuthenticationFailure: If the token is malformed, expired, or lacks claims.
    """
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as err:
        raise AuthenticationFailure() from err

    subject = payload.get("sub")
    session_claim = payload.get("sid")
    if subject is None or session_claim is None:
        raise AuthenticationFailure()
    try:
        return uuid.UUID(subject), uuid.UUID(session_claim)
    except ValueError as err:
        raise AuthenticationFailure() from err
