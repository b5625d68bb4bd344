"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from schoolboard.core.errors import AuthenticationFailure
from schoolboard.db.session import get_db
from schoolboard.services.identity_service import resolve_caller
from schoolboard.services.policy import Caller
from schoolboard.services.store import Store

# Anonymous requests are allowed through; routes that need a user say so.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_caller(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> Caller:
    """Resolve the request's caller from its bearer token.

    Returns an anonymous caller when no token is sent.

    Raises:
        AuthenticationFailure: If a token is sent but is invalid, expired, or
            belongs to a session that was signed out.
    """
    if credentials is None:
        return Caller.anonymous()
    return resolve_caller(db, credentials.credentials)


def get_current_caller(caller: Annotated[Caller, Depends(get_caller)]) -> Caller:
    """Require a signed-in caller."""
    if not caller.authenticated:
        raise AuthenticationFailure()
    return caller


CallerDep = Annotated[Caller, Depends(get_caller)]
CurrentCallerDep = Annotated[Caller, Depends(get_current_caller)]


def get_store(db: SessionDep, caller: CallerDep) -> Store:
    return Store(db, caller)


def get_member_store(db: SessionDep, caller: CurrentCallerDep) -> Store:
    return Store(db, caller)


# Reads run as whoever is calling; writes demand a signed-in caller up front.
StoreDep = Annotated[Store, Depends(get_store)]
MemberStoreDep = Annotated[Store, Depends(get_member_store)]
