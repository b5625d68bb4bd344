# src/schoolboard/api/v1/endpoints/auth.py
"""Authentication endpoints for the Schoolboard API."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from schoolboard.api.v1.dependencies import CurrentCallerDep, SessionDep
from schoolboard.models import AuthIdentity
from schoolboard.schemas.auth import (
    IdentityResponse,
    SignInRequest,
    SignUpRequest,
    TokenResponse,
)
from schoolboard.services import identity_service
from schoolboard.services.identity_service import IssuedSession

router = APIRouter(prefix="/auth", tags=["authentication"])


def _token_response(issued: IssuedSession) -> TokenResponse:
    return TokenResponse(
        access_token=issued.access_token,
        token_type="bearer",
        user_id=issued.identity.id,
        email=issued.identity.email,
    )


@router.post(
    "/signup",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sign_up(payload: SignUpRequest, db: SessionDep) -> TokenResponse:
    """Register with email and password.

    The profile is provisioned right after the identity is stored, using the
    requested username or the local part of the email.
    """
    issued = identity_service.sign_up(
        db,
        email=payload.email,
        password=payload.password,
        username=payload.username,
    )
    return _token_response(issued)


@router.post("/token", response_model=TokenResponse)
async def sign_in(payload: SignInRequest, db: SessionDep) -> TokenResponse:
    """Exchange email and password for a bearer token."""
    issued = identity_service.sign_in(db, email=payload.email, password=payload.password)
    return _token_response(issued)


@router.post("/signout", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(caller: CurrentCallerDep, db: SessionDep) -> Response:
    """Revoke the session behind the presented token."""
    identity_service.sign_out(db, caller)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/user", response_model=IdentityResponse)
async def get_user(caller: CurrentCallerDep, db: SessionDep) -> AuthIdentity:
    return identity_service.get_identity(db, caller)


@router.delete("/user", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(caller: CurrentCallerDep, db: SessionDep) -> Response:
    """Delete the caller's account along with everything it owns."""
    identity = identity_service.get_identity(db, caller)
    identity_service.delete_identity(db, identity.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
