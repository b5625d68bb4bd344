# src/schoolboard/api/v1/endpoints/user_schools.py
"""Endpoints for linking profiles to the schools they attend or attended."""

import uuid

from fastapi import APIRouter, Response, status

from schoolboard.api.v1.dependencies import MemberStoreDep
from schoolboard.models import UserSchool
from schoolboard.schemas.school import UserSchoolCreate, UserSchoolResponse, UserSchoolUpdate
from schoolboard.services import school_service

router = APIRouter(prefix="/user-schools", tags=["user-schools"])


@router.post("", response_model=UserSchoolResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/",
    response_model=UserSchoolResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def add_user_school(payload: UserSchoolCreate, store: MemberStoreDep) -> UserSchool:
    """List a school on the caller's profile as current or past."""
    return school_service.add_user_school(
        store, school_id=payload.school_id, status=payload.status
    )


@router.patch("/{link_id}", response_model=UserSchoolResponse)
async def update_user_school(
    link_id: uuid.UUID,
    payload: UserSchoolUpdate,
    store: MemberStoreDep,
) -> UserSchool:
    return school_service.update_user_school(store, link_id, status=payload.status)


@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def remove_user_school(link_id: uuid.UUID, store: MemberStoreDep) -> Response:
    school_service.remove_user_school(store, link_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
