# src/schoolboard/api/v1/endpoints/profiles.py
"""Profile endpoints for the Schoolboard API."""

import uuid

from fastapi import APIRouter

from schoolboard.api.v1.dependencies import MemberStoreDep, StoreDep
from schoolboard.models import Post, Profile, UserSchool
from schoolboard.schemas.post import PostWithSchool
from schoolboard.schemas.profile import ProfileResponse, ProfileUpdateRequest
from schoolboard.schemas.school import UserSchoolResponse
from schoolboard.services import post_service, profile_service, school_service

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.get("/me", response_model=ProfileResponse)
async def get_my_profile(store: MemberStoreDep) -> Profile:
    """Return the caller's profile, creating it if sign-up could not."""
    return profile_service.get_own_profile(store)


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    payload: ProfileUpdateRequest,
    store: MemberStoreDep,
) -> Profile:
    """Update the caller's username, bio, or avatar.

    Only fields present in the request body are changed.
    """
    profile = profile_service.get_own_profile(store)
    changes = payload.model_dump(exclude_unset=True)
    return profile_service.update_profile(store, profile, **changes)


@router.get("/{profile_id}", response_model=ProfileResponse)
async def get_profile(profile_id: uuid.UUID, store: StoreDep) -> Profile:
    return profile_service.get_profile(store, profile_id)


@router.get("/{profile_id}/schools", response_model=list[UserSchoolResponse])
async def list_profile_schools(profile_id: uuid.UUID, store: StoreDep) -> list[UserSchool]:
    """Schools a profile has listed, newest first."""
    profile_service.get_profile(store, profile_id)
    return school_service.list_user_schools(store, profile_id)


@router.get("/{profile_id}/posts", response_model=list[PostWithSchool])
async def list_profile_posts(profile_id: uuid.UUID, store: StoreDep) -> list[Post]:
    profile_service.get_profile(store, profile_id)
    return post_service.list_profile_posts(store, profile_id)
