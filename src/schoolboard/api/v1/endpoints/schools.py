# src/schoolboard/api/v1/endpoints/schools.py
"""School endpoints for the Schoolboard API."""

import uuid

from fastapi import APIRouter, Query, status

from schoolboard.api.v1.dependencies import MemberStoreDep, StoreDep
from schoolboard.models import School
from schoolboard.schemas.school import SchoolCreate, SchoolOption, SchoolResponse
from schoolboard.services import school_service

router = APIRouter(prefix="/schools", tags=["schools"])


@router.get("", response_model=list[SchoolResponse])
@router.get("/", response_model=list[SchoolResponse], include_in_schema=False)
async def list_schools(
    store: StoreDep,
    q: str | None = Query(None, description="Case-insensitive name search"),
    limit: int = Query(20, ge=1, le=100, description="Maximum number of schools to scan"),
) -> list[School]:
    """List the newest schools, optionally narrowed by name."""
    return school_service.list_schools(store, limit=limit, search=q)


@router.get("/options", response_model=list[SchoolOption])
async def list_school_options(store: StoreDep) -> list[School]:
    """All schools ordered by name, for pickers."""
    return school_service.list_school_options(store)


@router.get("/{school_id}", response_model=SchoolResponse)
async def get_school(school_id: uuid.UUID, store: StoreDep) -> School:
    return school_service.get_school(store, school_id)


@router.post("", response_model=SchoolResponse, status_code=status.HTTP_201_CREATED)
@router.post(
    "/", response_model=SchoolResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
async def create_school(payload: SchoolCreate, store: MemberStoreDep) -> School:
    """Add a school. Names are unique across the directory."""
    return school_service.create_school(store, name=payload.name, location=payload.location)
