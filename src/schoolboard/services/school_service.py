"""Data access helpers for schools and school memberships."""
from __future__ import annotations

import logging
import uuid
from collections.abc import Sequence

from sqlalchemy import desc
from sqlalchemy.orm import joinedload

from schoolboard.core.errors import IntegrityFailure, NotFound
from schoolboard.models import School, UserSchool
from schoolboard.schemas.school import SchoolCreate, UserSchoolUpdate
from schoolboard.services.store import Store
from schoolboard.services.validation import validate

__all__ = [
    "add_user_school",
    "create_school",
    "delete_school",
    "filter_schools",
    "get_school",
    "list_school_options",
    "list_schools",
    "list_user_schools",
    "remove_user_school",
    "update_user_school",
]

logger = logging.getLogger(__name__)

DUPLICATE_SCHOOL = "A school with this name already exists"


def filter_schools(schools: Sequence[School], search: str | None) -> list[School]:
    """Case-insensitive substring match on the school name."""
    needle = (search or "").strip().lower()
    if not needle:
        return list(schools)
    return [school for school in schools if needle in school.name.lower()]


def list_schools(store: Store, *, limit: int, search: str | None = None) -> list[School]:
    """Return the newest schools, optionally narrowed by name."""
    schools = store.query(School).order_by(desc(School.created_at)).limit(limit).all()
    return filter_schools(schools, search)


def list_school_options(store: Store) -> list[School]:
    """Return every school ordered by name, for pickers."""
    return store.query(School).order_by(School.name).all()


def get_school(store: Store, school_id: uuid.UUID) -> School:
    return store.get(School, school_id, label="School")


def create_school(store: Store, *, name: str | None, location: str | None = None) -> School:
    """Add a school owned by the caller.

    Raises:
        ValidationFailure: If the name is blank or too long.
        AuthorizationFailure: If the caller is not signed in.
        IntegrityFailure: If a school with the same name exists.
    """
    data = validate(SchoolCreate, name=name, location=location)
    school = School(
        name=data.name,
        location=data.location,
        created_by=store.caller.user_id,
    )
    try:
        store.insert(school)
    except IntegrityFailure as err:
        if err.kind == "unique":
            raise IntegrityFailure(DUPLICATE_SCHOOL, kind="unique") from err
        raise
    store.commit()
    logger.info("School %r created by %s", school.name, store.caller.user_id)
    return school


def delete_school(store: Store, school_id: uuid.UUID) -> None:
    """Delete a school together with its posts and memberships.

    No policy grants this to regular members; only privileged callers pass.
    """
    school = get_school(store, school_id)
    store.delete(school)
    store.commit()
    logger.info("School %s deleted", school_id)


def list_user_schools(store: Store, profile_id: uuid.UUID) -> list[UserSchool]:
    """Return a profile's school links with the school loaded, newest first."""
    return (
        store.query(UserSchool)
        .options(joinedload(UserSchool.school))
        .filter(UserSchool.user_id == profile_id)
        .order_by(desc(UserSchool.added_at))
        .all()
    )


def add_user_school(store: Store, *, school_id: uuid.UUID, status: str) -> UserSchool:
    """Link the caller to a school as a current or past member."""
    status = validate(UserSchoolUpdate, status=status).status
    if store.db.get(School, school_id) is None:
        raise NotFound("School not found")
    link = UserSchool(user_id=store.caller.user_id, school_id=school_id, status=status)
    try:
        store.insert(link)
    except IntegrityFailure as err:
        if err.kind == "unique":
            raise IntegrityFailure(
                f"You already listed this school as {status}", kind="unique"
            ) from err
        raise
    store.commit()
    return link


def update_user_school(store: Store, link_id: uuid.UUID, *, status: str) -> UserSchool:
    status = validate(UserSchoolUpdate, status=status).status
    link = store.get(UserSchool, link_id, label="School link")
    try:
        store.update(link, {"status": status})
    except IntegrityFailure as err:
        if err.kind == "unique":
            raise IntegrityFailure(
                f"You already listed this school as {status}", kind="unique"
            ) from err
        raise
    store.commit()
    return link


def remove_user_school(store: Store, link_id: uuid.UUID) -> None:
    link = store.get(UserSchool, link_id, label="School link")
    store.delete(link)
    store.commit()
