"""CRUD-style helpers for managing profiles."""
from __future__ import annotations

import uuid

from schoolboard.core.errors import AuthenticationFailure, IntegrityFailure, NotFound
from schoolboard.models import Profile
from schoolboard.schemas.profile import ProfileUpdateRequest
from schoolboard.services.provisioning import ensure_profile
from schoolboard.services.store import Store
from schoolboard.services.validation import validate

__all__ = [
    "get_own_profile",
    "get_profile",
    "update_profile",
]

_UNSET = object()


def get_profile(store: Store, profile_id: uuid.UUID) -> Profile:
    """Return a single profile by identity id."""
    return store.get(Profile, profile_id, label="Profile")


def get_own_profile(store: Store) -> Profile:
    """Return the caller's profile, provisioning it if the sign-up hook missed."""
    if store.caller.user_id is None:
        raise AuthenticationFailure()
    profile = ensure_profile(store.db, store.caller.user_id)
    if profile is None:
        raise NotFound("Profile not found")
    return profile


def update_profile(
    store: Store,
    profile: Profile,
    *,
    username: object = _UNSET,
    bio: object = _UNSET,
    avatar_url: object = _UNSET,
) -> Profile:
    """Apply partial updates; only the arguments actually passed are touched.

    Passing ``None`` (or a blank string) for ``bio``/``avatar_url`` clears it.
    """
    given = {
        name: value
        for name, value in (("username", username), ("bio", bio), ("avatar_url", avatar_url))
        if value is not _UNSET
    }
    request = validate(ProfileUpdateRequest, **given)
    changes = request.model_dump(include=set(given))
    if changes.get("username", _UNSET) is None:
        del changes["username"]

    if not changes:
        return profile

    try:
        store.update(profile, changes)
    except IntegrityFailure as err:
        if err.kind == "unique":
            raise IntegrityFailure("Username is already taken", kind="unique") from err
        raise
    store.commit()
    return profile
