# src/schoolboard/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    auth_router,
    comments_router,
    posts_router,
    profiles_router,
    schools_router,
    user_schools_router,
    votes_router,
)

__all__ = [
    "auth_router",
    "schools_router",
    "profiles_router",
    "user_schools_router",
    "posts_router",
    "comments_router",
    "votes_router",
]
