# src/schoolboard/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .auth import router as auth_router
from .comments import router as comments_router
from .posts import router as posts_router
from .profiles import router as profiles_router
from .schools import router as schools_router
from .user_schools import router as user_schools_router
from .votes import router as votes_router

__all__ = [
    "auth_router",
    "schools_router",
    "profiles_router",
    "user_schools_router",
    "posts_router",
    "comments_router",
    "votes_router",
]
