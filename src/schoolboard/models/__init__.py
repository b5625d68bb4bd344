# src/schoolboard/models/__init__.py
"""SQLAlchemy models for the Schoolboard application."""

from .comment import Comment
from .identity import AuthIdentity, AuthSession
from .post import POST_TYPES, Post
from .profile import Profile
from .school import USER_SCHOOL_STATUSES, School, UserSchool
from .vote import VOTE_TYPES, Vote

from . import triggers  # noqa: E402,F401  (registers mapper events)

__all__ = [
    "AuthIdentity", "AuthSession",
    "Comment",
    "Post", "POST_TYPES",
    "Profile",
    "School", "UserSchool", "USER_SCHOOL_STATUSES",
    "Vote", "VOTE_TYPES",
]
