# src/schoolboard/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .auth import IdentityResponse, SignInRequest, SignUpRequest, TokenResponse
from .comment import CommentCreate, CommentResponse, CommentUpdate
from .pages import AuthPage, CreatePostPage, HomePage, ProfilePage, SchoolPage
from .post import (
    PostCreate,
    PostResponse,
    PostUpdate,
    PostWithAuthor,
    PostWithAuthorAndSchool,
    PostWithSchool,
)
from .profile import AuthorSummary, ProfileResponse, ProfileUpdateRequest
from .school import (
    SchoolCreate,
    SchoolOption,
    SchoolResponse,
    UserSchoolCreate,
    UserSchoolResponse,
    UserSchoolUpdate,
)
from .vote import VoteCreate, VoteStatus, VoteTallyResponse

__all__ = [
    "IdentityResponse", "SignInRequest", "SignUpRequest", "TokenResponse",
    "CommentCreate", "CommentResponse", "CommentUpdate",
    "AuthPage", "CreatePostPage", "HomePage", "ProfilePage", "SchoolPage",
    "PostCreate", "PostResponse", "PostUpdate",
    "PostWithAuthor", "PostWithAuthorAndSchool", "PostWithSchool",
    "AuthorSummary", "ProfileResponse", "ProfileUpdateRequest",
    "SchoolCreate", "SchoolOption", "SchoolResponse",
    "UserSchoolCreate", "UserSchoolResponse", "UserSchoolUpdate",
    "VoteCreate", "VoteStatus", "VoteTallyResponse",
]
