"""View models returned by the page routes."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel

from .post import PostWithAuthor, PostWithAuthorAndSchool, PostWithSchool
from .profile import ProfileResponse
from .school import SchoolOption, SchoolResponse, UserSchoolResponse
from .vote import VoteTallyResponse

PostFilter = Literal["all", "pro", "con", "general"]


class AuthPage(BaseModel):
    page: Literal["auth"] = "auth"
    sign_up_url: str
    sign_in_url: str


class HomePage(BaseModel):
    page: Literal["home"] = "home"
    search: str | None
    schools: list[SchoolResponse]
    recent_posts: list[PostWithAuthorAndSchool]


class ProfilePage(BaseModel):
    page: Literal["profile"] = "profile"
    profile: ProfileResponse
    is_own_profile: bool
    member_since: datetime
    current_schools: list[UserSchoolResponse]
    past_schools: list[UserSchoolResponse]
    posts: list[PostWithSchool]


class FieldLimits(BaseModel):
    min_length: int
    max_length: int


class CreatePostPage(BaseModel):
    page: Literal["create-post"] = "create-post"
    schools: list[SchoolOption]
    post_types: list[str]
    default_post_type: str
    title: FieldLimits
    content: FieldLimits


class PostTypeCounts(BaseModel):
    pro: int = 0
    con: int = 0
    general: int = 0


class SchoolPostCard(PostWithAuthor):
    votes: VoteTallyResponse
    comment_count: int


class SchoolPage(BaseModel):
    page: Literal["school"] = "school"
    school: SchoolResponse
    counts: PostTypeCounts
    filter: PostFilter
    posts: list[SchoolPostCard]
