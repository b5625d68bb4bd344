"""Page view composition.

Each view issues a few reads and joins, filters, and counts the results in
memory. Nothing here writes.
"""
from __future__ import annotations

import uuid
from collections import Counter
from collections.abc import Iterable, Sequence

from schoolboard.core.errors import ValidationFailure
from schoolboard.core.settings import settings
from schoolboard.db.time import as_utc
from schoolboard.models import POST_TYPES, Comment, Post, UserSchool, Vote
from schoolboard.schemas.pages import (
    CreatePostPage,
    FieldLimits,
    HomePage,
    PostTypeCounts,
    ProfilePage,
    SchoolPage,
    SchoolPostCard,
)
from schoolboard.schemas.post import (
    CONTENT_MAX,
    CONTENT_MIN,
    TITLE_MAX,
    TITLE_MIN,
    PostWithAuthor,
    PostWithAuthorAndSchool,
    PostWithSchool,
)
from schoolboard.schemas.profile import ProfileResponse
from schoolboard.schemas.school import SchoolOption, SchoolResponse, UserSchoolResponse
from schoolboard.schemas.vote import VoteTallyResponse
from schoolboard.services import post_service, profile_service, school_service, vote_service
from schoolboard.services.store import Store

__all__ = [
    "count_post_types",
    "create_post_view",
    "filter_posts_by_type",
    "home_view",
    "profile_view",
    "school_view",
    "split_user_schools",
]

POST_FILTERS = ("all", *POST_TYPES)


def count_post_types(posts: Iterable[Post]) -> PostTypeCounts:
    counts = Counter(post.post_type for post in posts)
    return PostTypeCounts(**{post_type: counts.get(post_type, 0) for post_type in POST_TYPES})


def filter_posts_by_type(posts: Sequence[Post], post_filter: str) -> list[Post]:
    if post_filter == "all":
        return list(posts)
    return [post for post in posts if post.post_type == post_filter]


def split_user_schools(
    links: Iterable[UserSchool],
) -> tuple[list[UserSchool], list[UserSchool]]:
    """Return ``(current, past)`` preserving input order."""
    current: list[UserSchool] = []
    past: list[UserSchool] = []
    for link in links:
        (current if link.status == "current" else past).append(link)
    return current, past


def home_view(store: Store, *, search: str | None = None) -> HomePage:
    schools = school_service.list_schools(
        store, limit=settings.home_school_limit, search=search
    )
    posts = post_service.list_recent_posts(store, limit=settings.home_recent_post_limit)
    return HomePage(
        search=search or None,
        schools=[SchoolResponse.model_validate(school) for school in schools],
        recent_posts=[PostWithAuthorAndSchool.model_validate(post) for post in posts],
    )


def profile_view(store: Store, profile_id: uuid.UUID | None = None) -> ProfilePage:
    """Show a member's profile; without an id, the caller's own."""
    own_id = store.caller.user_id
    if profile_id is None or profile_id == own_id:
        profile = profile_service.get_own_profile(store)
    else:
        profile = profile_service.get_profile(store, profile_id)

    links = school_service.list_user_schools(store, profile.id)
    current, past = split_user_schools(links)
    posts = post_service.list_profile_posts(store, profile.id)
    return ProfilePage(
        profile=ProfileResponse.model_validate(profile),
        is_own_profile=profile.id == own_id,
        member_since=as_utc(profile.created_at),
        current_schools=[UserSchoolResponse.model_validate(link) for link in current],
        past_schools=[UserSchoolResponse.model_validate(link) for link in past],
        posts=[PostWithSchool.model_validate(post) for post in posts],
    )


def create_post_view(store: Store) -> CreatePostPage:
    return CreatePostPage(
        schools=[SchoolOption.model_validate(s) for s in school_service.list_school_options(store)],
        post_types=list(POST_TYPES),
        default_post_type="general",
        title=FieldLimits(min_length=TITLE_MIN, max_length=TITLE_MAX),
        content=FieldLimits(min_length=CONTENT_MIN, max_length=CONTENT_MAX),
    )


def _comment_counts(store: Store, post_ids: list[uuid.UUID]) -> dict[uuid.UUID, int]:
    if not post_ids:
        return {}
    comments = store.query(Comment).filter(Comment.post_id.in_(post_ids)).all()
    return dict(Counter(comment.post_id for comment in comments))


def school_view(store: Store, school_id: uuid.UUID, *, post_filter: str = "all") -> SchoolPage:
    """School detail: per-type counts over all posts, list narrowed by ``post_filter``."""
    if post_filter not in POST_FILTERS:
        raise ValidationFailure(f"Filter must be one of: {', '.join(POST_FILTERS)}")
    school = school_service.get_school(store, school_id)
    posts = post_service.list_school_posts(store, school_id)
    visible = filter_posts_by_type(posts, post_filter)
    visible_ids = [post.id for post in visible]

    votes_by_post: dict[uuid.UUID, list[Vote]] = {post_id: [] for post_id in visible_ids}
    for vote in vote_service.list_votes(store, visible_ids):
        votes_by_post[vote.post_id].append(vote)
    comment_counts = _comment_counts(store, visible_ids)

    cards: list[SchoolPostCard] = []
    for post in visible:
        tally = vote_service.tally_votes(votes_by_post[post.id])
        cards.append(
            SchoolPostCard(
                **PostWithAuthor.model_validate(post).model_dump(),
                votes=VoteTallyResponse(
                    upvotes=tally.upvotes, downvotes=tally.downvotes, score=tally.score
                ),
                comment_count=comment_counts.get(post.id, 0),
            )
        )

    return SchoolPage(
        school=SchoolResponse.model_validate(school),
        counts=count_post_types(posts),
        filter=post_filter,  # type: ignore[arg-type]
        posts=cards,
    )
