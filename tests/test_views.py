# tests/test_views.py
"""Tests for the in-memory helpers behind the page views."""

import pytest

from schoolboard.core.errors import ValidationFailure
from schoolboard.models import Post, UserSchool
from schoolboard.services import views


def _posts(*types):
    return [Post(title=f"post {i}", post_type=post_type) for i, post_type in enumerate(types)]


def test_count_post_types() -> None:
    counts = views.count_post_types(_posts("pro", "con", "pro", "general"))
    assert counts.model_dump() == {"pro": 2, "con": 1, "general": 1}
    assert views.count_post_types([]).model_dump() == {"pro": 0, "con": 0, "general": 0}


def test_filter_posts_by_type() -> None:
    posts = _posts("pro", "con", "pro")
    assert views.filter_posts_by_type(posts, "all") == posts
    assert [p.title for p in views.filter_posts_by_type(posts, "pro")] == ["post 0", "post 2"]
    assert views.filter_posts_by_type(posts, "general") == []


def test_split_user_schools_keeps_order() -> None:
    links = [
        UserSchool(status="past", school_id=None),
        UserSchool(status="current", school_id=None),
        UserSchool(status="past", school_id=None),
    ]
    current, past = views.split_user_schools(links)
    assert current == [links[1]]
    assert past == [links[0], links[2]]


def test_school_view_rejects_unknown_filter(user_store, test_school) -> None:
    with pytest.raises(ValidationFailure):
        views.school_view(user_store, test_school.id, post_filter="bogus")


def test_home_view_limits(user_store, monkeypatch) -> None:
    from schoolboard.core.settings import settings
    from schoolboard.services import school_service

    monkeypatch.setattr(settings, "home_school_limit", 2)
    for name in ("Adams", "Brook", "Cedar"):
        school_service.create_school(user_store, name=name)

    page = views.home_view(user_store)
    assert [s.name for s in page.schools] == ["Cedar", "Brook"]
    assert page.search is None


def test_school_view_counts_fetched_comments(engine, user_store, other_store, test_post) -> None:
    from sqlalchemy import event

    from schoolboard.services import comment_service, post_service

    quiet = post_service.create_post(
        user_store,
        post_service.validate_post_input(
            title="Quiet hallways",
            content="Nobody has commented on this one yet.",
            school_id=test_post.school_id,
            post_type="general",
        ),
    )
    comment_service.add_comment(other_store, test_post, content="So true")
    comment_service.add_comment(user_store, test_post, content="Still true")

    statements: list[str] = []

    def _record(conn, cursor, statement, parameters, context, executemany) -> None:
        statements.append(statement.lower())

    event.listen(engine, "before_cursor_execute", _record)
    try:
        page = views.school_view(user_store, test_post.school_id)
    finally:
        event.remove(engine, "before_cursor_execute", _record)

    counts = {card.id: card.comment_count for card in page.posts}
    assert counts == {test_post.id: 2, quiet.id: 0}
    assert not any("count(" in statement for statement in statements)
