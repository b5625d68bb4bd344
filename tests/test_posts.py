# tests/test_posts.py
"""Tests for post endpoints."""

import pytest
from fastapi import status

from schoolboard.core.errors import ValidationFailure
from schoolboard.models import Post
from schoolboard.services import post_service

VALID_CONTENT = "The teachers really care about every student."


def _payload(school_id, /, **overrides):
    payload = {
        "title": "Great teachers",
        "content": VALID_CONTENT,
        "school_id": str(school_id),
        "post_type": "pro",
    }
    payload.update(overrides)
    return payload


def test_create_post(client, auth_token, test_school, test_user) -> None:
    response = client.post("/api/v1/posts/", json=_payload(test_school.id), headers=auth_token)
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["user_id"] == str(test_user.identity.id)
    assert body["school_id"] == str(test_school.id)
    assert body["post_type"] == "pro"


def test_create_post_defaults_to_general(client, auth_token, test_school) -> None:
    payload = _payload(test_school.id)
    del payload["post_type"]
    response = client.post("/api/v1/posts/", json=payload, headers=auth_token)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["post_type"] == "general"


@pytest.mark.parametrize(
    ("overrides", "detail"),
    [
        ({"title": "Hey"}, "Title must be at least 5 characters"),
        ({"title": "x" * 201}, "Title too long"),
        ({"content": "Too short"}, "Content must be at least 20 characters"),
        ({"content": "x" * 5001}, "Content too long"),
        ({"school_id": None}, "School is required"),
        ({"post_type": "rant"}, "Post type must be one of: 'pro', 'con' or 'general'"),
    ],
)
def test_create_post_validation(client, auth_token, test_school, overrides, detail) -> None:
    response = client.post(
        "/api/v1/posts/", json=_payload(test_school.id, **overrides), headers=auth_token
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"] == detail


def test_create_post_reports_first_failure(client, auth_token) -> None:
    response = client.post(
        "/api/v1/posts/",
        json={"title": "Hi", "content": "short", "school_id": None, "post_type": "bad"},
        headers=auth_token,
    )
    assert response.json()["detail"] == "Title must be at least 5 characters"


def test_create_post_trims_fields(client, auth_token, test_school) -> None:
    response = client.post(
        "/api/v1/posts/",
        json=_payload(test_school.id, title="   Great teachers   "),
        headers=auth_token,
    )
    assert response.json()["title"] == "Great teachers"


def test_create_post_unknown_school(client, auth_token) -> None:
    response = client.post(
        "/api/v1/posts/",
        json=_payload("00000000-0000-0000-0000-000000000000"),
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_create_post_requires_authentication(client, test_school) -> None:
    response = client.post("/api/v1/posts/", json=_payload(test_school.id))
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_get_post_includes_author_and_school(client, test_post) -> None:
    response = client.get(f"/api/v1/posts/{test_post.id}")
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["author"]["username"] == "jane"
    assert body["school"]["name"] == "Lincoln High"


def test_list_posts_newest_first(client, auth_token, test_post) -> None:
    client.post("/api/v1/posts/", json=_payload(test_post.school_id), headers=auth_token)
    response = client.get("/api/v1/posts/", params={"limit": 1})
    posts = response.json()
    assert len(posts) == 1
    assert posts[0]["title"] == "Great teachers"


def test_author_can_update_post(client, auth_token, test_post) -> None:
    response = client.patch(
        f"/api/v1/posts/{test_post.id}",
        json={"title": "Less homework now", "post_type": "general"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["title"] == "Less homework now"
    assert response.json()["post_type"] == "general"


def test_non_author_cannot_update_post(client, db_session, other_auth_token, test_post) -> None:
    """Sam tries to edit Jane's "con" post on Lincoln High."""
    response = client.patch(
        f"/api/v1/posts/{test_post.id}",
        json={"title": "Hijacked title"},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Not authorized"

    db_session.expire_all()
    assert db_session.get(Post, test_post.id).title == "Too much homework"


def test_non_author_cannot_delete_post(client, other_auth_token, test_post) -> None:
    response = client.delete(f"/api/v1/posts/{test_post.id}", headers=other_auth_token)
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_author_can_delete_post(client, auth_token, test_post) -> None:
    response = client.delete(f"/api/v1/posts/{test_post.id}", headers=auth_token)
    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"/api/v1/posts/{test_post.id}").status_code == status.HTTP_404_NOT_FOUND


def test_collection_without_trailing_slash(client, auth_token, test_school) -> None:
    created = client.post(
        "/api/v1/posts",
        json=_payload(test_school.id),
        headers=auth_token,
        follow_redirects=False,
    )
    assert created.status_code == status.HTTP_201_CREATED

    listed = client.get("/api/v1/posts", follow_redirects=False)
    assert listed.status_code == status.HTTP_200_OK
    assert [post["title"] for post in listed.json()] == ["Great teachers"]


def test_create_post_missing_school_field(client, auth_token, test_school) -> None:
    payload = _payload(test_school.id)
    del payload["school_id"]
    response = client.post("/api/v1/posts", json=payload, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"] == "School is required"


def test_update_post_checks_lengths(client, auth_token, test_post) -> None:
    response = client.patch(
        f"/api/v1/posts/{test_post.id}", json={"content": "tiny"}, headers=auth_token
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"] == "Content must be at least 20 characters"


def test_validate_post_input_reports_first_failure(test_school) -> None:
    with pytest.raises(ValidationFailure) as excinfo:
        post_service.validate_post_input(
            title="  Hi  ", content="short", school_id=None, post_type="bad"
        )
    assert excinfo.value.detail == "Title must be at least 5 characters"

    data = post_service.validate_post_input(
        title="  Great teachers ",
        content=VALID_CONTENT,
        school_id=test_school.id,
        post_type="pro",
    )
    assert data.title == "Great teachers"
