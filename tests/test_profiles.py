# tests/test_profiles.py
"""Tests for profile endpoints."""

import pytest
from fastapi import status


def test_get_profile_is_public(client, test_user) -> None:
    response = client.get(f"/api/v1/profiles/{test_user.identity.id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["username"] == "jane"


def test_get_missing_profile(client) -> None:
    response = client.get("/api/v1/profiles/00000000-0000-0000-0000-000000000000")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Profile not found"


def test_me_requires_authentication(client) -> None:
    assert client.get("/api/v1/profiles/me").status_code == status.HTTP_401_UNAUTHORIZED


def test_update_own_profile(client, auth_token) -> None:
    response = client.patch(
        "/api/v1/profiles/me",
        json={"username": "jane_doe", "bio": "Parent of two", "avatar_url": "https://example.com/a.png"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_200_OK
    body = response.json()
    assert body["username"] == "jane_doe"
    assert body["bio"] == "Parent of two"
    assert body["avatar_url"] == "https://example.com/a.png"


def test_partial_update_leaves_other_fields(client, auth_token) -> None:
    client.patch("/api/v1/profiles/me", json={"bio": "Parent of two"}, headers=auth_token)
    response = client.patch("/api/v1/profiles/me", json={"avatar_url": "https://x.io/me.png"}, headers=auth_token)
    body = response.json()
    assert body["bio"] == "Parent of two"
    assert body["username"] == "jane"


def test_null_clears_bio(client, auth_token) -> None:
    client.patch("/api/v1/profiles/me", json={"bio": "Parent of two"}, headers=auth_token)
    response = client.patch("/api/v1/profiles/me", json={"bio": None}, headers=auth_token)
    assert response.json()["bio"] is None


def test_duplicate_username_rejected(client, auth_token, other_user) -> None:
    response = client.patch("/api/v1/profiles/me", json={"username": "sam"}, headers=auth_token)
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == "Username is already taken"


@pytest.mark.parametrize("username", ["jo", "x" * 31, "has space", "semi;colon"])
def test_invalid_username_rejected(client, auth_token, username) -> None:
    response = client.patch("/api/v1/profiles/me", json={"username": username}, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_bio_too_long(client, auth_token) -> None:
    response = client.patch("/api/v1/profiles/me", json={"bio": "x" * 501}, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"] == "Bio too long"


def test_profile_posts_and_schools(client, auth_token, test_user, test_post) -> None:
    client.post(
        "/api/v1/user-schools/",
        json={"school_id": str(test_post.school_id), "status": "past"},
        headers=auth_token,
    )

    posts = client.get(f"/api/v1/profiles/{test_user.identity.id}/posts").json()
    assert [p["id"] for p in posts] == [str(test_post.id)]
    assert posts[0]["school"]["name"] == "Lincoln High"

    schools = client.get(f"/api/v1/profiles/{test_user.identity.id}/schools").json()
    assert [(s["status"], s["school"]["name"]) for s in schools] == [("past", "Lincoln High")]
