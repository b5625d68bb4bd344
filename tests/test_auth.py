# tests/test_auth.py
"""Tests for sign-up, sign-in, sign-out, and account deletion."""

from fastapi import status

from schoolboard.models import AuthIdentity, Post, Profile, School

from conftest import PASSWORD


def test_signup_returns_token_and_provisions_profile(client) -> None:
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "jane@example.com", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["token_type"] == "bearer"
    assert body["email"] == "jane@example.com"

    me = client.get(
        "/api/v1/profiles/me",
        headers={"Authorization": f"Bearer {body['access_token']}"},
    )
    assert me.status_code == status.HTTP_200_OK
    assert me.json()["username"] == "jane"
    assert me.json()["id"] == body["user_id"]


def test_signup_uses_requested_username(client) -> None:
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "jane@example.com", "password": PASSWORD, "username": "janedoe"},
    )
    assert response.status_code == status.HTTP_201_CREATED

    profile = client.get(f"/api/v1/profiles/{response.json()['user_id']}")
    assert profile.json()["username"] == "janedoe"


def test_signup_normalizes_email(client) -> None:
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "Sam@Example.com", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["email"] == "sam@example.com"

    response = client.post(
        "/api/v1/auth/token",
        json={"email": "SAM@example.com", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_200_OK


def test_signup_duplicate_email_rejected(client, test_user) -> None:
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "jane@example.com", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == "User already registered"


def test_signup_short_password_rejected(client) -> None:
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "jane@example.com", "password": "abc"},
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"] == "Password must be at least 6 characters"


def test_signup_invalid_email_rejected(client) -> None:
    response = client.post(
        "/api/v1/auth/signup",
        json={"email": "not-an-email", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_token_with_valid_credentials(client, test_user) -> None:
    response = client.post(
        "/api/v1/auth/token",
        json={"email": "jane@example.com", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["user_id"] == str(test_user.identity.id)


def test_token_with_wrong_password(client, test_user) -> None:
    response = client.post(
        "/api/v1/auth/token",
        json={"email": "jane@example.com", "password": "wrong-password"},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid login credentials"


def test_token_for_unknown_email(client) -> None:
    response = client.post(
        "/api/v1/auth/token",
        json={"email": "nobody@example.com", "password": PASSWORD},
    )
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid login credentials"


def test_get_user(client, test_user, auth_token) -> None:
    response = client.get("/api/v1/auth/user", headers=auth_token)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["email"] == "jane@example.com"


def test_get_user_requires_token(client) -> None:
    response = client.get("/api/v1/auth/user")
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_garbage_token_rejected(client) -> None:
    response = client.get("/api/v1/auth/user", headers={"Authorization": "Bearer nonsense"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_signout_revokes_token(client, auth_token) -> None:
    response = client.post("/api/v1/auth/signout", headers=auth_token)
    assert response.status_code == status.HTTP_204_NO_CONTENT

    response = client.get("/api/v1/auth/user", headers=auth_token)
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_signout_leaves_other_sessions_alone(client, test_user, auth_token) -> None:
    second = client.post(
        "/api/v1/auth/token",
        json={"email": "jane@example.com", "password": PASSWORD},
    ).json()
    client.post("/api/v1/auth/signout", headers=auth_token)

    response = client.get(
        "/api/v1/auth/user",
        headers={"Authorization": f"Bearer {second['access_token']}"},
    )
    assert response.status_code == status.HTTP_200_OK


def test_delete_user_cascades(client, db_session, test_user, auth_token, test_post) -> None:
    school_id = test_post.school_id
    response = client.delete("/api/v1/auth/user", headers=auth_token)
    assert response.status_code == status.HTTP_204_NO_CONTENT

    db_session.expire_all()
    assert db_session.get(AuthIdentity, test_user.identity.id) is None
    assert db_session.get(Profile, test_user.identity.id) is None
    assert db_session.query(Post).count() == 0
    # The school outlives its creator.
    school = db_session.get(School, school_id)
    assert school is not None
    assert school.created_by is None
