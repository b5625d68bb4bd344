# tests/test_schools.py
"""Tests for school endpoints."""

import pytest
from fastapi import status

from schoolboard.core.errors import ValidationFailure
from schoolboard.services import school_service


def test_create_school(client, auth_token, test_user) -> None:
    response = client.post(
        "/api/v1/schools/",
        json={"name": "  Lincoln High ", "location": "Springfield"},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["name"] == "Lincoln High"
    assert body["location"] == "Springfield"
    assert body["created_by"] == str(test_user.identity.id)


def test_create_school_blank_location_stored_as_null(client, auth_token) -> None:
    response = client.post(
        "/api/v1/schools/",
        json={"name": "Roosevelt", "location": "   "},
        headers=auth_token,
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["location"] is None


def test_create_school_requires_name(client, auth_token) -> None:
    response = client.post("/api/v1/schools/", json={"name": "   "}, headers=auth_token)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert response.json()["detail"] == "Name is required"


def test_create_school_requires_authentication(client) -> None:
    response = client.post("/api/v1/schools/", json={"name": "Roosevelt"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_duplicate_school_name_rejected(client, test_school, other_auth_token) -> None:
    """Another member adding "Lincoln High" again gets the duplicate-name error."""
    response = client.post(
        "/api/v1/schools/",
        json={"name": "Lincoln High"},
        headers=other_auth_token,
    )
    assert response.status_code == status.HTTP_409_CONFLICT
    assert response.json()["detail"] == "A school with this name already exists"


def test_get_school(client, test_school) -> None:
    response = client.get(f"/api/v1/schools/{test_school.id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Lincoln High"


def test_get_missing_school(client) -> None:
    response = client.get("/api/v1/schools/00000000-0000-0000-0000-000000000000")
    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "School not found"


def test_list_schools_newest_first_and_search(client, user_store) -> None:
    for name in ("Lincoln High", "Roosevelt Middle", "Lincoln Elementary"):
        school_service.create_school(user_store, name=name)

    response = client.get("/api/v1/schools/")
    names = [school["name"] for school in response.json()]
    assert names == ["Lincoln Elementary", "Roosevelt Middle", "Lincoln High"]

    response = client.get("/api/v1/schools/", params={"q": "LINCOLN"})
    names = [school["name"] for school in response.json()]
    assert names == ["Lincoln Elementary", "Lincoln High"]


def test_school_options_ordered_by_name(client, user_store) -> None:
    for name in ("Zion Prep", "Adams High", "Monroe Academy"):
        school_service.create_school(user_store, name=name)

    response = client.get("/api/v1/schools/options")
    assert [school["name"] for school in response.json()] == [
        "Adams High",
        "Monroe Academy",
        "Zion Prep",
    ]
    assert set(response.json()[0]) == {"id", "name"}


def test_collection_without_trailing_slash(client, auth_token) -> None:
    created = client.post(
        "/api/v1/schools",
        json={"name": "Roosevelt"},
        headers=auth_token,
        follow_redirects=False,
    )
    assert created.status_code == status.HTTP_201_CREATED

    listed = client.get("/api/v1/schools", follow_redirects=False)
    assert listed.status_code == status.HTTP_200_OK
    assert [school["name"] for school in listed.json()] == ["Roosevelt"]


def test_create_school_service_applies_schema_rules(user_store) -> None:
    school = school_service.create_school(user_store, name="  Roosevelt  ", location="  ")
    assert school.name == "Roosevelt"
    assert school.location is None

    with pytest.raises(ValidationFailure, match="Name too long"):
        school_service.create_school(user_store, name="x" * 201)
