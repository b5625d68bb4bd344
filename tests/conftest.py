# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("PASSWORD_HASH_STRENGTH", "min")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from schoolboard.db.session import Base  # noqa: E402
from schoolboard.db.session import get_db as app_get_session  # noqa: E402
from schoolboard.main import app as fastapi_app  # noqa: E402
from schoolboard.models import Post, School  # noqa: E402
from schoolboard.services import identity_service, post_service, school_service  # noqa: E402
from schoolboard.services.identity_service import IssuedSession  # noqa: E402
from schoolboard.services.policy import Caller  # noqa: E402
from schoolboard.services.store import Store  # noqa: E402

TEST_DB_URL = "sqlite://"
PASSWORD = "correct-horse"


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    """A fresh in-memory database per test; writes really commit."""
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture()
def db_session(session_factory: sessionmaker[Session]) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(
    app: FastAPI,
    session_factory: sessionmaker[Session],
) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def bearer(issued: IssuedSession) -> dict[str, str]:
    return {"Authorization": f"Bearer {issued.access_token}"}


def caller_for(issued: IssuedSession) -> Caller:
    return Caller(user_id=issued.identity.id, session_id=issued.session.id)


@pytest.fixture()
def test_user(db_session: Session) -> IssuedSession:
    """Signed-up user ``jane``."""
    return identity_service.sign_up(db_session, email="jane@example.com", password=PASSWORD)


@pytest.fixture()
def other_user(db_session: Session) -> IssuedSession:
    """Second signed-up user ``sam``."""
    return identity_service.sign_up(db_session, email="sam@example.com", password=PASSWORD)


@pytest.fixture()
def auth_token(test_user: IssuedSession) -> dict[str, str]:
    """Return authorization headers for the primary test user."""
    return bearer(test_user)


@pytest.fixture()
def other_auth_token(other_user: IssuedSession) -> dict[str, str]:
    """Return authorization headers for the secondary test user."""
    return bearer(other_user)


@pytest.fixture()
def user_store(db_session: Session, test_user: IssuedSession) -> Store:
    return Store(db_session, caller_for(test_user))


@pytest.fixture()
def other_store(db_session: Session, other_user: IssuedSession) -> Store:
    return Store(db_session, caller_for(other_user))


@pytest.fixture()
def test_school(user_store: Store) -> School:
    """``Lincoln High``, added by the primary test user."""
    return school_service.create_school(user_store, name="Lincoln High", location="Springfield")


@pytest.fixture()
def test_post(user_store: Store, test_school: School) -> Post:
    """A ``con`` review of the test school by the primary test user."""
    data = post_service.validate_post_input(
        title="Too much homework",
        content="Every night brings three hours of worksheets.",
        school_id=test_school.id,
        post_type="con",
    )
    return post_service.create_post(user_store, data)
