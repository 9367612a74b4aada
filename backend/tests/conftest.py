"""
Shared fixtures: in-memory SQLite datastore and a TestClient wired to it.
"""
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["AUTO_CREATE_TABLES"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from videoteca.core.auth import RequestContext, create_access_token, get_current_user
from videoteca.db import Base, get_db
from videoteca.main import app
from videoteca import models  # noqa: F401


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """Client whose requests run against the in-memory database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login_as():
    """Bypass token checks and authenticate every request as ``user_id``."""
    def _login_as(user_id: str):
        app.dependency_overrides[get_current_user] = lambda: RequestContext(user_id=user_id)
    yield _login_as
    app.dependency_overrides.pop(get_current_user, None)


@pytest.fixture
def auth_headers():
    """Real signed bearer header for ``user_id``."""
    def _auth_headers(user_id: str, email: str = None):
        token = create_access_token({"sub": user_id, "email": email})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers
