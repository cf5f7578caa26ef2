"""
Test configuration and fixtures for Chirpy.
This centralizes all test setup, making individual tests clean.
"""

import os

# Point the application engine at the test database before it is imported
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from main import create_app
from chirpy_app.config import Settings
from chirpy_app.database.connection import Base, get_db

# Test database configuration
SQLALCHEMY_DATABASE_URL = os.environ["DATABASE_URL"]
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    This ensures tests are isolated and don't affect each other.
    """
    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def static_dir(tmp_path):
    """A small file server root with an index page and one asset"""
    (tmp_path / "index.html").write_text("<html><body>Welcome to Chirpy</body></html>")
    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG fake logo")
    return tmp_path


@pytest.fixture
def make_client(db_session, static_dir):
    """
    Factory for test clients.

    Each call builds a new app (so a new hit counter) for the given platform
    and extra Settings fields, with the database dependency overridden.
    """
    clients = []

    def _make_client(platform: str = "dev", overrides: dict = None, **settings_fields) -> TestClient:
        app_settings = Settings(platform=platform, static_dir=str(static_dir), **settings_fields)
        app = create_app(app_settings)

        def override_get_db():
            yield db_session

        app.dependency_overrides[get_db] = override_get_db
        for dependency, override in (overrides or {}).items():
            app.dependency_overrides[dependency] = override

        test_client = TestClient(app)
        test_client.__enter__()
        clients.append(test_client)
        return test_client

    yield _make_client

    for test_client in clients:
        test_client.__exit__(None, None, None)
        test_client.app.dependency_overrides.clear()


@pytest.fixture
def client(make_client):
    """Client for an app running on the dev platform"""
    return make_client("dev")


@pytest.fixture
def production_client(make_client):
    """Client for an app running outside dev (reset is forbidden)"""
    return make_client("production")


@pytest.fixture
def user_id(client):
    """Id of a freshly created user"""
    response = client.post("/api/users", json={"email": "saul@bettercall.com"})
    assert response.status_code == 201
    return response.json()["id"]
