"""Pytest configuration and fixtures."""

import os

# Use test database - MySQL when DATABASE_URL is provided, SQLite locally.
# Must be set before any src module reads the settings.
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace(
        "/ecommerce_db", "/ecommerce_db_test"
    )
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("ENVIRONMENT", "development")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from src.database import Base, SessionLocal, acquire, engine, get_db  # noqa: E402
from src.main import app  # noqa: E402
from src.services.user_repository import UserRepository  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        yield acquire(db)

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def repo(db):
    """User repository bound to the test session."""
    return UserRepository(db)


@pytest.fixture
def registered_user(client):
    """Sign up a user through the API and return the response body."""
    response = client.post(
        "/auth/signup",
        json={"name": "Test User", "email": "test@example.com", "password": "testpass123"},
    )
    assert response.status_code == 201
    return response.json()["user"]
