"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL when DATABASE_URL is set, SQLite locally.
# Must be configured before the application modules read their settings.
if os.getenv("DATABASE_URL"):
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").rstrip("/") + "_test"
else:
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL
os.environ["ENVIRONMENT"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from taskapi.database import Base, build_engine, get_db  # noqa: E402
from taskapi.main import app  # noqa: E402
from taskapi.repositories import TaskRepository, UserRepository  # noqa: E402
from taskapi.schemas.user import UserCreate  # noqa: E402
from taskapi.services.task_service import TaskService  # noqa: E402
from taskapi.services.user_service import UserService  # noqa: E402

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

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
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_service(db):
    """User service bound to the test session."""
    return UserService(db, users=UserRepository(db), tasks=TaskRepository(db))


@pytest.fixture
def task_service(db):
    """Task service bound to the test session."""
    return TaskService(db, tasks=TaskRepository(db), users=UserRepository(db))


@pytest.fixture
def user(user_service):
    """A stored user to own tasks."""
    return user_service.create_user(UserCreate(email="owner@example.com", name="Owner"))


@pytest.fixture
def api_user(client):
    """Create a user over HTTP and return its JSON body."""
    response = client.post("/api/users", json={"email": "test@example.com", "name": "Test User"})
    assert response.status_code == 201
    return response.json()
