"""Pytest configuration and fixtures."""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from mealmash import models  # noqa: F401
from mealmash.database import Base, get_db
from mealmash.main import app
from mealmash.models.ingredient import Ingredient
from mealmash.models.user import User
from mealmash.services.auth import create_access_token


class AuthHeaders(dict):
    """Dict subclass that also stores user_id."""

    def __init__(self, *args, user_id: int | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id


# Use test database - PostgreSQL in Docker, SQLite locally
if os.getenv("DATABASE_URL", "").startswith("postgresql"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/mealmash", "/mealmash_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

connect_args = {"check_same_thread": False} if "sqlite" in SQLALCHEMY_DATABASE_URL else {}
engine = create_engine(SQLALCHEMY_DATABASE_URL, connect_args=connect_args)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        # For PostgreSQL, create the test database
        from sqlalchemy_utils import create_database, database_exists

        # Create test database if it doesn't exist
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
def user(db):
    """A plain user row."""
    test_user = User(id=1, email="test@example.com", name="Test User")
    db.add(test_user)
    db.commit()
    return test_user


@pytest.fixture
def auth_headers(user):
    """Bearer token for ``user`` as issued by the auth service."""
    token = create_access_token(user.id, user.email)
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user.id)


@pytest.fixture
def admin_headers(db):
    """Bearer token for a catalog moderator."""
    admin = User(id=99, email="admin@example.com", name="Admin", is_admin=True)
    db.add(admin)
    db.commit()
    token = create_access_token(admin.id, admin.email)
    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=admin.id)


@pytest.fixture
def catalog(db):
    """A small enabled ingredient catalog keyed by lowercase name."""
    entries = [
        Ingredient(name="Tomatoes", category="Produce", aliases=["tomato"]),
        Ingredient(name="Flour", category="Grains", aliases=["all purpose flour"]),
        Ingredient(name="Eggs", category="Dairy", aliases=["egg"]),
        Ingredient(name="Green Onions", category="Produce", aliases=["scallions"]),
        Ingredient(name="Olive Oil", category="Condiments", aliases=[]),
        Ingredient(name="Salt", category="Spices", aliases=["kosher salt"]),
    ]
    db.add_all(entries)
    db.commit()
    return {ingredient.name.lower(): ingredient for ingredient in entries}
