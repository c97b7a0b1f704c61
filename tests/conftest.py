"""
Test configuration and fixtures
"""
import itertools
import os
from datetime import timedelta

# Configure the app before it is imported: in-memory DB, fixed secret, no OpenAI.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ["OPENAI_API_KEY"] = ""

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import app  # noqa: E402
from app.auth.handlers import register  # noqa: E402
from app.challenges.handlers import create_challenge  # noqa: E402
from app.db.base import Base, utcnow  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.projects.handlers import create_project  # noqa: E402
from app.resources.handlers import create_resource  # noqa: E402
from app.tutorials.handlers import create_tutorial  # noqa: E402

# Create in-memory SQLite database for testing
engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

LONG_CONTENT = (
    "# Introduction\nWhat this tutorial covers and why it matters.\n\n"
    "# Setup\nInstall the toolchain and create a new project.\n\n"
    "# Building\nWrite the first component step by step."
)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override"""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    counter = itertools.count(1)

    def _make(email=None, password="password123", full_name="Test User", **fields):
        n = next(counter)
        user = register(db_session, email or f"user{n}@example.com", password, full_name)
        if fields:
            for key, value in fields.items():
                setattr(user, key, value)
            db_session.commit()
            db_session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_tutorial(db_session):
    counter = itertools.count(1)

    def _make(title=None, **fields):
        n = next(counter)
        data = {
            "title": title or f"Tutorial number {n}",
            "description": "A tutorial description that is long enough.",
            "content": LONG_CONTENT,
            "tech_stack": ["react", "typescript"],
            "difficulty": "beginner",
            "estimated_time": 30,
        }
        data.update(fields)
        return create_tutorial(db_session, **data)

    return _make


@pytest.fixture
def make_project(db_session):
    counter = itertools.count(1)

    def _make(title=None, **fields):
        n = next(counter)
        data = {
            "title": title or f"Project number {n}",
            "description": "A project description that is long enough.",
            "tech_stack": ["python", "fastapi"],
            "difficulty": "intermediate",
        }
        data.update(fields)
        return create_project(db_session, **data)

    return _make


@pytest.fixture
def make_resource(db_session):
    counter = itertools.count(1)

    def _make(title=None, **fields):
        n = next(counter)
        data = {
            "title": title or f"Resource {n}",
            "description": "A handy downloadable resource.",
            "category": "cheatsheets",
            "file_url": f"https://cdn.example.com/files/resource-{n}.pdf",
            "file_size": 2048,
            "file_type": "application/pdf",
        }
        data.update(fields)
        return create_resource(db_session, **data)

    return _make


@pytest.fixture
def make_challenge(db_session):
    counter = itertools.count(1)

    def _make(title=None, points_reward=100, start_offset=timedelta(days=-1), end_offset=timedelta(days=6), **fields):
        n = next(counter)
        now = utcnow()
        data = {
            "title": title or f"Challenge number {n}",
            "description": "Complete the task within the window to earn points.",
            "type": "tutorial",
            "points_reward": points_reward,
            "start_date": now + start_offset,
            "end_date": now + end_offset,
        }
        data.update(fields)
        return create_challenge(db_session, **data)

    return _make
