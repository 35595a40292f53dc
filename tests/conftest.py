import os

os.environ.setdefault("ENV", "testing")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from main import app
from core.database import Base
from models.users import User
from utils.deps import get_db

SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False}
)

TestingSessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

TEST_PASSWORD = "secret123"


@pytest.fixture
def session_factory():
    """
    Creates a fresh, empty database for each test and hands out sessions bound to it.
    """
    Base.metadata.create_all(bind=engine)
    try:
        yield TestingSessionLocal
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session(session_factory) -> Generator[Session, None, None]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
async def client(session: Session):
    """
    Yields an HTTP client that talks to the app using the test database.
    """
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def registered_user(session: Session) -> User:
    """A user stored directly in the database; the pre-save hook hashes the password."""
    user = User(email="user@example.com", password=TEST_PASSWORD)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def other_user(session: Session) -> User:
    user = User(email="other@example.com", password=TEST_PASSWORD)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
async def auth_headers(client):
    """Token headers of a user created through the sign up endpoint."""
    response = await client.post("/users", json={"email": "a@x.com", "password": TEST_PASSWORD})
    assert response.status_code == 200
    return {
        "x-access-token": response.headers["x-access-token"],
        "x-refresh-token": response.headers["x-refresh-token"],
        "_id": str(response.json()["_id"]),
    }
