"""
Shared fixtures: an in-memory SQLite database, a TestClient wired to it, and
helpers for creating users, tokens and entries.
"""
import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from datetime import datetime
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from journal_api.core.constants import Mood, Role
from journal_api.core.security import create_access_token, get_password_hash
from journal_api.core.utils import to_utc_naive
from journal_api.db.base import Base
from journal_api.db.session import get_db
from journal_api.main import app
from journal_api.models import JournalEntry, JournalTag, User

PASSWORD = "secret12"


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
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def make_user(db, username, role=Role.USER, is_active=True, password=PASSWORD):
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=get_password_hash(password),
        first_name=username.title(),
        role=role,
        is_active=is_active,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def token_for(user):
    return create_access_token(data={"sub": user.username, "user_id": user.id})


def auth_headers(user):
    return {"Authorization": f"Bearer {token_for(user)}"}


def make_entry(db, user, title="Entry", content="Some content", mood=Mood.NEUTRAL,
               tags=(), is_favorite=False, created_at=None):
    """Insert an entry directly; created_at is read as server-local time."""
    entry = JournalEntry(
        user_id=user.id,
        title=title,
        content=content,
        mood=mood,
        is_favorite=is_favorite,
        is_private=True,
    )
    entry.tag_links = [JournalTag(name=tag, position=i) for i, tag in enumerate(tags)]
    if created_at is not None:
        entry.created_at = to_utc_naive(created_at)
        entry.updated_at = entry.created_at
    db.add(entry)
    db.commit()
    db.refresh(entry)
    return entry


@pytest.fixture
def alice(db):
    return make_user(db, "alice")


@pytest.fixture
def bob(db):
    return make_user(db, "bob")


@pytest.fixture
def admin(db):
    return make_user(db, "root", role=Role.ADMIN)


@pytest.fixture
def now():
    # A Wednesday, so the Sunday-based week started three days earlier
    return datetime(2026, 10, 21, 12, 0)
