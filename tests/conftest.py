"""Pytest configuration and fixtures."""

import os

# Settings are cached on first import, so the test environment goes first
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-with-at-least-32-bytes!"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from vocabmaster import models  # noqa: E402
from vocabmaster.core import container  # noqa: E402
from vocabmaster.database import Base, get_db  # noqa: E402
from vocabmaster.infrastructure.identity.token_service import create_access_token  # noqa: E402
from vocabmaster.main import app  # noqa: E402

TEST_USER_ID = 1
OTHER_USER_ID = 2

# In-memory SQLite shared across the test client's worker threads
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def test_user_id() -> int:
    """ID of the default test user."""
    return TEST_USER_ID


@pytest.fixture
def other_user_id() -> int:
    """ID of the second test user."""
    return OTHER_USER_ID


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Bearer token for the default test user."""
    return {"Authorization": f"Bearer {create_access_token(TEST_USER_ID)}"}


@pytest.fixture
def other_user_headers() -> dict[str, str]:
    """Bearer token for a second user."""
    return {"Authorization": f"Bearer {create_access_token(OTHER_USER_ID)}"}


@pytest.fixture
def client(db_session: Session, auth_headers: dict[str, str]) -> Generator[TestClient, Any, None]:
    """Create a test client authenticated as the default test user."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    container.review_session_store().reset()

    with TestClient(app, headers=auth_headers) as test_client:
        yield test_client

    app.dependency_overrides.clear()
    container.review_session_store().reset()


@pytest.fixture
def test_word_set(db_session: Session) -> models.WordSet:
    """A public word set owned by the test user and in their collection."""
    word_set = models.WordSet(
        owner_id=TEST_USER_ID,
        title="Everyday Verbs",
        description="Common verbs",
        category="verbs",
        difficulty="beginner",
        tags=["daily"],
        is_public=True,
        word_count=0,
    )
    db_session.add(word_set)
    db_session.commit()
    db_session.add(models.UserWordSet(user_id=TEST_USER_ID, word_set_id=word_set.id))
    db_session.commit()
    db_session.refresh(word_set)
    return word_set


@pytest.fixture
def test_words(db_session: Session, test_word_set: models.WordSet) -> list[models.Word]:
    """Three words in the test word set, in deck order."""
    words = [
        models.Word(
            word_set_id=test_word_set.id,
            english="run",
            chinese="跑",
            pronunciation="/rʌn/",
            example="I run every morning.",
            category="verbs",
        ),
        models.Word(word_set_id=test_word_set.id, english="eat", chinese="吃"),
        models.Word(word_set_id=test_word_set.id, english="sleep", chinese="睡觉"),
    ]
    for word in words:
        db_session.add(word)
        db_session.commit()
    test_word_set.word_count = len(words)
    db_session.commit()
    for word in words:
        db_session.refresh(word)
    return words


@pytest.fixture
def private_word_set(db_session: Session) -> models.WordSet:
    """A private word set owned by the other user."""
    word_set = models.WordSet(
        owner_id=OTHER_USER_ID,
        title="Secret Nouns",
        is_public=False,
        word_count=1,
    )
    db_session.add(word_set)
    db_session.commit()
    db_session.add(models.Word(word_set_id=word_set.id, english="key", chinese="钥匙"))
    db_session.add(models.UserWordSet(user_id=OTHER_USER_ID, word_set_id=word_set.id))
    db_session.commit()
    db_session.refresh(word_set)
    return word_set


@pytest.fixture
def foreign_public_word_set(db_session: Session) -> models.WordSet:
    """A public word set owned by the other user and not imported by the test user."""
    word_set = models.WordSet(owner_id=OTHER_USER_ID, title="Travel Phrases", is_public=True)
    db_session.add(word_set)
    db_session.commit()
    db_session.refresh(word_set)
    return word_set
