"""
pytest configuration
Provides the database, repository and client fixtures
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.init_db import create_all_tables
from app.main import create_app
from app.modules.posts.services.repository import (
    PersistenceError, PostRepository, SQLAlchemyPostRepository
)


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_all_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for arranging data directly in the database"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def repository(session_factory):
    return SQLAlchemyPostRepository(session_factory)


@pytest.fixture
def client(repository):
    """Client backed by the real SQLAlchemy repository"""
    return TestClient(create_app(repository))


@pytest.fixture
def mock_repository():
    """Spy repository; every method is an AsyncMock"""
    return AsyncMock(spec=PostRepository)


@pytest.fixture
def mock_client(mock_repository):
    return TestClient(create_app(mock_repository))


@pytest.fixture
def failing_repository(mock_repository):
    """Repository whose every call raises a storage error"""
    for name in ("find_all", "find_by_id", "insert", "update", "remove", "find_comments"):
        getattr(mock_repository, name).side_effect = PersistenceError("database is unreachable")
    return mock_repository
