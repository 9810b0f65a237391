"""
Shared pytest fixtures for all tests.
"""

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.repositories import models  # noqa: F401


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite engine shared across sessions."""
    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a session bound to the in-memory database."""
    with Session(engine) as session:
        yield session
