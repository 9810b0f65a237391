"""
Shared pytest fixtures for repository tests.
"""

import pytest
from sqlmodel import Session
from .author_repository import AuthorRepository
from .book_repository import BookRepository


@pytest.fixture(name="author_repo")
def author_repo_fixture(session: Session) -> AuthorRepository:
    """Create an AuthorRepository instance with an in-memory database session."""
    return AuthorRepository(session)


@pytest.fixture(name="book_repo")
def book_repo_fixture(session: Session) -> BookRepository:
    """Create a BookRepository instance with an in-memory database session."""
    return BookRepository(session)
