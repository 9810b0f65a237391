"""
Dependency injection functions for FastAPI endpoints.

This module provides the dependency functions used across the application,
following the Dependency Injection pattern to supply repository instances
to route handlers.
"""

from fastapi import Depends
from sqlmodel import Session
from src.database import get_session
from src.repositories.author_repository import AuthorRepository
from src.repositories.book_repository import BookRepository
from src.repositories.interfaces import (
    AuthorRepositoryInterface,
    BookRepositoryInterface,
)


def get_author_repository(
    session: Session = Depends(get_session),
) -> AuthorRepositoryInterface:
    """Get an instance of the author repository."""
    return AuthorRepository(session)


def get_book_repository(
    session: Session = Depends(get_session),
) -> BookRepositoryInterface:
    """Get an instance of the book repository."""
    return BookRepository(session)
