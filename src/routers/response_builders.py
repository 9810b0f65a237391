"""Helper functions for building API response models."""

from src.repositories.models import (
    AuthorRead,
    AuthorResponse,
    BookRead,
    BookResponse,
    BookWithAuthor,
    BookWithAuthorResponse,
)


def build_author_response(author: AuthorRead) -> AuthorResponse:
    """Build an AuthorResponse from an AuthorRead model."""
    return AuthorResponse(id=author.id, name=author.name)


def build_book_response(book: BookRead) -> BookResponse:
    """Build a BookResponse carrying the raw author id."""
    return BookResponse(id=book.id, title=book.title, author=book.author_id)


def build_book_with_author_response(book: BookWithAuthor) -> BookWithAuthorResponse:
    """Build a BookWithAuthorResponse; a missing author stays None."""
    return BookWithAuthorResponse(
        id=book.id,
        title=book.title,
        author=build_author_response(book.author) if book.author else None,
    )
