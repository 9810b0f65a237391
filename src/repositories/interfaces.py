from typing import Protocol

from src.repositories.models import (
    AuthorCreate,
    AuthorRead,
    BookCreate,
    BookRead,
    BookWithAuthor,
)


class AuthorRepositoryInterface(Protocol):
    def add(self, author: AuthorCreate) -> AuthorRead: ...

    def get(self, author_id: str | int) -> AuthorRead | None:
        """
        Look up an author by id.

        Ids that are not valid for the store (e.g. non-numeric text) are
        reported as missing rather than raising.
        """
        ...

    def list_authors(self) -> list[AuthorRead]: ...


class BookRepositoryInterface(Protocol):
    def add(self, book: BookCreate) -> BookRead: ...

    def list_by_author_id(self, author_id: int) -> list[BookRead]: ...

    def list_with_authors(self) -> list[BookWithAuthor]:
        """
        List every book with its author resolved.

        Books whose author reference is empty or points at a missing author
        are returned with ``author=None``.
        """
        ...
