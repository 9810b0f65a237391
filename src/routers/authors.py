"""
Author endpoints: listing, lookup by id, and the books written by an author.
"""

from fastapi import APIRouter, Depends, HTTPException
from src.repositories.models import AuthorResponse, BookResponse, ErrorResponse
from src.repositories.interfaces import (
    AuthorRepositoryInterface,
    BookRepositoryInterface,
)
from src.dependencies import get_author_repository, get_book_repository
from src.routers.response_builders import build_author_response, build_book_response
import logging

logger = logging.getLogger(__name__)

router = APIRouter(tags=["authors"])

AUTHOR_NOT_FOUND = "Author not found!"


@router.get(
    "/authors",
    summary="List all authors",
    description="Retrieve every author in the store",
    response_model=list[AuthorResponse],
)
def get_authors(
    author_repository: AuthorRepositoryInterface = Depends(get_author_repository),
):
    authors = author_repository.list_authors()
    return [build_author_response(author) for author in authors]


@router.get(
    "/authors/{author_id}",
    summary="Get a single author",
    description="Retrieve one author by id. Unknown or malformed ids return 404.",
    response_model=AuthorResponse,
    responses={404: {"model": ErrorResponse, "description": "Author not found"}},
)
def get_author(
    author_id: str,
    author_repository: AuthorRepositoryInterface = Depends(get_author_repository),
):
    author = author_repository.get(author_id)
    if not author:
        logger.warning(f"No author found with an id of {author_id!r}")
        raise HTTPException(status_code=404, detail=AUTHOR_NOT_FOUND)
    return build_author_response(author)


@router.get(
    "/authors/{author_id}/books",
    summary="List books by an author",
    description=(
        "Retrieve every book referencing the given author. "
        "An existing author with no books returns an empty list."
    ),
    response_model=list[BookResponse],
    responses={404: {"model": ErrorResponse, "description": "Author not found"}},
)
def get_books_by_author(
    author_id: str,
    author_repository: AuthorRepositoryInterface = Depends(get_author_repository),
    book_repository: BookRepositoryInterface = Depends(get_book_repository),
):
    author = author_repository.get(author_id)
    if not author:
        logger.warning(f"No author found with an id of {author_id!r}")
        raise HTTPException(status_code=404, detail=AUTHOR_NOT_FOUND)

    books = book_repository.list_by_author_id(author.id)
    return [build_book_response(book) for book in books]
