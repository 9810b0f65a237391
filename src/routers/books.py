"""
Book endpoints for browsing the collection.
"""

from fastapi import APIRouter, Depends
from src.repositories.models import BookWithAuthorResponse
from src.repositories.interfaces import BookRepositoryInterface
from src.dependencies import get_book_repository
from src.routers.response_builders import build_book_with_author_response

router = APIRouter(tags=["books"])


@router.get(
    "/books",
    summary="List all books",
    description="Retrieve every book with its author populated (null if the author is missing)",
    response_model=list[BookWithAuthorResponse],
)
def get_books(
    book_repository: BookRepositoryInterface = Depends(get_book_repository),
):
    books = book_repository.list_with_authors()
    return [build_book_with_author_response(book) for book in books]
