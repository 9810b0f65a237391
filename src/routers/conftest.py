"""
Shared pytest fixtures for router tests.

Provides a reusable dependency injection fixture to reduce boilerplate in test
files. The fixture returns a setup function that creates fresh stub
repositories and dependency overrides with automatic cleanup.
"""

from typing import Generator, Callable
import pytest

from src.main import app
from src.dependencies import get_author_repository, get_book_repository
from src.test_utils import StubAuthorRepository, StubBookRepository

# Type alias for fixtures
AuthorBookDepsSetup = Callable[..., tuple[StubAuthorRepository, StubBookRepository]]


@pytest.fixture
def setup_author_book_deps() -> Generator[AuthorBookDepsSetup, None, None]:
    """
    Setup author and book repository dependencies.

    Usage:
        def test_something(setup_author_book_deps):
            author_repo, book_repo = setup_author_book_deps()
            # or with config:
            author_repo, book_repo = setup_author_book_deps(include_sample_author=True)
            # Cleanup is automatic!
    """

    def _setup(
        include_sample_author: bool = False,
        store_should_fail: bool = False,
    ) -> tuple[StubAuthorRepository, StubBookRepository]:
        author_repo = StubAuthorRepository(
            include_sample_author=include_sample_author,
            should_fail=store_should_fail,
        )
        book_repo = StubBookRepository(author_repository=author_repo)

        app.dependency_overrides[get_author_repository] = lambda: author_repo
        app.dependency_overrides[get_book_repository] = lambda: book_repo

        return author_repo, book_repo

    yield _setup
    app.dependency_overrides.clear()
