from fastapi.testclient import TestClient
from ..main import app
from ..repositories.models import AuthorCreate, BookCreate
from .conftest import AuthorBookDepsSetup

client = TestClient(app)


def test_get_books_empty(setup_author_book_deps: AuthorBookDepsSetup):
    setup_author_book_deps()

    response = client.get("/books")

    assert response.status_code == 200
    assert response.json() == []


def test_get_books_populates_author(setup_author_book_deps: AuthorBookDepsSetup):
    author_repo, book_repo = setup_author_book_deps()
    author = author_repo.add(AuthorCreate(name="Terry Pratchett"))
    book_repo.add(BookCreate(title="Small Gods", author_id=author.id))

    response = client.get("/books")

    assert response.status_code == 200
    assert response.json() == [
        {
            "_id": 1,
            "title": "Small Gods",
            "author": {"_id": author.id, "name": "Terry Pratchett"},
        }
    ]


def test_get_books_dangling_author_is_null(
    setup_author_book_deps: AuthorBookDepsSetup,
):
    author_repo, book_repo = setup_author_book_deps()
    author = author_repo.add(AuthorCreate(name="Terry Pratchett"))
    book_repo.add(BookCreate(title="Small Gods", author_id=author.id))
    book_repo.add(BookCreate(title="Lost Manuscript", author_id=77))
    book_repo.add(BookCreate(title="Anonymous Pamphlet", author_id=None))

    response = client.get("/books")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 3
    assert data[0]["author"]["name"] == "Terry Pratchett"
    assert data[1]["author"] is None
    assert data[2]["author"] is None


def test_get_books_authors_are_retrievable(
    setup_author_book_deps: AuthorBookDepsSetup,
):
    author_repo, book_repo = setup_author_book_deps()
    pratchett = author_repo.add(AuthorCreate(name="Terry Pratchett"))
    butler = author_repo.add(AuthorCreate(name="Octavia E. Butler"))
    book_repo.add(BookCreate(title="Mort", author_id=pratchett.id))
    book_repo.add(BookCreate(title="Kindred", author_id=butler.id))
    book_repo.add(BookCreate(title="Lost Manuscript", author_id=77))

    books = client.get("/books").json()

    for book in books:
        if book["author"] is None:
            continue
        author_response = client.get(f"/authors/{book['author']['_id']}")
        assert author_response.status_code == 200
        assert author_response.json() == book["author"]


def test_get_books_is_repeatable(setup_author_book_deps: AuthorBookDepsSetup):
    author_repo, book_repo = setup_author_book_deps(include_sample_author=True)
    book_repo.add(BookCreate(title="The Dispossessed", author_id=1))

    first = client.get("/books")
    second = client.get("/books")

    assert first.json() == second.json()
