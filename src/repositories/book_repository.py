from sqlmodel import Session, select, col
from src.exceptions import store_operation
from src.repositories.models import (
    Author,
    AuthorRead,
    Book,
    BookCreate,
    BookRead,
    BookWithAuthor,
)
from src.repositories.interfaces import BookRepositoryInterface


class BookRepository(BookRepositoryInterface):
    def __init__(self, session: Session):
        self.session = session

    def add(self, book: BookCreate) -> BookRead:
        with store_operation(self.session, "adding a book"):
            db_book = Book.model_validate(book)
            self.session.add(db_book)
            self.session.commit()
            self.session.refresh(db_book)
            return BookRead.model_validate(db_book)

    def list_by_author_id(self, author_id: int) -> list[BookRead]:
        statement = (
            select(Book).where(Book.author_id == author_id).order_by(col(Book.id))
        )
        with store_operation(self.session, f"listing books of author {author_id}"):
            books = self.session.exec(statement).all()
        return [BookRead.model_validate(book) for book in books]

    def list_with_authors(self) -> list[BookWithAuthor]:
        # Outer join so books with a missing author still come back
        statement = (
            select(Book, Author)
            .join(Author, col(Book.author_id) == col(Author.id), isouter=True)
            .order_by(col(Book.id))
        )
        with store_operation(self.session, "listing books with authors"):
            rows = self.session.exec(statement).all()
        return [
            BookWithAuthor(
                id=book.id,
                title=book.title,
                author=AuthorRead.model_validate(author) if author else None,
            )
            for book, author in rows
        ]
