"""
Demo dataset loading.

Resets the store and inserts two authors and their books. Ids are assigned
by the store, so every run produces fresh ids.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.engine import Engine
from sqlmodel import Session, delete

from src.exceptions import StoreUnavailableError, store_operation
from src.repositories.models import Author, Book

logger = logging.getLogger(__name__)

# Author name -> titles, in insertion order
SEED_DATA: dict[str, list[str]] = {
    "J.R.R. Tolkien": [
        "The Lord of the Rings",
        "The Hobbit",
    ],
    "J.K. Rowling": [
        "Harry Potter and the Philosopher's Stone",
        "Harry Potter and the Chamber of Secrets",
        "Harry Potter and the Prisoner of Azkaban",
        "Harry Potter and the Goblet of Fire",
        "Harry Potter and the Order of the Phoenix",
        "Harry Potter and the Half-Blood Prince",
        "Harry Potter and the Deathly Hallows",
    ],
}


@dataclass
class SeedResult:
    authors: int
    books: int

    def to_dict(self) -> dict[str, int]:
        return {"authors": self.authors, "books": self.books}


def seed_database(session: Session, keep_books: bool = False) -> SeedResult:
    """
    Wipe the store and load the demo dataset in a single transaction.

    Args:
        session: Session the reset runs in; committed once at the end
        keep_books: Leave existing books in place and only delete authors.
                    Old books then keep pointing at authors that no longer
                    exist.

    Returns:
        How many authors and books were inserted

    Raises:
        StoreUnavailableError: If the store fails; nothing is changed
    """
    with store_operation(session, "seeding the database"):
        if not keep_books:
            deleted_books = session.exec(delete(Book)).rowcount
            logger.info(f"Deleted {deleted_books} books")
        deleted_authors = session.exec(delete(Author)).rowcount
        logger.info(f"Deleted {deleted_authors} authors")

        authors = {name: Author(name=name) for name in SEED_DATA}
        session.add_all(list(authors.values()))
        # Flush so the store assigns author ids before books reference them
        session.flush()

        # Rowling's titles are inserted first
        books = [
            Book(title=title, author_id=authors[name].id)
            for name in reversed(SEED_DATA)
            for title in SEED_DATA[name]
        ]
        session.add_all(books)
        session.commit()

    logger.info(f"Seeded {len(authors)} authors and {len(books)} books")
    return SeedResult(authors=len(authors), books=len(books))


def reset_database(engine: Engine, keep_books: bool = False) -> SeedResult | None:
    """
    Run seed_database in its own session.

    Store failures are logged and swallowed so the caller (app startup)
    can carry on without the demo data.
    """
    logger.info("Resetting database!")
    try:
        with Session(engine) as session:
            return seed_database(session, keep_books=keep_books)
    except StoreUnavailableError as e:
        logger.error(f"Resetting the database failed: {e}")
        return None
