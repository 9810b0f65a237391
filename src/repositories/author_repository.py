from sqlmodel import Session, select, col
from src.exceptions import store_operation
from src.repositories.models import Author, AuthorCreate, AuthorRead
from src.repositories.interfaces import AuthorRepositoryInterface

# Ids are INTEGER columns; anything larger can never match
_MAX_ID = 2**31 - 1


def parse_author_id(author_id: str | int) -> int | None:
    """
    Convert a client supplied id to the store's identifier format.

    Returns None when the value can't be a valid id: anything other than
    bare ASCII digits (signs, whitespace, decimals) or values outside the
    column range.
    """
    if isinstance(author_id, int):
        value = author_id
    else:
        if not (author_id.isascii() and author_id.isdigit()):
            return None
        value = int(author_id)
    if value < 1 or value > _MAX_ID:
        return None
    return value


class AuthorRepository(AuthorRepositoryInterface):
    def __init__(self, session: Session):
        self.session = session

    def add(self, author: AuthorCreate) -> AuthorRead:
        with store_operation(self.session, "adding an author"):
            db_author = Author.model_validate(author)
            self.session.add(db_author)
            self.session.commit()
            self.session.refresh(db_author)
            return AuthorRead.model_validate(db_author)

    def get(self, author_id: str | int) -> AuthorRead | None:
        parsed_id = parse_author_id(author_id)
        if parsed_id is None:
            return None
        with store_operation(self.session, f"loading author {parsed_id}"):
            author = self.session.get(Author, parsed_id)
        return AuthorRead.model_validate(author) if author else None

    def list_authors(self) -> list[AuthorRead]:
        statement = select(Author).order_by(col(Author.id))
        with store_operation(self.session, "listing authors"):
            authors = self.session.exec(statement).all()
        return [AuthorRead.model_validate(author) for author in authors]
