from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

metadata = SQLModel.metadata


class AuthorBase(SQLModel):
    """Base model with shared fields"""

    name: str


# Type alias - AuthorCreate is identical to AuthorBase
AuthorCreate = AuthorBase


class Author(AuthorBase, table=True):
    """Database table model"""

    __tablename__ = "authors"  # type: ignore[assignment]
    # Ids are never reused after deletes
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)


class AuthorRead(AuthorBase):
    """Model for repository operations (id is guaranteed to exist)"""

    id: int


class BookBase(SQLModel):
    """Base model with shared fields"""

    title: str
    # Weak reference to authors.id; no constraint, so it may dangle
    author_id: int | None = Field(default=None, index=True)


# Type alias - BookCreate is identical to BookBase
BookCreate = BookBase


class Book(BookBase, table=True):
    """Database table model"""

    __tablename__ = "books"  # type: ignore[assignment]
    __table_args__ = {"sqlite_autoincrement": True}

    id: int | None = Field(default=None, primary_key=True)


class BookRead(BookBase):
    """Model for repository operations (id is guaranteed to exist)"""

    id: int


class BookWithAuthor(SQLModel):
    """A book with its author reference resolved (None when it dangles)"""

    id: int
    title: str
    author: AuthorRead | None = None


# API response models
# Records are exposed with an ``_id`` key, so these use pydantic aliases.


class AuthorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int = PydanticField(alias="_id")
    name: str


class BookResponse(BaseModel):
    """Book with the raw author id"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = PydanticField(alias="_id")
    title: str
    author: int | None = None


class BookWithAuthorResponse(BaseModel):
    """Book with the author populated"""

    model_config = ConfigDict(populate_by_name=True)

    id: int = PydanticField(alias="_id")
    title: str
    author: AuthorResponse | None = None


class ErrorResponse(BaseModel):
    error: str
