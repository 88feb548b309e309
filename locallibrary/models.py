"""Database models."""

from datetime import date

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from locallibrary.database import Base

ID_LENGTH = 32


class Author(Base):
    """Author model."""

    __tablename__ = "authors"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    family_name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    date_of_death: Mapped[date | None] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        """String representation of Author."""
        return f"<Author(id={self.id}, family_name='{self.family_name}')>"


class Genre(Base):
    """Genre model."""

    __tablename__ = "genres"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of Genre."""
        return f"<Genre(id={self.id}, name='{self.name}')>"


class Book(Base):
    """
    Book model.

    ``author_id`` and the genre ids in ``book_genres`` are plain references
    without foreign keys: a book may point at an author or genre that does
    not exist.
    """

    __tablename__ = "books"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    author_id: Mapped[str | None] = mapped_column(String(ID_LENGTH), nullable=True, index=True)
    summary: Mapped[str] = mapped_column(Text, nullable=False, default="")
    isbn: Mapped[str] = mapped_column(String(100), nullable=False, default="")

    genre_links: Mapped[list["BookGenre"]] = relationship(
        back_populates="book",
        cascade="all, delete-orphan",
        order_by="BookGenre.position",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of Book."""
        return f"<Book(id={self.id}, title='{self.title[:50]}')>"


class BookGenre(Base):
    """Ordered association between a book and a genre id."""

    __tablename__ = "book_genres"

    book_id: Mapped[str] = mapped_column(
        String(ID_LENGTH), ForeignKey("books.id", ondelete="CASCADE"), primary_key=True
    )
    genre_id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    book: Mapped[Book] = relationship(back_populates="genre_links")


class BookInstance(Base):
    """Physical copy of a book."""

    __tablename__ = "book_instances"

    id: Mapped[str] = mapped_column(String(ID_LENGTH), primary_key=True)
    book_id: Mapped[str] = mapped_column(String(ID_LENGTH), nullable=False, index=True)
    imprint: Mapped[str] = mapped_column(String(500), nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="Maintenance", index=True
    )
    due_back: Mapped[date | None] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        """String representation of BookInstance."""
        return f"<BookInstance(id={self.id}, book_id={self.book_id}, status='{self.status}')>"
