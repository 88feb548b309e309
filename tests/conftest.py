"""Pytest configuration and fixtures."""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from locallibrary import models
from locallibrary.config import Settings
from locallibrary.database import Base
from locallibrary.main import create_app


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """SQLite file shared by the app (aiosqlite) and the seeding session."""
    return tmp_path / "locallibrary-test.db"


@pytest.fixture
def test_settings(db_path: Path) -> Settings:
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{db_path}", ENVIRONMENT="test")


@pytest.fixture
def db_session(db_path: Path) -> Generator[Session, None, None]:
    """Create a synchronous session on the test database for seeding and checks."""
    engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(bind=engine)

    session = sessionmaker(bind=engine, autoflush=False)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(test_settings: Settings, db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client; the app lifespan opens the test database."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client


def create_test_author(
    db_session: Session, id: str = "A1", first_name: str = "Jane", family_name: str = "Austen"
) -> models.Author:
    author = models.Author(id=id, first_name=first_name, family_name=family_name)
    db_session.add(author)
    db_session.commit()
    return author


def create_test_genre(db_session: Session, id: str, name: str) -> models.Genre:
    genre = models.Genre(id=id, name=name)
    db_session.add(genre)
    db_session.commit()
    return genre


def create_test_book(
    db_session: Session,
    id: str = "B1",
    title: str = "Emma",
    author_id: str | None = "A1",
    genre_ids: tuple[str, ...] = ("G1",),
) -> models.Book:
    book = models.Book(
        id=id,
        title=title,
        author_id=author_id,
        summary="A young woman meddles in the love lives of her friends.",
        isbn="9780141439587",
        genre_links=[
            models.BookGenre(genre_id=genre_id, position=position)
            for position, genre_id in enumerate(genre_ids)
        ],
    )
    db_session.add(book)
    db_session.commit()
    return book


def create_test_book_instance(
    db_session: Session, id: str, book_id: str = "B1", status: str = "Available"
) -> models.BookInstance:
    instance = models.BookInstance(id=id, book_id=book_id, imprint="Penguin, 2003", status=status)
    db_session.add(instance)
    db_session.commit()
    return instance


@pytest.fixture
def seeded_catalog(db_session: Session) -> models.Book:
    """One author, three genres, one book filed under G1 with two copies."""
    create_test_author(db_session)
    create_test_genre(db_session, "G1", "Fiction")
    create_test_genre(db_session, "G2", "Romance")
    create_test_genre(db_session, "G3", "Satire")
    book = create_test_book(db_session)
    create_test_book_instance(db_session, "I1", status="Available")
    create_test_book_instance(db_session, "I2", status="Loaned")
    return book
