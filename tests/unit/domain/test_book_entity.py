"""Tests for the Book aggregate."""

import pytest

from locallibrary.domain.catalog.entities import Author, Book, Genre
from locallibrary.domain.common import InvariantViolationError
from locallibrary.domain.common.value_objects import AuthorId, BookId, GenreId


def _make_book(**overrides: object) -> Book:
    fields: dict[str, object] = {
        "id": BookId("B1"),
        "title": "Emma",
        "summary": "A novel.",
        "isbn": "9780141439587",
        "author_id": AuthorId("A1"),
        "genre_ids": [GenreId("G1")],
    }
    fields.update(overrides)
    return Book.create_with_id(**fields)  # type: ignore[arg-type]


class TestBook:
    def test_create_generates_identity(self) -> None:
        first = Book.create(title="Emma", summary="", isbn="")
        second = Book.create(title="Emma", summary="", isbn="")
        assert first.id != second.id
        assert first != second

    def test_equality_is_by_identity(self) -> None:
        assert _make_book(title="Emma") == _make_book(title="Persuasion")

    def test_url(self) -> None:
        assert _make_book().url == "/catalog/book/B1"

    def test_invalid_content_is_constructible(self) -> None:
        book = Book.create(title="", summary="", isbn="not an isbn")
        assert book.title == ""

    def test_revise_replaces_genres_and_keeps_author(self) -> None:
        book = _make_book(genres=[Genre(GenreId("G1"), "Fiction")])

        book.revise(
            title="Persuasion",
            summary="Second chances.",
            isbn="0140620680",
            genre_ids=[GenreId("G2")],
        )

        assert book.title == "Persuasion"
        assert book.summary == "Second chances."
        assert book.isbn == "0140620680"
        assert book.genre_ids == [GenreId("G2")]
        assert book.author_id == AuthorId("A1")
        assert book.genres is None

    def test_revise_with_no_genres_clears_selection(self) -> None:
        book = _make_book()
        book.revise(title="Emma", summary="", isbn="", genre_ids=[])
        assert book.genre_ids == []

    def test_resolved_author_returns_populated_author(self) -> None:
        author = Author(AuthorId("A1"), "Jane", "Austen")
        assert _make_book(author=author).resolved_author() is author

    def test_resolved_author_without_reference_is_none(self) -> None:
        assert _make_book(author_id=None).resolved_author() is None

    def test_resolved_author_dangling_reference_raises(self) -> None:
        with pytest.raises(InvariantViolationError, match="A1"):
            _make_book().resolved_author()
