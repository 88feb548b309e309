"""Tests for turning dispositions into HTTP responses."""

import json

import pytest

from locallibrary.application.common import Redirect, Render
from locallibrary.application.common.validation import ErrorSet, FieldError
from locallibrary.domain.catalog.entities import Author, Book, Genre
from locallibrary.domain.catalog.services import GenreOption
from locallibrary.domain.common.value_objects import AuthorId, BookId, GenreId
from locallibrary.infrastructure.catalog.presenters import present


def _book() -> Book:
    return Book.create_with_id(
        id=BookId("B1"),
        title="Emma",
        summary="A novel.",
        isbn="9780141439587",
        author_id=AuthorId("A1"),
        genre_ids=[GenreId("G1")],
        author=Author(AuthorId("A1"), "Jane", "Austen"),
    )


def test_redirect_is_see_other() -> None:
    response = present(Redirect("/catalog/book/B1"))

    assert response.status_code == 303
    assert response.headers["location"] == "/catalog/book/B1"


def test_update_form_render() -> None:
    errors = ErrorSet()
    errors.add(FieldError("isbn", "Invalid ISBN", "123"))
    options = [
        GenreOption(Genre(GenreId("G1"), "Fiction"), checked=True),
        GenreOption(Genre(GenreId("G2"), "Romance")),
    ]

    response = present(
        Render(
            "book_update",
            {"title": "Update Book", "book": _book(), "genres": options, "errors": errors.mapped()},
        )
    )

    assert response.status_code == 200
    body = json.loads(response.body)
    assert body["view"] == "book_update"
    assert body["book"]["author"]["name"] == "Austen, Jane"
    assert body["book"]["genres"] is None
    assert body["genres"] == [
        {"id": "G1", "name": "Fiction", "checked": True},
        {"id": "G2", "name": "Romance", "checked": False},
    ]
    assert body["errors"] == {"isbn": {"field": "isbn", "message": "Invalid ISBN", "value": "123"}}


def test_create_form_without_submission() -> None:
    response = present(Render("book_form", {"title": "Create Book", "authors": [], "genres": []}))

    body = json.loads(response.body)
    assert body["book"] is None
    assert body["errors"] is None


def test_unknown_view() -> None:
    with pytest.raises(ValueError, match="author_list"):
        present(Render("author_list", {}))
