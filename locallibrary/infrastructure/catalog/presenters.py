"""
Turn workflow dispositions into HTTP responses.

A ``Redirect`` becomes a 303 so browsers follow it with GET. A ``Render``
becomes the JSON payload of its view schema.
"""

from collections.abc import Callable, Mapping
from typing import Any

from fastapi.responses import JSONResponse, RedirectResponse, Response
from pydantic import BaseModel
from starlette import status

from locallibrary.application.common.dispositions import Disposition, Redirect, Render
from locallibrary.application.common.validation import FieldError
from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.catalog.entities.book_instance import BookInstance
from locallibrary.domain.catalog.services.catalog_aggregations import CatalogCounts
from locallibrary.domain.catalog.services.genre_selection_service import GenreOption
from locallibrary.infrastructure.catalog.schemas import (
    AuthorSummary,
    BookDetailView,
    BookFormView,
    BookInstanceSchema,
    BookListView,
    BookSchema,
    BookUpdateView,
    CatalogCountsSchema,
    CatalogIndexView,
    FieldErrorSchema,
    GenreOptionSchema,
    GenreSchema,
)


def _author_schema(author: Author) -> AuthorSummary:
    return AuthorSummary(
        id=author.id.value,
        name=author.name,
        first_name=author.first_name,
        family_name=author.family_name,
        lifespan=author.lifespan,
        url=author.url,
    )


def _book_schema(book: Book) -> BookSchema:
    return BookSchema(
        id=book.id.value,
        title=book.title,
        summary=book.summary,
        isbn=book.isbn,
        url=book.url,
        author_id=book.author_id.value if book.author_id else None,
        author=_author_schema(book.author) if book.author else None,
        genre_ids=[genre_id.value for genre_id in book.genre_ids],
        genres=(
            [GenreSchema(id=g.id.value, name=g.name, url=g.url) for g in book.genres]
            if book.genres is not None
            else None
        ),
    )


def _instance_schema(instance: BookInstance) -> BookInstanceSchema:
    return BookInstanceSchema(
        id=instance.id.value,
        book_id=instance.book_id.value,
        imprint=instance.imprint,
        status=instance.status.value,
        due_back=instance.due_back,
        url=instance.url,
    )


def _genre_options(options: list[GenreOption]) -> list[GenreOptionSchema]:
    return [
        GenreOptionSchema(id=o.genre.id.value, name=o.genre.name, checked=o.checked)
        for o in options
    ]


def _error_schema(error: FieldError) -> FieldErrorSchema:
    return FieldErrorSchema(field=error.field, message=error.message, value=error.value)


def _index_view(payload: Mapping[str, Any]) -> BaseModel:
    counts: CatalogCounts = payload["data"]
    return CatalogIndexView(
        title=payload["title"],
        data=CatalogCountsSchema(
            book_count=counts.book_count,
            book_instance_count=counts.book_instance_count,
            book_instance_available_count=counts.book_instance_available_count,
            author_count=counts.author_count,
            genre_count=counts.genre_count,
        ),
    )


def _book_list_view(payload: Mapping[str, Any]) -> BaseModel:
    return BookListView(
        title=payload["title"], book_list=[_book_schema(b) for b in payload["book_list"]]
    )


def _book_detail_view(payload: Mapping[str, Any]) -> BaseModel:
    return BookDetailView(
        title=payload["title"],
        book=_book_schema(payload["book"]),
        book_instances=[_instance_schema(i) for i in payload["book_instances"]],
    )


def _book_form_view(payload: Mapping[str, Any]) -> BaseModel:
    book = payload.get("book")
    errors = payload.get("errors")
    return BookFormView(
        title=payload["title"],
        authors=[_author_schema(a) for a in payload["authors"]],
        genres=_genre_options(payload["genres"]),
        book=_book_schema(book) if book else None,
        errors=[_error_schema(e) for e in errors] if errors is not None else None,
    )


def _book_update_view(payload: Mapping[str, Any]) -> BaseModel:
    errors = payload.get("errors")
    return BookUpdateView(
        title=payload["title"],
        book=_book_schema(payload["book"]),
        genres=_genre_options(payload["genres"]),
        errors=(
            {name: _error_schema(e) for name, e in errors.items()} if errors is not None else None
        ),
    )


VIEW_BUILDERS: dict[str, Callable[[Mapping[str, Any]], BaseModel]] = {
    "index": _index_view,
    "book_list": _book_list_view,
    "book_detail": _book_detail_view,
    "book_form": _book_form_view,
    "book_update": _book_update_view,
}


def present(disposition: Disposition) -> Response:
    """Build the HTTP response for a workflow disposition."""
    if isinstance(disposition, Redirect):
        return RedirectResponse(disposition.location, status_code=status.HTTP_303_SEE_OTHER)

    if not isinstance(disposition, Render):
        raise TypeError(f"Unsupported disposition: {disposition!r}")

    try:
        builder = VIEW_BUILDERS[disposition.view]
    except KeyError:
        raise ValueError(f"No schema registered for view '{disposition.view}'") from None

    schema = builder(disposition.payload)
    return JSONResponse(schema.model_dump(mode="json"), status_code=status.HTTP_200_OK)
