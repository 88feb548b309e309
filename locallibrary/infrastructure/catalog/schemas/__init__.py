"""Catalog schemas."""

from .catalog_schemas import (
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

__all__ = [
    "AuthorSummary",
    "BookDetailView",
    "BookFormView",
    "BookInstanceSchema",
    "BookListView",
    "BookSchema",
    "BookUpdateView",
    "CatalogCountsSchema",
    "CatalogIndexView",
    "FieldErrorSchema",
    "GenreOptionSchema",
    "GenreSchema",
]
