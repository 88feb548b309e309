"""Pydantic schemas for catalog view payloads."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field


class AuthorSummary(BaseModel):
    """Author as shown on book pages and forms."""

    id: str
    name: str = Field(..., description="Display name, 'family, first'")
    first_name: str
    family_name: str
    lifespan: str = ""
    url: str


class GenreSchema(BaseModel):
    """Minimal genre schema for book responses."""

    id: str
    name: str
    url: str


class GenreOptionSchema(BaseModel):
    """Genre offered on a book form."""

    id: str
    name: str
    checked: bool = False


class BookSchema(BaseModel):
    """Schema for Book in view payloads."""

    id: str
    title: str
    summary: str
    isbn: str
    url: str
    author_id: str | None = None
    author: AuthorSummary | None = Field(None, description="Present when the author was populated")
    genre_ids: list[str] = Field(default_factory=list)
    genres: list[GenreSchema] | None = Field(
        None, description="Present when the genres were populated"
    )


class BookInstanceSchema(BaseModel):
    """Schema for a physical copy of a book."""

    id: str
    book_id: str
    imprint: str
    status: str
    due_back: date | None = None
    url: str


class FieldErrorSchema(BaseModel):
    """A failed validation rule."""

    field: str
    message: str
    value: str | list[str] = ""


class CatalogCountsSchema(BaseModel):
    book_count: int
    book_instance_count: int
    book_instance_available_count: int
    author_count: int
    genre_count: int


class CatalogIndexView(BaseModel):
    """Dashboard view."""

    view: Literal["index"] = "index"
    title: str
    data: CatalogCountsSchema


class BookListView(BaseModel):
    view: Literal["book_list"] = "book_list"
    title: str
    book_list: list[BookSchema]


class BookDetailView(BaseModel):
    view: Literal["book_detail"] = "book_detail"
    title: str
    book: BookSchema
    book_instances: list[BookInstanceSchema]


class BookFormView(BaseModel):
    """Create form; ``book`` and ``errors`` are set when a submission is re-rendered."""

    view: Literal["book_form"] = "book_form"
    title: str
    authors: list[AuthorSummary]
    genres: list[GenreOptionSchema]
    book: BookSchema | None = None
    errors: list[FieldErrorSchema] | None = None


class BookUpdateView(BaseModel):
    """Update form; ``errors`` maps each failing field to its first error."""

    view: Literal["book_update"] = "book_update"
    title: str
    book: BookSchema
    genres: list[GenreOptionSchema]
    errors: dict[str, FieldErrorSchema] | None = None
