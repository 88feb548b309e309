"""
Book form rule sets and input normalization.

Both the create and update workflows sanitize with the same default
sanitizers; they differ only in the rules they enforce.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from locallibrary.application.common.validation import (
    FieldRule,
    FormValue,
    SanitizedInput,
    ValidationPipeline,
    is_isbn,
    length,
    not_empty,
)
from locallibrary.config import Settings
from locallibrary.domain.common.value_objects.ids import AuthorId, GenreId

GENRE_FIELD = "genre"


def normalize_genre_selection(form: Mapping[str, FormValue]) -> dict[str, FormValue]:
    """
    Return a copy of ``form`` whose genre field is always a list.

    Absent becomes an empty list, a single value becomes a one-element list
    and a list is kept (repeated ids are dropped, first occurrence wins).
    """
    normalized = dict(form)
    value = normalized.get(GENRE_FIELD)
    if value is None:
        normalized[GENRE_FIELD] = []
    elif isinstance(value, str):
        normalized[GENRE_FIELD] = [value]
    else:
        normalized[GENRE_FIELD] = list(dict.fromkeys(value))
    return normalized


def build_create_book_pipeline(settings: Settings) -> ValidationPipeline:
    """Rules for creating a book: every field is required and fits its column."""
    title_max = settings.BOOK_TITLE_MAX_LENGTH
    isbn_max = settings.BOOK_ISBN_MAX_LENGTH
    return ValidationPipeline(
        [
            FieldRule("title", not_empty(), "Title must not be empty."),
            FieldRule(
                "title",
                length(max=title_max),
                f"Title can not be longer than {title_max} characters",
            ),
            FieldRule("author", not_empty(), "Author must not be empty."),
            FieldRule("summary", not_empty(), "Summary must not be empty."),
            FieldRule("isbn", not_empty(), "ISBN must not be empty"),
            FieldRule(
                "isbn",
                length(max=isbn_max),
                f"ISBN can not be longer than {isbn_max} characters",
            ),
        ]
    )


def build_update_book_pipeline(settings: Settings) -> ValidationPipeline:
    """Rules for updating a book: length bounds and ISBN format."""
    title_min = settings.BOOK_TITLE_MIN_LENGTH
    title_max = settings.BOOK_TITLE_MAX_LENGTH
    summary_max = settings.BOOK_SUMMARY_MAX_LENGTH
    isbn_max = settings.BOOK_ISBN_MAX_LENGTH
    return ValidationPipeline(
        [
            FieldRule(
                "title",
                length(min=title_min, max=title_max),
                f"Title can not be shorter than {title_min} and longer than {title_max} characters",
            ),
            FieldRule(
                "summary",
                length(max=summary_max),
                f"Summary cannot be longer than {summary_max} characters",
            ),
            FieldRule("isbn", is_isbn(), "Invalid ISBN"),
            FieldRule(
                "isbn",
                length(max=isbn_max),
                f"ISBN can not be longer than {isbn_max} characters",
            ),
        ]
    )


@dataclass(frozen=True)
class BookFormInput:
    """Typed view over sanitized book form values."""

    title: str
    author_id: AuthorId | None
    summary: str
    isbn: str
    genre_ids: list[GenreId]

    @classmethod
    def from_sanitized(cls, sanitized: SanitizedInput) -> "BookFormInput":
        author = _as_text(sanitized.get("author"))
        genre = sanitized.get(GENRE_FIELD, [])
        genre_values = [genre] if isinstance(genre, str) else genre
        return cls(
            title=_as_text(sanitized.get("title")),
            author_id=AuthorId(author) if author else None,
            summary=_as_text(sanitized.get("summary")),
            isbn=_as_text(sanitized.get("isbn")),
            genre_ids=[GenreId(value) for value in genre_values if value],
        )


def _as_text(value: FormValue | None) -> str:
    if value is None:
        return ""
    if isinstance(value, list):
        return value[0] if value else ""
    return value
