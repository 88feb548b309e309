"""
Catalog aggregation dataclasses.

Joined results handed from the aggregation use cases to presentation.
"""

from dataclasses import dataclass, field

from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.catalog.entities.book_instance import BookInstance
from locallibrary.domain.catalog.entities.genre import Genre


@dataclass(frozen=True)
class CatalogCounts:
    """Dashboard record counts."""

    book_count: int
    book_instance_count: int
    book_instance_available_count: int
    author_count: int
    genre_count: int


@dataclass
class BookDetailsAggregation:
    """Aggregated book data for detail view."""

    book: Book
    book_instances: list[BookInstance] = field(default_factory=list)


@dataclass
class BookFormData:
    """Reference data for populating book create forms."""

    authors: list[Author] = field(default_factory=list)
    genres: list[Genre] = field(default_factory=list)
