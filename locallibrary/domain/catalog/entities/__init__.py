"""Catalog entities."""

from .author import Author
from .book import Book
from .book_instance import BookInstance, BookInstanceStatus
from .genre import Genre

__all__ = [
    "Author",
    "Book",
    "BookInstance",
    "BookInstanceStatus",
    "Genre",
]
