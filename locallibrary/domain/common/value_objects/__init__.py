"""Common value objects shared across all domain modules."""

from .ids import AuthorId, BookId, BookInstanceId, GenreId

__all__ = [
    "AuthorId",
    "BookId",
    "BookInstanceId",
    "GenreId",
]
