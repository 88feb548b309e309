"""Entity store gateway protocols for the catalog context."""

from .author_repository import AuthorRepositoryProtocol
from .book_instance_repository import BookInstanceRepositoryProtocol
from .book_repository import BookRepositoryProtocol
from .genre_repository import GenreRepositoryProtocol

__all__ = [
    "AuthorRepositoryProtocol",
    "BookInstanceRepositoryProtocol",
    "BookRepositoryProtocol",
    "GenreRepositoryProtocol",
]
