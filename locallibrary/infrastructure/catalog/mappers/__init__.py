"""ORM ↔ domain mappers for the catalog context."""

from .author_mapper import AuthorMapper
from .book_instance_mapper import BookInstanceMapper
from .book_mapper import BookMapper
from .genre_mapper import GenreMapper

__all__ = ["AuthorMapper", "BookInstanceMapper", "BookMapper", "GenreMapper"]
