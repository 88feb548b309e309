from .author_repository import AuthorRepository
from .book_instance_repository import BookInstanceRepository
from .book_repository import BookRepository
from .genre_repository import GenreRepository

__all__ = ["AuthorRepository", "BookInstanceRepository", "BookRepository", "GenreRepository"]
