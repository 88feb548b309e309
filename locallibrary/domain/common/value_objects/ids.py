from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class BookId(EntityId):
    """Strongly-typed book identifier."""


@dataclass(frozen=True)
class AuthorId(EntityId):
    """Strongly-typed author identifier."""


@dataclass(frozen=True)
class GenreId(EntityId):
    """Strongly-typed genre identifier."""


@dataclass(frozen=True)
class BookInstanceId(EntityId):
    """Strongly-typed book instance identifier."""
