"""Protocol for Genre repository in catalog context."""

from collections.abc import Mapping
from typing import Protocol

from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.common.value_objects.ids import GenreId


class GenreRepositoryProtocol(Protocol):
    """Protocol for Genre store operations."""

    async def count(self, criteria: Mapping[str, object] | None = None) -> int: ...

    async def find(self, criteria: Mapping[str, object] | None = None) -> list[Genre]: ...

    async def find_by_id(self, genre_id: GenreId) -> Genre | None: ...

    async def save(self, genre: Genre) -> Genre: ...
