"""Protocol for Author repository in catalog context."""

from collections.abc import Mapping
from typing import Protocol

from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.common.value_objects.ids import AuthorId


class AuthorRepositoryProtocol(Protocol):
    """Protocol for Author store operations."""

    async def count(self, criteria: Mapping[str, object] | None = None) -> int:
        """Count authors matching field-equality ``criteria``."""
        ...

    async def find(self, criteria: Mapping[str, object] | None = None) -> list[Author]:
        """Find authors matching field-equality ``criteria`` (all when None)."""
        ...

    async def find_by_id(self, author_id: AuthorId) -> Author | None:
        """Find an author by ID, or None when it does not exist."""
        ...

    async def save(self, author: Author) -> Author:
        """Insert or update an author."""
        ...
