"""Protocol for BookInstance repository in catalog context."""

from collections.abc import Mapping
from typing import Protocol

from locallibrary.domain.catalog.entities.book_instance import BookInstance
from locallibrary.domain.common.value_objects.ids import BookInstanceId


class BookInstanceRepositoryProtocol(Protocol):
    """Protocol for BookInstance store operations."""

    async def count(self, criteria: Mapping[str, object] | None = None) -> int:
        """
        Count book instances matching field-equality ``criteria``.

        Example:
            await repository.count({"status": BookInstanceStatus.AVAILABLE})
        """
        ...

    async def find(self, criteria: Mapping[str, object] | None = None) -> list[BookInstance]:
        """
        Find book instances matching field-equality ``criteria``.

        Example:
            await repository.find({"book": book_id})
        """
        ...

    async def find_by_id(self, instance_id: BookInstanceId) -> BookInstance | None: ...

    async def save(self, instance: BookInstance) -> BookInstance: ...
