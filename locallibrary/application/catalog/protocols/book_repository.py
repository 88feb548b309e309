from collections.abc import Mapping, Sequence
from typing import Protocol

from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.common.value_objects.ids import BookId


class BookRepositoryProtocol(Protocol):
    async def count(self, criteria: Mapping[str, object] | None = None) -> int: ...

    async def find(
        self,
        criteria: Mapping[str, object] | None = None,
        projection: Sequence[str] | None = None,
        populate: Sequence[str] = (),
    ) -> list[Book]: ...

    async def find_by_id(self, book_id: BookId, populate: Sequence[str] = ()) -> Book | None: ...

    async def save(self, book: Book) -> Book: ...
