"""Book instance entity: one physical copy of a book."""

from dataclasses import dataclass
from datetime import date
from enum import StrEnum

from locallibrary.domain.common.entity import Entity
from locallibrary.domain.common.value_objects.ids import BookId, BookInstanceId


class BookInstanceStatus(StrEnum):
    """Circulation status of a physical copy."""

    AVAILABLE = "Available"
    MAINTENANCE = "Maintenance"
    LOANED = "Loaned"
    RESERVED = "Reserved"


@dataclass(eq=False)
class BookInstance(Entity[BookInstanceId]):
    """
    A physical copy of a book.

    Read-only from the book workflow: aggregated for the detail view, never
    mutated there.
    """

    id: BookInstanceId
    book_id: BookId
    imprint: str
    status: BookInstanceStatus = BookInstanceStatus.MAINTENANCE
    due_back: date | None = None

    @property
    def url(self) -> str:
        return f"/catalog/bookinstance/{self.id}"
