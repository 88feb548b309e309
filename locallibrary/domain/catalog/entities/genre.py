"""Genre entity for categorizing books."""

from dataclasses import dataclass

from locallibrary.domain.common.entity import Entity
from locallibrary.domain.common.exceptions import DomainError
from locallibrary.domain.common.value_objects.ids import GenreId


@dataclass(eq=False)
class Genre(Entity[GenreId]):
    """Genre a book can be filed under."""

    id: GenreId
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.name or not self.name.strip():
            raise DomainError("Genre name cannot be empty")

    @property
    def url(self) -> str:
        return f"/catalog/genre/{self.id}"
