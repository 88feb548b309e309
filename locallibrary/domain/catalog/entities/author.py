"""Author entity."""

from dataclasses import dataclass
from datetime import date

from locallibrary.domain.common.entity import Entity
from locallibrary.domain.common.exceptions import DomainError
from locallibrary.domain.common.value_objects.ids import AuthorId


@dataclass(eq=False)
class Author(Entity[AuthorId]):
    """
    Author of one or more books.

    Owned independently of books; a Book only holds a reference to it.
    """

    id: AuthorId
    first_name: str
    family_name: str
    date_of_birth: date | None = None
    date_of_death: date | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if (
            self.date_of_birth is not None
            and self.date_of_death is not None
            and self.date_of_death < self.date_of_birth
        ):
            raise DomainError("Author cannot die before being born")

    @property
    def name(self) -> str:
        """Full name in "family, first" order."""
        if self.first_name and self.family_name:
            return f"{self.family_name}, {self.first_name}"
        return self.family_name or self.first_name

    @property
    def lifespan(self) -> str:
        born = self.date_of_birth.isoformat() if self.date_of_birth else ""
        died = self.date_of_death.isoformat() if self.date_of_death else ""
        return f"{born} - {died}" if born or died else ""

    @property
    def url(self) -> str:
        return f"/catalog/author/{self.id}"
