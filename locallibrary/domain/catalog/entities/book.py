from dataclasses import dataclass, field

from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.common.entity import Entity
from locallibrary.domain.common.exceptions import InvariantViolationError
from locallibrary.domain.common.value_objects.ids import AuthorId, BookId, GenreId


@dataclass(eq=False)
class Book(Entity[BookId]):
    """
    Book aggregate root.

    Holds non-owning references to one Author and any number of Genres.
    References are stored as ids; the store resolves them into ``author``
    and ``genres`` only when a query asks for population. The author
    reference is not checked at write time, so a dangling reference is
    only detected when the book is rendered.

    A Book may be built from an invalid form submission (for re-rendering),
    so field contents are not validated here.
    """

    # Identity
    id: BookId

    # Content
    title: str
    summary: str
    isbn: str

    # References
    author_id: AuthorId | None = None
    genre_ids: list[GenreId] = field(default_factory=list)

    # Populated references (None when not requested from the store)
    author: Author | None = field(default=None, repr=False)
    genres: list[Genre] | None = field(default=None, repr=False)

    @property
    def url(self) -> str:
        return f"/catalog/book/{self.id}"

    # Query methods
    def resolved_author(self) -> Author | None:
        """
        Return the populated author, enforcing that the reference resolves.

        Raises:
            InvariantViolationError: If the book references an author that
                could not be populated.
        """
        if self.author_id is not None and self.author is None:
            raise InvariantViolationError(
                "Book", f"author {self.author_id} referenced by book {self.id} does not exist"
            )
        return self.author

    # Command methods
    def revise(self, title: str, summary: str, isbn: str, genre_ids: list[GenreId]) -> None:
        """
        Overwrite the editable fields.

        The genre selection replaces the previous one (no merge). The author
        reference is left untouched.
        """
        self.title = title
        self.summary = summary
        self.isbn = isbn
        self.genre_ids = list(genre_ids)
        # Populated genres no longer reflect genre_ids
        self.genres = None

    # Factory methods
    @classmethod
    def create(
        cls,
        title: str,
        summary: str,
        isbn: str,
        author_id: AuthorId | None = None,
        genre_ids: list[GenreId] | None = None,
    ) -> "Book":
        """Factory for creating new book."""
        return cls(
            id=BookId.generate(),
            title=title,
            summary=summary,
            isbn=isbn,
            author_id=author_id,
            genre_ids=list(genre_ids or []),
        )

    @classmethod
    def create_with_id(
        cls,
        id: BookId,
        title: str,
        summary: str,
        isbn: str,
        author_id: AuthorId | None = None,
        genre_ids: list[GenreId] | None = None,
        author: Author | None = None,
        genres: list[Genre] | None = None,
    ) -> "Book":
        """Factory for reconstituting book from persistence."""
        return cls(
            id=id,
            title=title,
            summary=summary,
            isbn=isbn,
            author_id=author_id,
            genre_ids=list(genre_ids or []),
            author=author,
            genres=genres,
        )
