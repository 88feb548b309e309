from sqlalchemy import inspect

from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.common.value_objects.ids import AuthorId, BookId, GenreId
from locallibrary.models import Book as BookORM
from locallibrary.models import BookGenre as BookGenreORM


class BookMapper:
    """Mapper for Book ORM ↔ Domain conversion."""

    def to_domain(
        self,
        orm_model: BookORM,
        author: Author | None = None,
        genres: list[Genre] | None = None,
    ) -> Book:
        """
        Convert ORM model to domain entity.

        Columns left unloaded by a projection map to empty values.
        """
        unloaded = inspect(orm_model).unloaded

        def loaded(name: str, default: object) -> object:
            return default if name in unloaded else getattr(orm_model, name)

        author_id = loaded("author_id", None)
        genre_links: list[BookGenreORM] = loaded("genre_links", [])  # type: ignore[assignment]

        return Book.create_with_id(
            id=BookId(orm_model.id),
            title=loaded("title", ""),  # type: ignore[arg-type]
            summary=loaded("summary", ""),  # type: ignore[arg-type]
            isbn=loaded("isbn", ""),  # type: ignore[arg-type]
            author_id=AuthorId(author_id) if author_id else None,  # type: ignore[arg-type]
            genre_ids=[GenreId(link.genre_id) for link in genre_links],
            author=author,
            genres=genres,
        )

    def to_orm(self, domain_entity: Book, orm_model: BookORM | None = None) -> BookORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Update existing
            orm_model.title = domain_entity.title
            orm_model.author_id = domain_entity.author_id.value if domain_entity.author_id else None
            orm_model.summary = domain_entity.summary
            orm_model.isbn = domain_entity.isbn
            orm_model.genre_links = self._genre_links(domain_entity, orm_model.genre_links)
            return orm_model

        # Create new
        return BookORM(
            id=domain_entity.id.value,
            title=domain_entity.title,
            author_id=domain_entity.author_id.value if domain_entity.author_id else None,
            summary=domain_entity.summary,
            isbn=domain_entity.isbn,
            genre_links=self._genre_links(domain_entity, []),
        )

    @staticmethod
    def _genre_links(domain_entity: Book, existing: list[BookGenreORM]) -> list[BookGenreORM]:
        """Replace the genre selection, reusing rows for genres that stay."""
        by_genre_id = {link.genre_id: link for link in existing}
        links = []
        for position, genre_id in enumerate(domain_entity.genre_ids):
            link = by_genre_id.get(genre_id.value) or BookGenreORM(genre_id=genre_id.value)
            link.position = position
            links.append(link)
        return links
