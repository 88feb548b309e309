from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import load_only, noload

from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.common.value_objects.ids import BookId
from locallibrary.exceptions import StoreError
from locallibrary.infrastructure.catalog.mappers.author_mapper import AuthorMapper
from locallibrary.infrastructure.catalog.mappers.book_mapper import BookMapper
from locallibrary.infrastructure.catalog.mappers.genre_mapper import GenreMapper
from locallibrary.infrastructure.catalog.repositories.base import SqlAlchemyRepository
from locallibrary.models import Author as AuthorORM
from locallibrary.models import Book as BookORM
from locallibrary.models import Genre as GenreORM

POPULATE_PATHS = ("author", "genre")

# Domain field name -> mapped column
PROJECTION_FIELDS = {
    "title": BookORM.title,
    "author": BookORM.author_id,
    "summary": BookORM.summary,
    "isbn": BookORM.isbn,
}


class BookRepository(SqlAlchemyRepository[Book]):
    """
    Domain-centric repository for Book persistence.

    Books reference their author and genres by ID. ``find`` and
    ``find_by_id`` resolve those references on request through ``populate``;
    a reference whose target is missing is left unresolved.
    """

    orm_model = BookORM
    filter_fields = {
        "title": BookORM.title,
        "author": BookORM.author_id,
        "isbn": BookORM.isbn,
    }
    entity_name = "book"
    order_by = (BookORM.title,)

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.mapper = BookMapper()
        self.author_mapper = AuthorMapper()
        self.genre_mapper = GenreMapper()

    def to_domain(self, orm_model: BookORM) -> Book:
        return self.mapper.to_domain(orm_model)

    def to_orm(self, entity: Book, orm_model: BookORM | None = None) -> BookORM:
        return self.mapper.to_orm(entity, orm_model)

    async def find(
        self,
        criteria: Mapping[str, object] | None = None,
        projection: Sequence[str] | None = None,
        populate: Sequence[str] = (),
    ) -> list[Book]:
        """
        Find books matching field-equality criteria, ordered by title.

        Args:
            criteria: Field-equality filter (all books when None)
            projection: Fields to load besides the ID; the rest come back empty
            populate: References to resolve, any of ``author`` and ``genre``

        Raises:
            StoreError: If the query fails or names an unknown field
        """
        self._check_populate(populate)
        stmt = self._where(select(BookORM), criteria).order_by(*self.order_by)
        if projection is not None:
            stmt = stmt.options(*self._projection_options(projection))

        async with self._session("find") as session:
            result = await session.execute(stmt)
            orm_models = list(result.scalars().all())
            authors = (
                await self._load_authors(session, orm_models) if "author" in populate else {}
            )
            genres = await self._load_genres(session, orm_models) if "genre" in populate else {}
            return [self._to_populated(m, populate, authors, genres) for m in orm_models]

    async def find_by_id(self, book_id: BookId, populate: Sequence[str] = ()) -> Book | None:
        """Find book by ID, resolving the requested references."""
        self._check_populate(populate)
        async with self._session("find_by_id") as session:
            orm_model = await session.get(BookORM, book_id.value)
            if orm_model is None:
                return None
            authors = (
                await self._load_authors(session, [orm_model]) if "author" in populate else {}
            )
            genres = await self._load_genres(session, [orm_model]) if "genre" in populate else {}
            return self._to_populated(orm_model, populate, authors, genres)

    def _check_populate(self, populate: Sequence[str]) -> None:
        for path in populate:
            if path not in POPULATE_PATHS:
                raise StoreError(f"Cannot populate book path '{path}'", operation="query")

    @staticmethod
    def _projection_options(projection: Sequence[str]) -> list[Any]:
        columns = []
        include_genres = False
        for name in projection:
            if name == "genre":
                include_genres = True
            elif name in PROJECTION_FIELDS:
                columns.append(PROJECTION_FIELDS[name])
            else:
                raise StoreError(f"Unknown book projection field '{name}'", operation="query")

        options: list[Any] = [load_only(*columns)] if columns else [load_only(BookORM.id)]
        if not include_genres:
            options.append(noload(BookORM.genre_links))
        return options

    async def _load_authors(
        self, session: AsyncSession, orm_models: list[BookORM]
    ) -> dict[str, Author]:
        ids = {m.author_id for m in orm_models if m.author_id}
        if not ids:
            return {}
        result = await session.execute(select(AuthorORM).where(AuthorORM.id.in_(ids)))
        return {a.id: self.author_mapper.to_domain(a) for a in result.scalars().all()}

    async def _load_genres(
        self, session: AsyncSession, orm_models: list[BookORM]
    ) -> dict[str, Genre]:
        ids = {link.genre_id for m in orm_models for link in m.genre_links}
        if not ids:
            return {}
        result = await session.execute(select(GenreORM).where(GenreORM.id.in_(ids)))
        return {g.id: self.genre_mapper.to_domain(g) for g in result.scalars().all()}

    def _to_populated(
        self,
        orm_model: BookORM,
        populate: Sequence[str],
        authors: dict[str, Author],
        genres: dict[str, Genre],
    ) -> Book:
        book = self.mapper.to_domain(orm_model)
        if "author" in populate and book.author_id is not None:
            book.author = authors.get(book.author_id.value)
        if "genre" in populate:
            # Keep the book's genre order; skip ids with no genre behind them
            book.genres = [genres[g.value] for g in book.genre_ids if g.value in genres]
        return book
