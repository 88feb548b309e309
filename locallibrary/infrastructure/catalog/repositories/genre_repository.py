from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.infrastructure.catalog.mappers.genre_mapper import GenreMapper
from locallibrary.infrastructure.catalog.repositories.base import SqlAlchemyRepository
from locallibrary.models import Genre as GenreORM


class GenreRepository(SqlAlchemyRepository[Genre]):
    """Domain-centric repository for Genre persistence."""

    orm_model = GenreORM
    filter_fields = {"name": GenreORM.name}
    entity_name = "genre"
    order_by = (GenreORM.name,)

    mapper = GenreMapper()

    def to_domain(self, orm_model: GenreORM) -> Genre:
        return self.mapper.to_domain(orm_model)

    def to_orm(self, entity: Genre, orm_model: GenreORM | None = None) -> GenreORM:
        return self.mapper.to_orm(entity, orm_model)
