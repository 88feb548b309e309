from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.common.value_objects.ids import GenreId
from locallibrary.models import Genre as GenreORM


class GenreMapper:
    """Mapper for Genre ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GenreORM) -> Genre:
        return Genre(id=GenreId(orm_model.id), name=orm_model.name)

    def to_orm(self, domain_entity: Genre, orm_model: GenreORM | None = None) -> GenreORM:
        if orm_model:
            orm_model.name = domain_entity.name
            return orm_model
        return GenreORM(id=domain_entity.id.value, name=domain_entity.name)
