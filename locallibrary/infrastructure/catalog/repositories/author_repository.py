from locallibrary.domain.catalog.entities.author import Author
from locallibrary.infrastructure.catalog.mappers.author_mapper import AuthorMapper
from locallibrary.infrastructure.catalog.repositories.base import SqlAlchemyRepository
from locallibrary.models import Author as AuthorORM


class AuthorRepository(SqlAlchemyRepository[Author]):
    """Domain-centric repository for Author persistence."""

    orm_model = AuthorORM
    filter_fields = {
        "first_name": AuthorORM.first_name,
        "family_name": AuthorORM.family_name,
    }
    entity_name = "author"
    order_by = (AuthorORM.family_name, AuthorORM.first_name)

    mapper = AuthorMapper()

    def to_domain(self, orm_model: AuthorORM) -> Author:
        return self.mapper.to_domain(orm_model)

    def to_orm(self, entity: Author, orm_model: AuthorORM | None = None) -> AuthorORM:
        return self.mapper.to_orm(entity, orm_model)
