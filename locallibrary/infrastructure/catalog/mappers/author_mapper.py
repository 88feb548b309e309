from locallibrary.domain.catalog.entities.author import Author
from locallibrary.domain.common.value_objects.ids import AuthorId
from locallibrary.models import Author as AuthorORM


class AuthorMapper:
    """Mapper for Author ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: AuthorORM) -> Author:
        """Convert ORM model to domain entity."""
        return Author(
            id=AuthorId(orm_model.id),
            first_name=orm_model.first_name,
            family_name=orm_model.family_name,
            date_of_birth=orm_model.date_of_birth,
            date_of_death=orm_model.date_of_death,
        )

    def to_orm(self, domain_entity: Author, orm_model: AuthorORM | None = None) -> AuthorORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.first_name = domain_entity.first_name
            orm_model.family_name = domain_entity.family_name
            orm_model.date_of_birth = domain_entity.date_of_birth
            orm_model.date_of_death = domain_entity.date_of_death
            return orm_model

        return AuthorORM(
            id=domain_entity.id.value,
            first_name=domain_entity.first_name,
            family_name=domain_entity.family_name,
            date_of_birth=domain_entity.date_of_birth,
            date_of_death=domain_entity.date_of_death,
        )
