from locallibrary.domain.catalog.entities.book_instance import BookInstance
from locallibrary.infrastructure.catalog.mappers.book_instance_mapper import BookInstanceMapper
from locallibrary.infrastructure.catalog.repositories.base import SqlAlchemyRepository
from locallibrary.models import BookInstance as BookInstanceORM


class BookInstanceRepository(SqlAlchemyRepository[BookInstance]):
    """
    Domain-centric repository for BookInstance persistence.

    Criteria use the domain field names: ``book`` filters by the owning
    book's ID and ``status`` by lending status.
    """

    orm_model = BookInstanceORM
    filter_fields = {
        "book": BookInstanceORM.book_id,
        "status": BookInstanceORM.status,
        "imprint": BookInstanceORM.imprint,
    }
    entity_name = "book instance"
    order_by = (BookInstanceORM.due_back, BookInstanceORM.id)

    mapper = BookInstanceMapper()

    def to_domain(self, orm_model: BookInstanceORM) -> BookInstance:
        return self.mapper.to_domain(orm_model)

    def to_orm(
        self, entity: BookInstance, orm_model: BookInstanceORM | None = None
    ) -> BookInstanceORM:
        return self.mapper.to_orm(entity, orm_model)
