from locallibrary.domain.catalog.entities.book_instance import BookInstance, BookInstanceStatus
from locallibrary.domain.common.value_objects.ids import BookId, BookInstanceId
from locallibrary.models import BookInstance as BookInstanceORM


class BookInstanceMapper:
    """Mapper for BookInstance ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: BookInstanceORM) -> BookInstance:
        """Convert ORM model to domain entity."""
        return BookInstance(
            id=BookInstanceId(orm_model.id),
            book_id=BookId(orm_model.book_id),
            imprint=orm_model.imprint,
            status=BookInstanceStatus(orm_model.status),
            due_back=orm_model.due_back,
        )

    def to_orm(
        self, domain_entity: BookInstance, orm_model: BookInstanceORM | None = None
    ) -> BookInstanceORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            orm_model.book_id = domain_entity.book_id.value
            orm_model.imprint = domain_entity.imprint
            orm_model.status = domain_entity.status.value
            orm_model.due_back = domain_entity.due_back
            return orm_model

        return BookInstanceORM(
            id=domain_entity.id.value,
            book_id=domain_entity.book_id.value,
            imprint=domain_entity.imprint,
            status=domain_entity.status.value,
            due_back=domain_entity.due_back,
        )
