"""Get book details use case."""

import logging

from locallibrary.application.catalog.protocols.book_instance_repository import (
    BookInstanceRepositoryProtocol,
)
from locallibrary.application.catalog.protocols.book_repository import BookRepositoryProtocol
from locallibrary.application.common.aggregation import join
from locallibrary.application.common.dispositions import Render
from locallibrary.application.common.request_context import RequestContext
from locallibrary.domain.catalog.services.catalog_aggregations import BookDetailsAggregation
from locallibrary.domain.common.value_objects import BookId
from locallibrary.exceptions import BookNotFoundError

logger = logging.getLogger(__name__)


class GetBookDetailsUseCase:
    """Use case for getting a book together with its physical copies."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        book_instance_repository: BookInstanceRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.book_instance_repository = book_instance_repository

    async def get_details(self, request: RequestContext) -> Render:
        """
        Fetch the populated book and its instances concurrently.

        Args:
            request: Request context carrying the ``book_id`` path parameter

        Returns:
            Render of the ``book_detail`` view

        Raises:
            BookNotFoundError: If the book does not exist
            InvariantViolationError: If the book's author reference is dangling
            StoreError: If either fetch fails
        """
        book_id = BookId(request.path_param("book_id"))

        results = await join(
            book=self.book_repository.find_by_id(book_id, populate=("author", "genre")),
            book_instances=self.book_instance_repository.find({"book": book_id}),
        )

        book = results["book"]
        if book is None:
            raise BookNotFoundError(book_id.value)

        # Dereference for display; fails on a dangling author reference
        book.resolved_author()

        details = BookDetailsAggregation(book=book, book_instances=results["book_instances"])
        logger.debug(f"Loaded book {book_id} with {len(details.book_instances)} instances")

        return Render(
            "book_detail",
            {
                "title": book.title,
                "book": details.book,
                "book_instances": details.book_instances,
            },
        )
