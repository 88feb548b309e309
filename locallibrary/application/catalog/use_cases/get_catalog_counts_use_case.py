"""Catalog dashboard counts use case."""

from locallibrary.application.catalog.protocols.author_repository import AuthorRepositoryProtocol
from locallibrary.application.catalog.protocols.book_instance_repository import (
    BookInstanceRepositoryProtocol,
)
from locallibrary.application.catalog.protocols.book_repository import BookRepositoryProtocol
from locallibrary.application.catalog.protocols.genre_repository import GenreRepositoryProtocol
from locallibrary.application.common.aggregation import join
from locallibrary.application.common.dispositions import Render
from locallibrary.application.common.request_context import RequestContext
from locallibrary.domain.catalog.entities.book_instance import BookInstanceStatus
from locallibrary.domain.catalog.services.catalog_aggregations import CatalogCounts


class GetCatalogCountsUseCase:
    """Use case for the catalog home page record counts."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        book_instance_repository: BookInstanceRepositoryProtocol,
        author_repository: AuthorRepositoryProtocol,
        genre_repository: GenreRepositoryProtocol,
    ) -> None:
        self.book_repository = book_repository
        self.book_instance_repository = book_instance_repository
        self.author_repository = author_repository
        self.genre_repository = genre_repository

    async def get_counts(self, request: RequestContext) -> Render:
        """
        Count every catalog collection concurrently.

        Args:
            request: Request context (unused, accepted for a uniform entry point)

        Returns:
            Render of the ``index`` view

        Raises:
            StoreError: If any count fails; no partial counts are returned
        """
        results = await join(
            book_count=self.book_repository.count(),
            book_instance_count=self.book_instance_repository.count(),
            book_instance_available_count=self.book_instance_repository.count(
                {"status": BookInstanceStatus.AVAILABLE}
            ),
            author_count=self.author_repository.count(),
            genre_count=self.genre_repository.count(),
        )

        return Render("index", {"title": "Local Library Home", "data": CatalogCounts(**results)})
