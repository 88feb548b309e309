"""List books use case."""

from locallibrary.application.catalog.protocols.book_repository import BookRepositoryProtocol
from locallibrary.application.common.dispositions import Render
from locallibrary.application.common.request_context import RequestContext


class ListBooksUseCase:
    """Use case for listing every book with its author."""

    def __init__(self, book_repository: BookRepositoryProtocol) -> None:
        self.book_repository = book_repository

    async def list_books(self, request: RequestContext) -> Render:
        books = await self.book_repository.find(
            projection=("title", "author"), populate=("author",)
        )
        return Render("book_list", {"title": "Book List", "book_list": books})
