"""Update book use case."""

import logging

from locallibrary.application.catalog.book_form import BookFormInput, normalize_genre_selection
from locallibrary.application.catalog.protocols.book_repository import BookRepositoryProtocol
from locallibrary.application.catalog.protocols.genre_repository import GenreRepositoryProtocol
from locallibrary.application.common.aggregation import join
from locallibrary.application.common.dispositions import Disposition, Redirect, Render
from locallibrary.application.common.request_context import RequestContext
from locallibrary.application.common.validation import ValidationPipeline
from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.catalog.services.genre_selection_service import GenreSelectionService
from locallibrary.domain.common.value_objects import BookId
from locallibrary.exceptions import BookNotFoundError, StoreError

logger = logging.getLogger(__name__)

FORM_TITLE = "Update Book"


class UpdateBookUseCase:
    """Use case for updating book information from the update form."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        genre_repository: GenreRepositoryProtocol,
        genre_selection_service: GenreSelectionService,
        pipeline: ValidationPipeline,
    ) -> None:
        self.book_repository = book_repository
        self.genre_repository = genre_repository
        self.genre_selection_service = genre_selection_service
        self.pipeline = pipeline

    async def show_form(self, request: RequestContext) -> Render:
        """
        Render the update form for an existing book.

        Genres are checked when their name matches one of the book's genres.

        Raises:
            BookNotFoundError: If the book does not exist
            StoreError: If either fetch fails
        """
        book_id = BookId(request.path_param("book_id"))
        book, genres = await self._fetch_book_and_genres(book_id)

        return Render(
            "book_update",
            {
                "title": FORM_TITLE,
                "book": book,
                "genres": self.genre_selection_service.mark_by_name(genres, book.genres or []),
                "errors": None,
            },
        )

    async def submit(self, request: RequestContext) -> Disposition:
        """
        Overwrite a book with a submitted update form.

        Title, summary, ISBN and genres are replaced with the sanitized
        submission; the author is kept. On validation failure the form is
        rendered again with the error map and nothing is persisted.

        Args:
            request: Request context carrying ``book_id`` and the submitted form

        Returns:
            Redirect to the book, or Render of ``book_update`` with errors

        Raises:
            BookNotFoundError: If the book does not exist
            StoreError: If a fetch or the final save fails
        """
        book_id = BookId(request.path_param("book_id"))
        form = normalize_genre_selection(request.form)
        sanitized, errors = self.pipeline.validate(form)
        data = BookFormInput.from_sanitized(sanitized)

        book, genres = await self._fetch_book_and_genres(book_id)

        book.revise(
            title=data.title,
            summary=data.summary,
            isbn=data.isbn,
            genre_ids=data.genre_ids,
        )
        genre_options = self.genre_selection_service.mark_by_id(genres, book.genre_ids)

        if not errors.is_empty():
            logger.debug(f"Update of book {book_id} rejected, failing fields: {errors.fields}")
            return Render(
                "book_update",
                {
                    "title": FORM_TITLE,
                    "book": book,
                    "genres": genre_options,
                    "errors": errors.mapped(),
                },
            )

        try:
            book = await self.book_repository.save(book)
        except StoreError as e:
            logger.error(f"Failed to save update of book {book_id}: {e!s}", exc_info=True)
            raise

        logger.info(f"Successfully updated book {book_id}")

        return Redirect(book.url)

    async def _fetch_book_and_genres(self, book_id: BookId) -> tuple[Book, list[Genre]]:
        results = await join(
            book=self.book_repository.find_by_id(book_id, populate=("author", "genre")),
            genres=self.genre_repository.find(),
        )

        book = results["book"]
        if book is None:
            raise BookNotFoundError(book_id.value)

        return book, results["genres"]
