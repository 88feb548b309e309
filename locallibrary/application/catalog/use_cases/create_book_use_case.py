"""Create book use case."""

import logging

from locallibrary.application.catalog.book_form import BookFormInput, normalize_genre_selection
from locallibrary.application.catalog.protocols.book_repository import BookRepositoryProtocol
from locallibrary.application.catalog.use_cases.get_book_form_data_use_case import (
    GetBookFormDataUseCase,
)
from locallibrary.application.common.dispositions import Disposition, Redirect, Render
from locallibrary.application.common.request_context import RequestContext
from locallibrary.application.common.validation import ValidationPipeline
from locallibrary.domain.catalog.entities.book import Book
from locallibrary.domain.catalog.services.genre_selection_service import GenreSelectionService

logger = logging.getLogger(__name__)

FORM_TITLE = "Create Book"


class CreateBookUseCase:
    """Use case for creating books from the book form."""

    def __init__(
        self,
        book_repository: BookRepositoryProtocol,
        get_book_form_data_use_case: GetBookFormDataUseCase,
        genre_selection_service: GenreSelectionService,
        pipeline: ValidationPipeline,
    ) -> None:
        self.book_repository = book_repository
        self.get_book_form_data_use_case = get_book_form_data_use_case
        self.genre_selection_service = genre_selection_service
        self.pipeline = pipeline

    async def show_form(self, request: RequestContext) -> Render:
        """Render an empty book form with every author and genre."""
        form_data = await self.get_book_form_data_use_case.get_form_data()
        return Render(
            "book_form",
            {
                "title": FORM_TITLE,
                "authors": form_data.authors,
                "genres": self.genre_selection_service.mark_by_id(form_data.genres, []),
            },
        )

    async def submit(self, request: RequestContext) -> Disposition:
        """
        Validate a submitted book form and create the book.

        On validation failure the form is rendered again with the sanitized
        submission and the errors; nothing is persisted.

        Args:
            request: Request context carrying the submitted form

        Returns:
            Redirect to the new book, or Render of ``book_form`` with errors

        Raises:
            StoreError: If reference data cannot be loaded or the save fails
        """
        form = normalize_genre_selection(request.form)
        sanitized, errors = self.pipeline.validate(form)

        # Built from sanitized data whether or not it is valid
        data = BookFormInput.from_sanitized(sanitized)
        book = Book.create(
            title=data.title,
            summary=data.summary,
            isbn=data.isbn,
            author_id=data.author_id,
            genre_ids=data.genre_ids,
        )

        if not errors.is_empty():
            logger.debug(f"Book form rejected, failing fields: {errors.fields}")
            form_data = await self.get_book_form_data_use_case.get_form_data()
            return Render(
                "book_form",
                {
                    "title": FORM_TITLE,
                    "authors": form_data.authors,
                    "genres": self.genre_selection_service.mark_by_id(
                        form_data.genres, book.genre_ids
                    ),
                    "book": book,
                    "errors": errors.as_list(),
                },
            )

        book = await self.book_repository.save(book)
        logger.info(f"Created book {book.id}: {book.title}")

        return Redirect(book.url)
