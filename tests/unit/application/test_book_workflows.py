"""Tests for the create and update book workflows."""

import pytest

from locallibrary.application.catalog.book_form import (
    build_create_book_pipeline,
    build_update_book_pipeline,
)
from locallibrary.application.catalog.use_cases import (
    CreateBookUseCase,
    GetBookFormDataUseCase,
    UpdateBookUseCase,
)
from locallibrary.application.common import Redirect, Render, RequestContext
from locallibrary.config import Settings
from locallibrary.domain.catalog.entities import Author, Book, Genre
from locallibrary.domain.catalog.services import GenreSelectionService
from locallibrary.domain.common.value_objects import AuthorId, BookId, GenreId
from locallibrary.exceptions import BookNotFoundError, StoreError
from tests.fakes import FakeAuthorRepository, FakeBookRepository, FakeGenreRepository

VALID_FORM = {
    "title": "Persuasion",
    "author": "A1",
    "summary": "Second chances.",
    "isbn": "0140620680",
}


@pytest.fixture
def authors() -> FakeAuthorRepository:
    return FakeAuthorRepository([Author(AuthorId("A1"), "Jane", "Austen")])


@pytest.fixture
def genres() -> FakeGenreRepository:
    return FakeGenreRepository(
        [
            Genre(GenreId("G1"), "Fiction"),
            Genre(GenreId("G2"), "Romance"),
            Genre(GenreId("G3"), "Satire"),
        ]
    )


@pytest.fixture
def books(authors: FakeAuthorRepository, genres: FakeGenreRepository) -> FakeBookRepository:
    emma = Book.create_with_id(
        id=BookId("B1"),
        title="Emma",
        summary="A novel.",
        isbn="9780141439587",
        author_id=AuthorId("A1"),
        genre_ids=[GenreId("G1")],
    )
    return FakeBookRepository([emma], authors=authors, genres=genres)


@pytest.fixture
def create_use_case(
    books: FakeBookRepository, authors: FakeAuthorRepository, genres: FakeGenreRepository
) -> CreateBookUseCase:
    return CreateBookUseCase(
        book_repository=books,
        get_book_form_data_use_case=GetBookFormDataUseCase(authors, genres),
        genre_selection_service=GenreSelectionService(),
        pipeline=build_create_book_pipeline(Settings()),
    )


@pytest.fixture
def update_use_case(books: FakeBookRepository, genres: FakeGenreRepository) -> UpdateBookUseCase:
    return UpdateBookUseCase(
        book_repository=books,
        genre_repository=genres,
        genre_selection_service=GenreSelectionService(),
        pipeline=build_update_book_pipeline(Settings()),
    )


def _checked(render: Render) -> list[str]:
    return [o.genre.id.value for o in render.payload["genres"] if o.checked]


def _update_request(form: dict[str, str | list[str]], book_id: str = "B1") -> RequestContext:
    return RequestContext(path_params={"book_id": book_id}, form=form)


class TestCreateBookUseCase:
    @pytest.mark.asyncio
    async def test_show_form_lists_everything_unchecked(
        self, create_use_case: CreateBookUseCase
    ) -> None:
        result = await create_use_case.show_form(RequestContext())

        assert result.view == "book_form"
        assert result.payload["title"] == "Create Book"
        assert len(result.payload["authors"]) == 1
        assert len(result.payload["genres"]) == 3
        assert _checked(result) == []

    @pytest.mark.asyncio
    async def test_valid_submission_saves_and_redirects(
        self, create_use_case: CreateBookUseCase, books: FakeBookRepository
    ) -> None:
        form = {**VALID_FORM, "genre": ["G1", "G2"]}

        result = await create_use_case.submit(RequestContext(form=form))

        [saved] = books.saved
        assert result == Redirect(saved.url)
        assert saved.title == "Persuasion"
        assert saved.author_id == AuthorId("A1")
        assert saved.genre_ids == [GenreId("G1"), GenreId("G2")]

    @pytest.mark.asyncio
    async def test_single_genre_is_accepted(
        self, create_use_case: CreateBookUseCase, books: FakeBookRepository
    ) -> None:
        await create_use_case.submit(RequestContext(form={**VALID_FORM, "genre": "G3"}))

        assert books.saved[0].genre_ids == [GenreId("G3")]

    @pytest.mark.asyncio
    async def test_no_genre_is_accepted(
        self, create_use_case: CreateBookUseCase, books: FakeBookRepository
    ) -> None:
        await create_use_case.submit(RequestContext(form=VALID_FORM))

        assert books.saved[0].genre_ids == []

    @pytest.mark.asyncio
    async def test_submission_is_sanitized(
        self, create_use_case: CreateBookUseCase, books: FakeBookRepository
    ) -> None:
        form = {**VALID_FORM, "title": "  <b>Persuasion</b>  "}

        await create_use_case.submit(RequestContext(form=form))

        assert books.saved[0].title == "&lt;b&gt;Persuasion&lt;/b&gt;"

    @pytest.mark.asyncio
    async def test_invalid_submission_rerenders_without_saving(
        self, create_use_case: CreateBookUseCase, books: FakeBookRepository
    ) -> None:
        form = {**VALID_FORM, "title": "", "genre": ["G2"]}

        result = await create_use_case.submit(RequestContext(form=form))

        assert isinstance(result, Render)
        assert result.view == "book_form"
        assert [e.field for e in result.payload["errors"]] == ["title"]
        assert result.payload["errors"][0].message == "Title must not be empty."
        assert _checked(result) == ["G2"]
        assert result.payload["book"].summary == "Second chances."
        assert len(result.payload["authors"]) == 1
        assert books.saved == []

    @pytest.mark.asyncio
    async def test_rerender_checks_exactly_the_selected_genres(
        self, create_use_case: CreateBookUseCase
    ) -> None:
        form = {**VALID_FORM, "title": "", "genre": ["G1", "G3"]}

        result = await create_use_case.submit(RequestContext(form=form))

        assert isinstance(result, Render)
        assert _checked(result) == ["G1", "G3"]

    @pytest.mark.asyncio
    async def test_every_missing_field_is_reported(
        self, create_use_case: CreateBookUseCase
    ) -> None:
        result = await create_use_case.submit(RequestContext(form={}))

        assert isinstance(result, Render)
        assert [e.field for e in result.payload["errors"]] == [
            "title",
            "author",
            "summary",
            "isbn",
        ]

    @pytest.mark.asyncio
    async def test_save_failure_propagates(
        self, create_use_case: CreateBookUseCase, books: FakeBookRepository
    ) -> None:
        books.fail("save")

        with pytest.raises(StoreError):
            await create_use_case.submit(RequestContext(form=VALID_FORM))


class TestUpdateBookUseCase:
    @pytest.mark.asyncio
    async def test_show_form_checks_current_genres(
        self, update_use_case: UpdateBookUseCase
    ) -> None:
        result = await update_use_case.show_form(_update_request({}))

        assert result.view == "book_update"
        assert result.payload["title"] == "Update Book"
        assert result.payload["book"].title == "Emma"
        assert result.payload["errors"] is None
        assert _checked(result) == ["G1"]

    @pytest.mark.asyncio
    async def test_show_form_checks_several_genres(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        books.entities[BookId("B1")].genre_ids = [GenreId("G1"), GenreId("G3")]

        result = await update_use_case.show_form(_update_request({}))

        assert _checked(result) == ["G1", "G3"]

    @pytest.mark.asyncio
    async def test_show_form_for_missing_book(self, update_use_case: UpdateBookUseCase) -> None:
        with pytest.raises(BookNotFoundError):
            await update_use_case.show_form(_update_request({}, book_id="missing"))

    @pytest.mark.asyncio
    async def test_valid_submission_overwrites_book(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        form = {**VALID_FORM, "genre": "G2"}

        result = await update_use_case.submit(_update_request(form))

        assert result == Redirect("/catalog/book/B1")
        [saved] = books.saved
        assert saved.id == BookId("B1")
        assert saved.title == "Persuasion"
        assert saved.summary == "Second chances."
        assert saved.isbn == "0140620680"
        # Replaced, not merged with the previous G1
        assert saved.genre_ids == [GenreId("G2")]
        assert saved.author_id == AuthorId("A1")

    @pytest.mark.asyncio
    async def test_empty_genre_selection_clears_genres(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        await update_use_case.submit(_update_request(VALID_FORM))

        assert books.saved[0].genre_ids == []

    @pytest.mark.asyncio
    async def test_invalid_submission_rerenders_with_error_map(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        form = {**VALID_FORM, "title": "ab", "isbn": "123", "genre": ["G3"]}

        result = await update_use_case.submit(_update_request(form))

        assert isinstance(result, Render)
        assert result.view == "book_update"
        errors = result.payload["errors"]
        assert list(errors) == ["title", "isbn"]
        assert errors["title"].message == (
            "Title can not be shorter than 3 and longer than 100 characters"
        )
        assert errors["isbn"].message == "Invalid ISBN"
        # Submitted values are shown back to the user
        assert result.payload["book"].title == "ab"
        assert _checked(result) == ["G3"]
        assert books.saved == []
        assert books.entities[BookId("B1")].title == "Emma"

    @pytest.mark.asyncio
    async def test_rerender_checks_exactly_the_submitted_genres(
        self, update_use_case: UpdateBookUseCase
    ) -> None:
        form = {**VALID_FORM, "title": "ab", "genre": ["G1", "G3"]}

        result = await update_use_case.submit(_update_request(form))

        assert isinstance(result, Render)
        assert _checked(result) == ["G1", "G3"]

    @pytest.mark.asyncio
    async def test_valid_submission_keeps_several_genres(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        await update_use_case.submit(_update_request({**VALID_FORM, "genre": ["G1", "G3"]}))

        assert books.saved[0].genre_ids == [GenreId("G1"), GenreId("G3")]

    @pytest.mark.asyncio
    async def test_submission_for_missing_book(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        with pytest.raises(BookNotFoundError):
            await update_use_case.submit(_update_request(VALID_FORM, book_id="missing"))

        assert books.saved == []

    @pytest.mark.asyncio
    async def test_failed_genre_fetch(
        self, update_use_case: UpdateBookUseCase, genres: FakeGenreRepository
    ) -> None:
        genres.fail("find")

        with pytest.raises(StoreError):
            await update_use_case.submit(_update_request(VALID_FORM))

    @pytest.mark.asyncio
    async def test_save_failure_propagates(
        self, update_use_case: UpdateBookUseCase, books: FakeBookRepository
    ) -> None:
        books.fail("save")

        with pytest.raises(StoreError, match="save failed"):
            await update_use_case.submit(_update_request(VALID_FORM))
