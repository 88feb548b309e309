"""Tests for book form rule sets and genre normalization."""

from locallibrary.application.catalog.book_form import (
    BookFormInput,
    build_create_book_pipeline,
    build_update_book_pipeline,
    normalize_genre_selection,
)
from locallibrary.config import Settings
from locallibrary.domain.common.value_objects import AuthorId, GenreId

VALID_CREATE_FORM = {
    "title": "Emma",
    "author": "A1",
    "summary": "A novel.",
    "isbn": "9780141439587",
}


class TestNormalizeGenreSelection:
    def test_absent_becomes_empty_list(self) -> None:
        assert normalize_genre_selection({"title": "x"})["genre"] == []

    def test_single_value_becomes_list(self) -> None:
        assert normalize_genre_selection({"genre": "G1"})["genre"] == ["G1"]

    def test_list_kept_in_order_without_repeats(self) -> None:
        normalized = normalize_genre_selection({"genre": ["G2", "G1", "G2"]})
        assert normalized["genre"] == ["G2", "G1"]

    def test_input_not_mutated(self) -> None:
        form = {"genre": "G1"}
        normalize_genre_selection(form)
        assert form == {"genre": "G1"}


class TestCreatePipeline:
    def test_valid_form(self) -> None:
        _, errors = build_create_book_pipeline(Settings()).validate(VALID_CREATE_FORM)
        assert errors.is_empty()

    def test_empty_title_is_the_only_error(self) -> None:
        _, errors = build_create_book_pipeline(Settings()).validate(
            {**VALID_CREATE_FORM, "title": ""}
        )
        assert errors.fields == ["title"]
        assert errors.as_list()[0].message == "Title must not be empty."

    def test_all_fields_required(self) -> None:
        _, errors = build_create_book_pipeline(Settings()).validate({})
        assert errors.fields == ["title", "author", "summary", "isbn"]

    def test_isbn_format_not_checked(self) -> None:
        _, errors = build_create_book_pipeline(Settings()).validate(
            {**VALID_CREATE_FORM, "isbn": "abc"}
        )
        assert errors.is_empty()

    def test_comment_only_title_is_kept_escaped(self) -> None:
        sanitized, errors = build_create_book_pipeline(Settings()).validate(
            {**VALID_CREATE_FORM, "title": "<!-- x -->"}
        )
        assert errors.is_empty()
        assert sanitized["title"] == "&lt;!-- x --&gt;"

    def test_title_too_long(self) -> None:
        _, errors = build_create_book_pipeline(Settings()).validate(
            {**VALID_CREATE_FORM, "title": "a" * 101}
        )
        assert errors.fields == ["title"]
        assert errors.as_list()[0].message == "Title can not be longer than 100 characters"

    def test_isbn_too_long(self) -> None:
        _, errors = build_create_book_pipeline(Settings()).validate(
            {**VALID_CREATE_FORM, "isbn": "9" * 21}
        )
        assert errors.fields == ["isbn"]
        assert errors.as_list()[0].message == "ISBN can not be longer than 20 characters"


class TestUpdatePipeline:
    def _validate(self, **fields: str) -> list[str]:
        form = {"title": "Emma", "summary": "A novel.", "isbn": "9780141439587", **fields}
        _, errors = build_update_book_pipeline(Settings()).validate(form)
        return errors.fields

    def test_valid_form(self) -> None:
        assert self._validate() == []

    def test_title_too_short(self) -> None:
        assert self._validate(title="ab") == ["title"]

    def test_title_too_long(self) -> None:
        assert self._validate(title="a" * 101) == ["title"]

    def test_summary_too_long(self) -> None:
        assert self._validate(summary="a" * 501) == ["summary"]

    def test_invalid_isbn(self) -> None:
        assert self._validate(isbn="123") == ["isbn"]

    def test_isbn_padded_with_hyphens_too_long(self) -> None:
        assert self._validate(isbn="0-14-062068-0" + "-" * 10) == ["isbn"]

    def test_messages_use_configured_bounds(self) -> None:
        settings = Settings(BOOK_TITLE_MIN_LENGTH=2, BOOK_TITLE_MAX_LENGTH=10)
        _, errors = build_update_book_pipeline(settings).validate(
            {"title": "a", "summary": "", "isbn": "0140620680"}
        )
        assert errors.mapped()["title"].message == (
            "Title can not be shorter than 2 and longer than 10 characters"
        )


class TestBookFormInput:
    def test_from_sanitized(self) -> None:
        data = BookFormInput.from_sanitized({**VALID_CREATE_FORM, "genre": ["G1", "", "G3"]})
        assert data.title == "Emma"
        assert data.author_id == AuthorId("A1")
        assert data.genre_ids == [GenreId("G1"), GenreId("G3")]

    def test_empty_author_is_no_reference(self) -> None:
        data = BookFormInput.from_sanitized({"author": ""})
        assert data.author_id is None
        assert data.genre_ids == []
