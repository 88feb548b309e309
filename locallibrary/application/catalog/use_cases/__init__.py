"""Catalog application use cases."""

from .create_book_use_case import CreateBookUseCase
from .get_book_details_use_case import GetBookDetailsUseCase
from .get_book_form_data_use_case import GetBookFormDataUseCase
from .get_catalog_counts_use_case import GetCatalogCountsUseCase
from .list_books_use_case import ListBooksUseCase
from .update_book_use_case import UpdateBookUseCase

__all__ = [
    "CreateBookUseCase",
    "GetBookDetailsUseCase",
    "GetBookFormDataUseCase",
    "GetCatalogCountsUseCase",
    "ListBooksUseCase",
    "UpdateBookUseCase",
]
