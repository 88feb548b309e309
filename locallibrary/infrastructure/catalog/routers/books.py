from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from locallibrary.application.catalog.use_cases import (
    CreateBookUseCase,
    GetBookDetailsUseCase,
    GetCatalogCountsUseCase,
    ListBooksUseCase,
    UpdateBookUseCase,
)
from locallibrary.application.common.request_context import RequestContext
from locallibrary.application.common.validation import FormValue
from locallibrary.core import container
from locallibrary.infrastructure.catalog.presenters import present
from locallibrary.infrastructure.common.di import inject_use_case

router = APIRouter(tags=["catalog"])


async def request_context(request: Request) -> RequestContext:
    """
    Build the workflow request context from the inbound request.

    Repeated form fields (several checked genres) are collected into a list;
    a field sent once stays a plain string.
    """
    form: dict[str, FormValue] = {}
    if request.method == "POST":
        async with request.form() as form_data:
            for key, value in form_data.multi_items():
                if not isinstance(value, str):
                    continue
                existing = form.get(key)
                if existing is None:
                    form[key] = value
                elif isinstance(existing, list):
                    existing.append(value)
                else:
                    form[key] = [existing, value]

    return RequestContext(path_params=dict(request.path_params), form=form)


Context = Annotated[RequestContext, Depends(request_context)]


@router.get("/")
async def catalog_index(
    context: Context,
    use_case: GetCatalogCountsUseCase = Depends(
        inject_use_case(container.get_catalog_counts_use_case)
    ),
) -> Response:
    """Site home page with record counts."""
    return present(await use_case.get_counts(context))


@router.get("/books")
async def book_list(
    context: Context,
    use_case: ListBooksUseCase = Depends(inject_use_case(container.list_books_use_case)),
) -> Response:
    """List all books with their title and author."""
    return present(await use_case.list_books(context))


# Declared before /book/{book_id} so "create" is not taken as an ID
@router.get("/book/create")
async def book_create_get(
    context: Context,
    use_case: CreateBookUseCase = Depends(inject_use_case(container.create_book_use_case)),
) -> Response:
    return present(await use_case.show_form(context))


@router.post("/book/create")
async def book_create_post(
    context: Context,
    use_case: CreateBookUseCase = Depends(inject_use_case(container.create_book_use_case)),
) -> Response:
    """
    Handle a submitted create form.

    Redirects to the new book, or re-renders the form with errors.
    """
    return present(await use_case.submit(context))


@router.get("/book/{book_id}")
async def book_detail(
    book_id: str,
    context: Context,
    use_case: GetBookDetailsUseCase = Depends(inject_use_case(container.get_book_details_use_case)),
) -> Response:
    """Show a book with its copies."""
    return present(await use_case.get_details(context))


@router.get("/book/{book_id}/update")
async def book_update_get(
    book_id: str,
    context: Context,
    use_case: UpdateBookUseCase = Depends(inject_use_case(container.update_book_use_case)),
) -> Response:
    return present(await use_case.show_form(context))


@router.post("/book/{book_id}/update")
async def book_update_post(
    book_id: str,
    context: Context,
    use_case: UpdateBookUseCase = Depends(inject_use_case(container.update_book_use_case)),
) -> Response:
    """
    Handle a submitted update form.

    Redirects to the book, or re-renders the form with the error map.
    """
    return present(await use_case.submit(context))
