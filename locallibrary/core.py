from dependency_injector import containers, providers
from sqlalchemy.ext.asyncio import async_sessionmaker

from locallibrary.application.catalog.book_form import (
    build_create_book_pipeline,
    build_update_book_pipeline,
)
from locallibrary.application.catalog.use_cases import (
    CreateBookUseCase,
    GetBookDetailsUseCase,
    GetBookFormDataUseCase,
    GetCatalogCountsUseCase,
    ListBooksUseCase,
    UpdateBookUseCase,
)
from locallibrary.config import get_settings
from locallibrary.domain.catalog.services.genre_selection_service import GenreSelectionService
from locallibrary.infrastructure.catalog.repositories import (
    AuthorRepository,
    BookInstanceRepository,
    BookRepository,
    GenreRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare session_factory as a dependency that will be provided at runtime
    session_factory = providers.Dependency(instance_of=async_sessionmaker)

    settings = providers.Callable(get_settings)

    # Repositories
    book_repository = providers.Factory(BookRepository, session_factory=session_factory)
    author_repository = providers.Factory(AuthorRepository, session_factory=session_factory)
    genre_repository = providers.Factory(GenreRepository, session_factory=session_factory)
    book_instance_repository = providers.Factory(
        BookInstanceRepository, session_factory=session_factory
    )

    # Domain services (pure domain logic, no db)
    genre_selection_service = providers.Factory(GenreSelectionService)

    # Form validation
    create_book_pipeline = providers.Factory(build_create_book_pipeline, settings=settings)
    update_book_pipeline = providers.Factory(build_update_book_pipeline, settings=settings)

    # Catalog module, application use cases
    get_catalog_counts_use_case = providers.Factory(
        GetCatalogCountsUseCase,
        book_repository=book_repository,
        book_instance_repository=book_instance_repository,
        author_repository=author_repository,
        genre_repository=genre_repository,
    )
    list_books_use_case = providers.Factory(ListBooksUseCase, book_repository=book_repository)
    get_book_details_use_case = providers.Factory(
        GetBookDetailsUseCase,
        book_repository=book_repository,
        book_instance_repository=book_instance_repository,
    )
    get_book_form_data_use_case = providers.Factory(
        GetBookFormDataUseCase,
        author_repository=author_repository,
        genre_repository=genre_repository,
    )
    create_book_use_case = providers.Factory(
        CreateBookUseCase,
        book_repository=book_repository,
        get_book_form_data_use_case=get_book_form_data_use_case,
        genre_selection_service=genre_selection_service,
        pipeline=create_book_pipeline,
    )
    update_book_use_case = providers.Factory(
        UpdateBookUseCase,
        book_repository=book_repository,
        genre_repository=genre_repository,
        genre_selection_service=genre_selection_service,
        pipeline=update_book_pipeline,
    )


container = Container()
