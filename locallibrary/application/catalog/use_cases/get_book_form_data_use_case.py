"""Book form reference data use case."""

from locallibrary.application.catalog.protocols.author_repository import AuthorRepositoryProtocol
from locallibrary.application.catalog.protocols.genre_repository import GenreRepositoryProtocol
from locallibrary.application.common.aggregation import join
from locallibrary.domain.catalog.services.catalog_aggregations import BookFormData


class GetBookFormDataUseCase:
    """Use case for loading every author and genre for book forms."""

    def __init__(
        self,
        author_repository: AuthorRepositoryProtocol,
        genre_repository: GenreRepositoryProtocol,
    ) -> None:
        self.author_repository = author_repository
        self.genre_repository = genre_repository

    async def get_form_data(self) -> BookFormData:
        results = await join(
            authors=self.author_repository.find(),
            genres=self.genre_repository.find(),
        )
        return BookFormData(authors=results["authors"], genres=results["genres"])
