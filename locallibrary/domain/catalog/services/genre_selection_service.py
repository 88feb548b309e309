"""
Genre selection domain service.

Builds the per-render list of genre options for book forms, marking the
genres currently associated with the book as checked. The checked flag lives
on the option, never on the Genre entity, so it cannot leak into persistence.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from locallibrary.domain.catalog.entities.genre import Genre
from locallibrary.domain.common.value_objects.ids import GenreId


@dataclass
class GenreOption:
    """A genre as offered on a book form."""

    genre: Genre
    checked: bool = False


class GenreSelectionService:
    """Domain service for marking selected genres on book forms."""

    def mark_by_id(
        self, genres: Iterable[Genre], selected_ids: Iterable[GenreId]
    ) -> list[GenreOption]:
        """Check every genre whose id is in ``selected_ids``."""
        selected = set(selected_ids)
        return [GenreOption(genre=genre, checked=genre.id in selected) for genre in genres]

    def mark_by_name(
        self, genres: Iterable[Genre], selected: Iterable[Genre]
    ) -> list[GenreOption]:
        """Check every genre whose name matches one of the ``selected`` genres."""
        names = {genre.name for genre in selected}
        return [GenreOption(genre=genre, checked=genre.name in names) for genre in genres]
