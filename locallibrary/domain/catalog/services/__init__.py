"""Catalog domain services."""

from .catalog_aggregations import BookDetailsAggregation, BookFormData, CatalogCounts
from .genre_selection_service import GenreOption, GenreSelectionService

__all__ = [
    "BookDetailsAggregation",
    "BookFormData",
    "CatalogCounts",
    "GenreOption",
    "GenreSelectionService",
]
