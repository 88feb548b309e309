"""Custom exception hierarchy for the Local Library application."""


class LocalLibraryError(Exception):
    """Base exception for all Local Library errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(LocalLibraryError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class BookNotFoundError(NotFoundError):
    """Book not found error."""

    def __init__(self, book_id: str | None = None, *, message: str | None = None) -> None:
        """Initialize with book ID or custom message."""
        self.book_id = book_id
        if message:
            super().__init__(message)
        elif book_id is not None:
            super().__init__(f"Book with id {book_id} not found")
        else:
            super().__init__("Book not found")


class StoreError(LocalLibraryError):
    """
    Persistence operation failed.

    Covers connectivity loss, malformed queries and constraint violations
    raised by the entity store. Fatal for the current request.
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        """Initialize with message and the failed store operation."""
        self.operation = operation
        super().__init__(message, status_code=500)
