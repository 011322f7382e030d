"""
Domain Exceptions

The service layer raises these instead of HTTPException so it stays
independent of the web framework. main.py registers a handler for each
one that turns it into the matching HTTP response.

    BookstoreError
    ├── BookNotFoundError  → 404 Not Found
    └── BookConflictError  → 409 Conflict

Database failures are not wrapped: SQLAlchemyError propagates up and is
answered with a generic 500.
"""


class BookstoreError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BookNotFoundError(BookstoreError):
    """No book row matches the requested isbn."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with isbn {isbn} not found")
        self.isbn = isbn


class BookConflictError(BookstoreError):
    """A book with this isbn already exists."""

    def __init__(self, isbn: str) -> None:
        super().__init__(f"Book with isbn {isbn} already exists")
        self.isbn = isbn
