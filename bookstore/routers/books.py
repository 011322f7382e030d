"""
Books Router

CRUD endpoints for books:

    POST   /books          create a book              201 {"book": ...}
    GET    /books          list all books             200 {"books": [...]}
    GET    /books/{isbn}   get one book               200 {"book": ...}
    PUT    /books/{isbn}   update some fields         200 {"book": ...}
    DELETE /books/{isbn}   delete a book              200 {"message": "Book deleted"}

Handlers stay thin: the request body is validated by Pydantic before the
handler runs, the services module does the database work, and domain
exceptions are turned into 404/409 responses by the handlers in main.py.
"""

from fastapi import APIRouter, status
from fastapi.exceptions import RequestValidationError

from bookstore.dependencies import DbSession, Isbn
from bookstore.schemas import (
    BookCreate,
    BookEnvelope,
    BookListResponse,
    BookResponse,
    BookUpdate,
    ErrorResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from bookstore.services import books as books_service

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ValidationErrorResponse, "description": "Invalid request"},
    },
)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}


# =============================================================================
# Endpoints
# =============================================================================
# Collection routes use "" so the paths are exactly /books, without a
# redirect from /books to /books/.
@router.get(
    "",
    response_model=BookListResponse,
    summary="List all books",
    description="Get every book, ordered by title.",
)
def list_books(db: DbSession) -> BookListResponse:
    books = books_service.list_books(db)
    return BookListResponse(
        books=[BookResponse.model_validate(book) for book in books],
    )


@router.get(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Get a book by ISBN",
    responses=NOT_FOUND,
)
def get_book(isbn: Isbn, db: DbSession) -> BookEnvelope:
    """
    Get a single book by its ISBN.

    Raises:
        BookNotFoundError: 404 if no book has this ISBN
    """
    book = books_service.get_book(db, isbn)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.post(
    "",
    response_model=BookEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={
        409: {"model": ErrorResponse, "description": "ISBN already exists"},
    },
)
def create_book(book_data: BookCreate, db: DbSession) -> BookEnvelope:
    """
    Create a new book.

    Every field is required. A duplicate ISBN is rejected by the
    database's primary key and answered with 409 Conflict.
    """
    book = books_service.create_book(db, book_data)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.put(
    "/{isbn}",
    response_model=BookEnvelope,
    summary="Update a book",
    responses=NOT_FOUND,
)
def update_book(isbn: Isbn, book_data: BookUpdate, db: DbSession) -> BookEnvelope:
    """
    Update an existing book.

    Uses PUT but with optional fields (PATCH-like behavior): only the
    fields in the body are changed. The ISBN itself cannot change.

    Raises:
        RequestValidationError: 400 if the body carries a different ISBN
        BookNotFoundError: 404 if no book has this ISBN
    """
    if book_data.isbn is not None and book_data.isbn != isbn:
        # Reported like any other invalid field: {"field": "isbn", ...}
        raise RequestValidationError(
            [
                {
                    "type": "value_error",
                    "loc": ("body", "isbn"),
                    "msg": "isbn cannot be changed",
                    "input": book_data.isbn,
                }
            ]
        )

    book = books_service.update_book(db, isbn, book_data)
    return BookEnvelope(book=BookResponse.model_validate(book))


@router.delete(
    "/{isbn}",
    response_model=MessageResponse,
    summary="Delete a book",
    responses=NOT_FOUND,
)
def delete_book(isbn: Isbn, db: DbSession) -> MessageResponse:
    """
    Delete a book.

    Deleting the same ISBN twice returns 404 the second time.
    """
    books_service.delete_book(db, isbn)
    return MessageResponse(message="Book deleted")
