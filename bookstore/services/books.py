"""
Books Service

Query layer behind the /books endpoints.

Every function takes the request's Session, runs one parameterized
statement (SQLAlchemy builds bound parameters for us) and commits when it
writes. Outcomes the client caused are raised as domain exceptions:
- BookNotFoundError when no row matches the isbn
- BookConflictError when the isbn is already taken

Uniqueness is left to the primary key constraint instead of a
check-then-insert, so two concurrent creates cannot both succeed.
"""

import logging
from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bookstore.exceptions import BookConflictError, BookNotFoundError
from bookstore.models import Book
from bookstore.schemas import BookCreate, BookUpdate

logger = logging.getLogger(__name__)


def list_books(db: Session) -> Sequence[Book]:
    """Return every book, ordered by title (isbn breaks ties)."""
    stmt = select(Book).order_by(Book.title, Book.isbn)
    return db.execute(stmt).scalars().all()


def get_book(db: Session, isbn: str) -> Book:
    """
    Get a book by isbn.

    Raises:
        BookNotFoundError: if no book has this isbn
    """
    book = db.get(Book, isbn)
    if book is None:
        raise BookNotFoundError(isbn)
    return book


def create_book(db: Session, book_data: BookCreate) -> Book:
    """
    Insert a new book.

    Args:
        db: Database session
        book_data: Validated book fields

    Returns:
        The stored book

    Raises:
        BookConflictError: if the isbn already exists
    """
    book = Book(**book_data.model_dump())
    db.add(book)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning(f"Rejected duplicate isbn {book_data.isbn}")
        raise BookConflictError(book_data.isbn) from None

    db.refresh(book)
    logger.info(f"Created book {book.isbn}")
    return book


def update_book(db: Session, isbn: str, book_data: BookUpdate) -> Book:
    """
    Apply the supplied fields to an existing book.

    Only fields present in the request are written; isbn never changes.

    Raises:
        BookNotFoundError: if no book has this isbn
    """
    book = get_book(db, isbn)

    changes = book_data.changes()
    for field, value in changes.items():
        setattr(book, field, value)

    db.commit()
    db.refresh(book)
    logger.info(f"Updated book {isbn}: {sorted(changes)}")
    return book


def delete_book(db: Session, isbn: str) -> None:
    """
    Delete a book.

    A single DELETE statement; a missing book shows up as zero matched
    rows rather than a database error.

    Raises:
        BookNotFoundError: if no book has this isbn
    """
    result = db.execute(delete(Book).where(Book.isbn == isbn))
    if result.rowcount == 0:
        db.rollback()
        raise BookNotFoundError(isbn)

    db.commit()
    logger.info(f"Deleted book {isbn}")
