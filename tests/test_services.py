"""
Tests for the books service layer.

These call the service functions with a plain Session, without going
through HTTP, to check the domain errors they raise.
"""

import pytest

from bookstore.exceptions import BookConflictError, BookNotFoundError
from bookstore.schemas import BookCreate, BookUpdate
from bookstore.services import books as books_service


class TestBooksService:
    def test_create_and_get(self, db_session, book_data):
        created = books_service.create_book(db_session, BookCreate(**book_data))

        fetched = books_service.get_book(db_session, created.isbn)

        assert fetched.title == "Some cool stuff"

    def test_create_duplicate_raises_conflict(self, db_session, sample_book, book_data):
        book_data["isbn"] = sample_book.isbn
        # Forget the stored instance so only the database can spot the clash
        db_session.expunge(sample_book)

        with pytest.raises(BookConflictError) as exc_info:
            books_service.create_book(db_session, BookCreate(**book_data))

        assert exc_info.value.isbn == book_data["isbn"]

    def test_get_missing_raises_not_found(self, db_session):
        with pytest.raises(BookNotFoundError, match="not found"):
            books_service.get_book(db_session, "0000000000")

    def test_update_applies_only_supplied_fields(self, db_session, sample_book):
        updated = books_service.update_book(
            db_session,
            sample_book.isbn,
            BookUpdate(year=2010),
        )

        assert updated.year == 2010
        assert updated.title == "The Very Stupid Snowboarder"

    def test_update_missing_raises_not_found(self, db_session):
        with pytest.raises(BookNotFoundError):
            books_service.update_book(db_session, "0000000000", BookUpdate(year=2010))

    def test_delete_then_delete_again(self, db_session, sample_book):
        books_service.delete_book(db_session, sample_book.isbn)

        assert books_service.list_books(db_session) == []
        with pytest.raises(BookNotFoundError):
            books_service.delete_book(db_session, sample_book.isbn)


class TestBookUpdateSchema:
    def test_changes_excludes_isbn_and_unset(self):
        update = BookUpdate(isbn="1234567890", title="New")

        assert update.changes() == {"title": "New"}

    def test_null_only_update_rejected(self):
        with pytest.raises(ValueError):
            BookUpdate(title=None)
