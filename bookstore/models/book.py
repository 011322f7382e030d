"""
Book Model

The only model of the Bookstore API, mapping the books table.

WHY isbn as the Primary Key?
============================
An ISBN already identifies a book uniquely, so there is no surrogate id:
- The primary key constraint enforces uniqueness in the database
- Clients address books by the same key they already know (/books/{isbn})
- The key is never updated once the row exists
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from bookstore.database import Base


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - isbn: International Standard Book Number (primary key)
    - amazon_url: Link to the book's Amazon page
    - author: Author name
    - language: Language the book is written in
    - pages: Number of pages (positive)
    - publisher: Publisher name
    - title: Book title
    - year: Year of publication

    Example:
        book = Book(
            isbn="0691161518",
            amazon_url="http://a.co/eobPtX2",
            author="Matthew Lane",
            language="english",
            pages=264,
            publisher="Princeton University Press",
            title="Power-Up: Unlocking the Hidden Mathematics in Video Games",
            year=2017,
        )
    """

    __tablename__ = "books"

    # -------------------------------------------------------------------------
    # Primary Key
    # -------------------------------------------------------------------------
    isbn: Mapped[str] = mapped_column(
        String(20),
        primary_key=True,
        comment="International Standard Book Number"
    )

    # -------------------------------------------------------------------------
    # Basic Fields
    # -------------------------------------------------------------------------
    amazon_url: Mapped[str] = mapped_column(
        String(2048),
        nullable=False,
        comment="Amazon product page URL"
    )

    author: Mapped[str] = mapped_column(String(500), nullable=False)

    language: Mapped[str] = mapped_column(String(100), nullable=False)

    pages: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of pages in the book"
    )

    publisher: Mapped[str] = mapped_column(String(500), nullable=False)

    # Indexed because listings are ordered by title
    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Year of publication"
    )

    def __repr__(self) -> str:
        return f"Book(isbn='{self.isbn}', title='{self.title}')"
