"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Instead of writing:
    def get_book(isbn: str = Path(...), db: Session = Depends(get_db)):

routes can write:
    def get_book(isbn: Isbn, db: DbSession):
"""

from typing import Annotated

from fastapi import Depends, Path
from sqlalchemy.orm import Session

from bookstore.database import get_db
from bookstore.schemas.book import ISBN_MAX_LENGTH

# One session per request, closed automatically when the response is sent
DbSession = Annotated[Session, Depends(get_db)]

# A path key longer than the column can hold is malformed (400), which is
# different from a well-formed key that matches no row (404).
Isbn = Annotated[
    str,
    Path(
        min_length=1,
        max_length=ISBN_MAX_LENGTH,
        description="ISBN of the book",
        examples=["0691161518"],
    ),
]
