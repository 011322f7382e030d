"""
Book Pydantic Schemas

Request and response shapes for the /books endpoints:
- BookCreate: every field required, types checked strictly
- BookUpdate: any subset of the mutable fields
- BookResponse: a stored book
- Envelopes: {"book": ...}, {"books": [...]}, {"message": ...}

WHY strict integers?
====================
pages and year must arrive as JSON integers. Pydantic's default (lax) mode
would silently accept "30" or 30.0; strict=True rejects them so the client
gets a 400 instead of a coerced value.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    field_validator,
    model_validator,
)

ISBN_MAX_LENGTH = 20

# Range of the Integer columns (32-bit on PostgreSQL)
INT_MIN = -2_147_483_648
INT_MAX = 2_147_483_647

_http_url = TypeAdapter(HttpUrl)


def check_amazon_url(v: str) -> str:
    """
    Ensure the value is an absolute http(s) URL.

    The URL is stored exactly as submitted; HttpUrl is only used to
    validate it, since it would normalize the text (e.g. add a trailing
    slash).
    """
    try:
        _http_url.validate_python(v)
    except ValidationError:
        raise ValueError("amazon_url must be a valid http or https URL") from None
    return v


def check_not_blank(v: str) -> str:
    """Strip surrounding whitespace and reject empty strings."""
    if not v.strip():
        raise ValueError("must not be empty or whitespace")
    return v.strip()


class BookBase(BaseModel):
    """
    Base schema with the shared book fields.

    Contains validation for:
    - amazon_url (absolute http/https URL)
    - pages (strict integer, must be positive)
    - pages and year (within the range of the Integer columns)
    - text fields (not blank)
    """

    amazon_url: str = Field(
        ...,
        max_length=2048,
        description="Amazon product page URL",
        examples=["http://a.co/eobPtX2"],
    )

    author: str = Field(
        ...,
        max_length=500,
        description="Author name",
        examples=["Matthew Lane"],
    )

    language: str = Field(
        ...,
        max_length=100,
        description="Language the book is written in",
        examples=["english"],
    )

    pages: int = Field(
        ...,
        strict=True,
        gt=0,
        le=INT_MAX,
        description="Number of pages",
        examples=[264],
    )

    publisher: str = Field(
        ...,
        max_length=500,
        description="Publisher name",
        examples=["Princeton University Press"],
    )

    title: str = Field(
        ...,
        max_length=500,
        description="Book title",
        examples=["Power-Up: Unlocking the Hidden Mathematics in Video Games"],
    )

    year: int = Field(
        ...,
        strict=True,
        ge=INT_MIN,
        le=INT_MAX,
        description="Year of publication",
        examples=[2017],
    )

    @field_validator("amazon_url")
    @classmethod
    def validate_amazon_url(cls, v: str) -> str:
        return check_amazon_url(v)

    @field_validator("author", "language", "publisher", "title")
    @classmethod
    def text_must_not_be_blank(cls, v: str) -> str:
        return check_not_blank(v)


class BookCreate(BookBase):
    """
    Schema for creating a new book.

    Example request body:
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017
    }
    """

    isbn: str = Field(
        ...,
        max_length=ISBN_MAX_LENGTH,
        description="International Standard Book Number (unique)",
        examples=["0691161518"],
    )

    @field_validator("isbn")
    @classmethod
    def isbn_must_not_be_blank(cls, v: str) -> str:
        return check_not_blank(v)


class BookUpdate(BaseModel):
    """
    Schema for updating an existing book.

    All fields are optional; only the ones present in the request body are
    written. isbn is accepted only so clients can send back a full record:
    the router rejects it if it differs from the key in the URL.
    """

    isbn: str | None = Field(
        default=None,
        max_length=ISBN_MAX_LENGTH,
        description="Must match the isbn in the URL if provided",
    )

    amazon_url: str | None = Field(default=None, max_length=2048)
    author: str | None = Field(default=None, max_length=500)
    language: str | None = Field(default=None, max_length=100)
    pages: int | None = Field(default=None, strict=True, gt=0, le=INT_MAX)
    publisher: str | None = Field(default=None, max_length=500)
    title: str | None = Field(default=None, max_length=500)
    year: int | None = Field(default=None, strict=True, ge=INT_MIN, le=INT_MAX)

    @field_validator("amazon_url")
    @classmethod
    def validate_amazon_url(cls, v: str | None) -> str | None:
        """Validate amazon_url if provided."""
        if v is None:
            return v
        return check_amazon_url(v)

    @field_validator("author", "language", "publisher", "title")
    @classmethod
    def text_must_not_be_blank(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return check_not_blank(v)

    @model_validator(mode="after")
    def require_changes(self) -> "BookUpdate":
        """
        Reject an update that carries nothing to change.

        Explicit nulls count as "not provided" for required columns:
        every book column is NOT NULL.
        """
        changes = self.changes()
        if not changes:
            raise ValueError("Update must include at least one field to change")
        return self

    def changes(self) -> dict:
        """
        The mutable fields supplied in the request, without isbn.

        model_dump(exclude_unset=True) returns only fields that were set.
        """
        data = self.model_dump(exclude_unset=True, exclude_none=True)
        data.pop("isbn", None)
        return data


class BookResponse(BaseModel):
    """
    Schema for a stored book.

    Plain types only: rows are read back as they are stored, so a row
    written outside the API (seed data, SQL) is still listed even if it
    would not pass the input rules.
    """

    isbn: str = Field(..., description="International Standard Book Number")
    amazon_url: str
    author: str
    language: str
    pages: int
    publisher: str
    title: str
    year: int

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "isbn": "0691161518",
                "amazon_url": "http://a.co/eobPtX2",
                "author": "Matthew Lane",
                "language": "english",
                "pages": 264,
                "publisher": "Princeton University Press",
                "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
                "year": 2017,
            }
        },
    )


class BookEnvelope(BaseModel):
    """Single book response: {"book": {...}}."""

    book: BookResponse


class BookListResponse(BaseModel):
    """
    Book list response: {"books": [...]}.

    No pagination: the whole table is returned, ordered by title.
    """

    books: list[BookResponse] = Field(
        ...,
        description="All books",
    )


class MessageResponse(BaseModel):
    """Plain confirmation message, e.g. {"message": "Book deleted"}."""

    message: str
