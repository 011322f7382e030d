"""
pytest Fixtures for Bookstore API Tests

This file contains shared fixtures used across all test files.

FIXTURE LAYOUT:
- settings: test configuration (in-memory SQLite, tables auto-created)
- app / client: a fresh application per test, started through its
  lifespan so the Database is opened and closed like in production
- db_session: a session on the same database, for arranging data and
  checking what was persisted
- sample_book: one stored book, inserted before each test

Every test gets its own in-memory database, so nothing leaks between tests.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app.
# ENVIRONMENT=test makes the app use TEST_DATABASE_URL.
import os

os.environ["ENVIRONMENT"] = "test"
os.environ["TEST_DATABASE_URL"] = "sqlite://"
os.environ["AUTO_CREATE_TABLES"] = "true"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from bookstore.config import Settings
from bookstore.main import create_app
from bookstore.models import Book

SAMPLE_ISBN = "1234567890"


@pytest.fixture
def settings() -> Settings:
    """Settings read from the test environment set above."""
    return Settings(_env_file=None)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client for a fresh app.

    Using TestClient as a context manager runs the lifespan: the
    Database is created (with tables) on enter and disposed on exit.
    """
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(app: FastAPI, client: TestClient) -> Generator[Session, None, None]:
    """
    A session on the app's database.

    Depends on client so the lifespan has already opened the database.
    """
    session = app.state.database.session()
    yield session
    session.close()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def book_data() -> dict:
    """A complete, valid create payload."""
    return {
        "isbn": "6798547893",
        "amazon_url": "http://sfgaeof.gov",
        "author": "Mr. Expert",
        "language": "janglish",
        "pages": 5000,
        "publisher": "The Universe",
        "title": "Some cool stuff",
        "year": 2021,
    }


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Insert a book directly into the database."""
    book = Book(
        isbn=SAMPLE_ISBN,
        amazon_url="http://amazon.com/yoink",
        author="Me",
        language="English",
        pages=30,
        publisher="Thru the Roof Comix",
        title="The Very Stupid Snowboarder",
        year=2004,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book
