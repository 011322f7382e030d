#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books for development.

USAGE:
    # From the project root, with the package installed (pip install -e .)
    python scripts/seed_data.py

    # Keep existing rows instead of clearing the table first
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings
2. Creates the books table if it doesn't exist
3. Clears existing books (unless --keep)
4. Inserts the sample books
"""

import sys

from sqlalchemy import delete
from sqlalchemy.orm import Session

from bookstore.config import get_settings
from bookstore.database import Database
from bookstore.models import Book

SAMPLE_BOOKS = [
    {
        "isbn": "0691161518",
        "amazon_url": "http://a.co/eobPtX2",
        "author": "Matthew Lane",
        "language": "english",
        "pages": 264,
        "publisher": "Princeton University Press",
        "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
        "year": 2017,
    },
    {
        "isbn": "0451524934",
        "amazon_url": "https://www.amazon.com/dp/0451524934",
        "author": "George Orwell",
        "language": "english",
        "pages": 328,
        "publisher": "Signet Classic",
        "title": "1984",
        "year": 1961,
    },
    {
        "isbn": "9780141439518",
        "amazon_url": "https://www.amazon.com/dp/0141439513",
        "author": "Jane Austen",
        "language": "english",
        "pages": 480,
        "publisher": "Penguin Classics",
        "title": "Pride and Prejudice",
        "year": 2002,
    },
    {
        "isbn": "9788420412146",
        "amazon_url": "https://www.amazon.com/dp/8420412147",
        "author": "Gabriel García Márquez",
        "language": "spanish",
        "pages": 496,
        "publisher": "Real Academia Española",
        "title": "Cien años de soledad",
        "year": 2007,
    },
]


def clear_data(db: Session) -> None:
    """Clear all existing books from the database."""
    print("Clearing existing books...")
    db.execute(delete(Book))
    db.commit()
    print("Data cleared.")


def create_books(db: Session) -> list[Book]:
    """Create sample books."""
    print("Creating books...")
    books = [Book(**data) for data in SAMPLE_BOOKS]
    db.add_all(books)
    db.commit()
    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the database with sample data.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()
    database = Database.from_settings(settings)

    print("=" * 60)
    print(f"Seeding {database!r}...")
    print("=" * 60)

    # Create tables if they don't exist
    database.create_tables()

    db = database.session()
    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nSummary:")
        print(f"  - Books: {len(books)}")
        print(f"\nYou can now access the API at http://localhost:{settings.port}/books")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        database.dispose()


if __name__ == "__main__":
    seed_database(clear_existing="--keep" not in sys.argv[1:])
