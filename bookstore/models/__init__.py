"""
SQLAlchemy Models Package

This package contains the database models for the Bookstore API.

Import all models here to:
1. Make them available as: from bookstore.models import Book
2. Ensure Alembic discovers them for migrations
"""

from bookstore.models.book import Book

__all__ = [
    "Book",
]
