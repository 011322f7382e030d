"""
Bookstore API Application Package

A small REST API for managing books, keyed by ISBN.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Database storage client and per-request sessions
- exceptions.py: Domain errors raised by the service layer
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection aliases
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Database queries behind the routers
"""

__version__ = "0.1.0"
