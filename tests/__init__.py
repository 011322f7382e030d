"""
Test Suite for the Bookstore API

Test Organization:
- conftest.py: Shared fixtures (test app, client, database session, sample book)
- test_books.py: Tests for the /books endpoints
- test_services.py: Tests for the service layer and update schema
- test_main.py: Tests for lifespan, health and exception handlers
- test_config.py: Tests for settings

Running Tests:
    pip install -e ".[test]"
    pytest
    pytest tests/test_books.py -v
"""
