"""
Tests for the application factory: lifespan, root/health endpoints and
exception handlers.
"""

from fastapi import status
from fastapi.testclient import TestClient

from bookstore.database import Database
from bookstore.main import create_app


class TestRootAndHealth:
    """Tests for GET / and GET /health."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["books"] == "/books"
        assert "Bookstore API" in data["message"]

    def test_health_check(self, client):
        """Test health reports a reachable database."""
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "healthy"
        assert data["database"] == "ok"
        assert data["environment"] == "test"

    def test_health_check_database_down(self, app, client, monkeypatch):
        monkeypatch.setattr(app.state.database, "ping", lambda: False)

        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unavailable"


class TestLifespan:
    """Tests for database setup and teardown."""

    def test_database_created_on_startup(self, app):
        assert app.state.database is None

        with TestClient(app):
            assert isinstance(app.state.database, Database)

        assert app.state.database is None

    def test_injected_database_is_kept(self, settings):
        database = Database("sqlite://")
        app = create_app(settings, database=database)

        with TestClient(app) as client:
            assert client.get("/books").status_code == status.HTTP_200_OK

        assert app.state.database is database
        database.dispose()


class TestErrorHandling:
    """Tests for the exception handlers registered in create_app."""

    def test_validation_error_format(self, client):
        """Validation errors are 400 with one entry per field."""
        response = client.post("/books", json={"isbn": "123", "pages": "lots"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        data = response.json()
        assert data["detail"] == "Validation failed"
        pages_errors = [e for e in data["errors"] if e["field"] == "pages"]
        assert len(pages_errors) == 1
        assert pages_errors[0]["message"]

    def test_database_error_is_hidden(self, app, client):
        """A storage failure is a generic 500 without driver details."""
        app.state.database.drop_tables()

        response = client.get("/books")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        detail = response.json()["detail"]
        assert detail == "A database error occurred. Please try again later."
        assert "books" not in detail

    def test_unknown_route(self, client):
        response = client.get("/authors")

        assert response.status_code == status.HTTP_404_NOT_FOUND
