"""
Alembic Environment Configuration

Runs the migrations in alembic/versions against the Bookstore database.

The database URL comes from the application settings, not alembic.ini,
so migrations and the running app always agree on where the books table
lives (ENVIRONMENT=test migrates the test database).

COMMANDS:
- alembic upgrade head                           # Create/upgrade the books table
- alembic downgrade -1                           # Rollback one migration
- alembic revision --autogenerate -m "message"   # Create migration from models
"""

from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool

from alembic import context

from bookstore.config import get_settings
from bookstore.database import Base
from bookstore.models import Book  # noqa: F401 - registers the books table

config = context.config

# ConfigParser treats % as interpolation, which breaks URL-encoded passwords
database_url = get_settings().effective_database_url
config.set_main_option("sqlalchemy.url", database_url.replace("%", "%%"))

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """
    Emit the migration SQL without connecting.

    Usage:
        alembic upgrade head --sql > migration.sql
    """
    context.configure(
        url=database_url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect to the database and apply the migrations."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,  # Don't pool connections for migrations
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
