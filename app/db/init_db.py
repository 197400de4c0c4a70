"""
Database initialization.

Creates all tables.  Production databases are managed with alembic;
this is for local SQLite runs and first-time setup.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

LOGGER = logging.getLogger(__name__)


def init_db() -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables (users, password_reset_codes)
    """

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    LOGGER.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    LOGGER.info("Tables created successfully")


if __name__ == "__main__":
    from app.core.logging import setup_logging

    setup_logging()
    init_db()
