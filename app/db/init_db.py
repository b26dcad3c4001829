"""
Database initialization.

Creates all tables for local development.  Production schemas are
managed by Alembic.
"""

from loguru import logger
from sqlmodel import SQLModel

from app.db.session import engine


def init_db() -> None:
    """Create all SQLModel tables that do not exist yet."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
