"""
Database initialization.

Creates all tables directly from the SQLModel metadata.  Production
deployments use the Alembic migrations instead.
"""

from loguru import logger
from sqlmodel import SQLModel

from app.db.session import engine


def init_db() -> None:
    """Create every table known to ``app.db.base``."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: {}", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    init_db()
