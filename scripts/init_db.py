"""
Database initialization script.

Creates every table without Alembic (local development and demos).

Usage:
    python scripts/init_db.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.init_db import init_db

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    logger.info("{} database initialization ({})", settings.PROJECT_NAME, settings.DATABASE_DBNAME)

    try:
        init_db()
    except SQLAlchemyError as e:
        logger.error("Database initialization failed: {}", e)
        sys.exit(1)

    logger.success("Database initialized")
