"""Database initialization - runs on backend startup."""
import logging

from sqlalchemy.exc import SQLAlchemyError

from barber_ratings.infrastructure.persistence import models  # noqa: F401
from barber_ratings.infrastructure.persistence.db import Base, engine

logger = logging.getLogger(__name__)


def initialize_database(bind=None) -> bool:
    """Create any missing tables.

    Existing tables are left untouched; schema changes to existing tables
    are out of scope here.
    """
    bind = bind or engine
    try:
        Base.metadata.create_all(bind=bind)
    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        return False

    logger.info("Database schema initialized successfully")
    return True
