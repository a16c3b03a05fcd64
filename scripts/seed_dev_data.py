#!/usr/bin/env python3
"""Create tables and insert the development barbers and users into the database."""
import asyncio
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from barber_ratings.core.database_init import initialize_database
from barber_ratings.core.dev_data import dev_barbers, dev_users
from barber_ratings.infrastructure.persistence.db import SessionLocal
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_barber_repository import (
    SQLAlchemyBarberRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


async def seed(session) -> None:
    barbers = SQLAlchemyBarberRepository(session)
    users = SQLAlchemyUserRepository(session)

    for barber in dev_barbers():
        if await barbers.get_by_id(barber.id):
            logger.info(f"Barber {barber.id} already exists, skipping")
            continue
        await barbers.create(barber)
        logger.info(f"✓ Created barber {barber.id}")

    for user in dev_users():
        if await users.get_by_id(user.id):
            logger.info(f"User {user.id} already exists, skipping")
            continue
        await users.create(user)
        logger.info(f"✓ Created user {user.id}")


def main() -> int:
    if not initialize_database():
        return 1

    session = SessionLocal()
    try:
        asyncio.run(seed(session))
    finally:
        session.close()

    logger.info("Development data ready")
    return 0


if __name__ == "__main__":
    sys.exit(main())
