"""Dependency injection for FastAPI routes.
Follows Dependency Inversion Principle - routes depend on abstractions."""
from functools import lru_cache
from typing import Iterator

from barber_ratings.application.services.rating_service import RatingService
from barber_ratings.application.validation.rating_validation import ValidationRules
from barber_ratings.config import settings
from barber_ratings.core.dev_data import dev_barbers, dev_users
from barber_ratings.domain.repositories.barber_repository import BarberRepository
from barber_ratings.domain.repositories.rating_repository import RatingRepository
from barber_ratings.domain.repositories.user_repository import UserRepository
from barber_ratings.infrastructure.persistence.db import SessionLocal
from barber_ratings.infrastructure.persistence.repositories.in_memory_barber_repository import (
    InMemoryBarberRepository,
)
from barber_ratings.infrastructure.persistence.repositories.in_memory_rating_repository import (
    InMemoryRatingRepository,
)
from barber_ratings.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_barber_repository import (
    SQLAlchemyBarberRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_rating_repository import (
    SQLAlchemyRatingRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)


def build_rating_service(
    rating_repository: RatingRepository,
    barber_repository: BarberRepository,
    user_repository: UserRepository,
) -> RatingService:
    """Wire a rating service with the configured list defaults."""
    return RatingService(
        rating_repository=rating_repository,
        barber_repository=barber_repository,
        user_repository=user_repository,
        rules=ValidationRules(
            review_text_max_length=settings.REVIEW_TEXT_MAX_LENGTH,
            max_page_size=settings.MAX_PAGE_SIZE,
        ),
        default_page=settings.DEFAULT_PAGE,
        default_limit=settings.DEFAULT_PAGE_SIZE,
        default_sort_field=settings.DEFAULT_SORT_FIELD,
        default_sort_order=settings.DEFAULT_SORT_ORDER,
    )


@lru_cache()
def get_rating_repository() -> InMemoryRatingRepository:
    """Process-wide in-memory rating store (dev/test)."""
    return InMemoryRatingRepository()


@lru_cache()
def get_barber_repository() -> InMemoryBarberRepository:
    """Process-wide in-memory barber store seeded from DEV_BARBERS."""
    return InMemoryBarberRepository(dev_barbers())


@lru_cache()
def get_user_repository() -> InMemoryUserRepository:
    """Process-wide in-memory user store seeded from DEV_AUTH_TOKENS."""
    return InMemoryUserRepository(dev_users())


def get_rating_service() -> Iterator[RatingService]:
    """Get rating service instance.

    - Default: in-memory repositories shared across requests
    - If USE_DB_REPOS=true: SQLAlchemy repositories on a per-request session
    """
    if not settings.USE_DB_REPOS:
        yield build_rating_service(
            get_rating_repository(),
            get_barber_repository(),
            get_user_repository(),
        )
        return

    session = SessionLocal()
    try:
        yield build_rating_service(
            SQLAlchemyRatingRepository(session),
            SQLAlchemyBarberRepository(session),
            SQLAlchemyUserRepository(session),
        )
    finally:
        session.close()
