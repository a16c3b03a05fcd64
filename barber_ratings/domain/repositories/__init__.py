"""Repository interfaces."""
from barber_ratings.domain.repositories.barber_repository import BarberRepository
from barber_ratings.domain.repositories.rating_repository import RatingRepository
from barber_ratings.domain.repositories.user_repository import UserRepository

__all__ = [
    "BarberRepository",
    "RatingRepository",
    "UserRepository",
]
