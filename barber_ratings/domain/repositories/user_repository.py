"""User repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional

from barber_ratings.domain.entities.user import User


class UserRepository(ABC):
    """Repository interface for User entity."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create new user."""
        pass
