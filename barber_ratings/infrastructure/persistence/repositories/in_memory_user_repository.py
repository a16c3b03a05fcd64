"""In-memory implementation of UserRepository for testing.
Follows Liskov Substitution Principle - can replace any UserRepository."""
from typing import Dict, Iterable, Optional

from barber_ratings.domain.entities.user import User
from barber_ratings.domain.repositories.user_repository import UserRepository


class InMemoryUserRepository(UserRepository):
    """In-memory implementation for testing."""

    def __init__(self, users: Iterable[User] = ()):
        self._users: Dict[str, User] = {u.id: u for u in users}

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        return self._users.get(user_id)

    async def create(self, user: User) -> User:
        """Create new user."""
        if not user.id or not user.id.strip():
            raise ValueError("Invalid user")
        if user.id in self._users:
            raise ValueError(f"User with id '{user.id}' already exists")
        self._users[user.id] = user
        return user
