"""In-memory implementation of BarberRepository for testing.
Follows Liskov Substitution Principle - can replace any BarberRepository."""
from typing import Dict, Iterable, Optional

from barber_ratings.domain.entities.barber import Barber
from barber_ratings.domain.repositories.barber_repository import BarberRepository


class InMemoryBarberRepository(BarberRepository):
    """In-memory implementation for testing."""

    def __init__(self, barbers: Iterable[Barber] = ()):
        self._barbers: Dict[str, Barber] = {b.id: b for b in barbers}

    async def get_by_id(self, barber_id: str) -> Optional[Barber]:
        """Get barber by ID."""
        return self._barbers.get(barber_id)

    async def create(self, barber: Barber) -> Barber:
        """Create new barber."""
        if not barber.id or not barber.id.strip():
            raise ValueError("Invalid barber")
        if barber.id in self._barbers:
            raise ValueError(f"Barber with id '{barber.id}' already exists")
        self._barbers[barber.id] = barber
        return barber
