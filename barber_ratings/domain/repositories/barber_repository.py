"""Barber repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional

from barber_ratings.domain.entities.barber import Barber


class BarberRepository(ABC):
    """Repository interface for Barber entity."""

    @abstractmethod
    async def get_by_id(self, barber_id: str) -> Optional[Barber]:
        """Get barber by ID."""
        pass

    @abstractmethod
    async def create(self, barber: Barber) -> Barber:
        """Create new barber."""
        pass
