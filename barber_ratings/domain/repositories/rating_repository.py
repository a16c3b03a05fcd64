"""Rating repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import List, Optional

from barber_ratings.domain.entities.rating import Rating, RatingChanges, RatingData, RatingKey
from barber_ratings.domain.value_objects.rating_query import RatingFilter, SortSpec
from barber_ratings.domain.value_objects.rating_statistics import RatingAggregate


class RatingRepository(ABC):
    """Repository interface for Rating entity.

    Implementations enforce one rating per ``RatingKey`` and raise
    ``ConstraintViolation`` when a write loses a race on that key.
    """

    @abstractmethod
    async def upsert_by_key(self, key: RatingKey, data: RatingData) -> Rating:
        """Atomically insert the rating or replace the one stored under ``key``."""
        pass

    @abstractmethod
    async def get_by_key(self, key: RatingKey) -> Optional[Rating]:
        """Get rating by compound key."""
        pass

    @abstractmethod
    async def find(
        self,
        rating_filter: RatingFilter,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 10,
    ) -> List[Rating]:
        """List matching ratings, ordered and windowed."""
        pass

    @abstractmethod
    async def count(self, rating_filter: RatingFilter) -> int:
        """Count matching ratings."""
        pass

    @abstractmethod
    async def aggregate(self, rating_filter: RatingFilter) -> RatingAggregate:
        """Average, count and score list over matching ratings."""
        pass

    @abstractmethod
    async def update_by_key(self, key: RatingKey, changes: RatingChanges) -> Optional[Rating]:
        """Apply ``changes`` to an existing rating; None if there is none."""
        pass

    @abstractmethod
    async def delete_by_key(self, key: RatingKey) -> Optional[Rating]:
        """Remove and return the rating stored under ``key``."""
        pass
