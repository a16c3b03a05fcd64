"""In-memory implementation of RatingRepository for testing.
Follows Liskov Substitution Principle - can replace any RatingRepository."""
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from barber_ratings.domain.entities.rating import Rating, RatingChanges, RatingData, RatingKey
from barber_ratings.domain.repositories.rating_repository import RatingRepository
from barber_ratings.domain.value_objects.rating_query import RatingFilter, SortSpec
from barber_ratings.domain.value_objects.rating_statistics import RatingAggregate


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InMemoryRatingRepository(RatingRepository):
    """In-memory implementation for testing.

    Upserts never await between the lookup and the write, so on a single
    event loop they are atomic and can never report a constraint violation.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._ratings: Dict[RatingKey, Rating] = {}
        self._next_id = 1
        self._clock = clock

    def _matching(self, rating_filter: RatingFilter) -> List[Rating]:
        return [r for r in self._ratings.values() if rating_filter.matches(r)]

    async def upsert_by_key(self, key: RatingKey, data: RatingData) -> Rating:
        """Insert or replace the rating stored under ``key``."""
        now = self._clock()
        existing = self._ratings.get(key)
        if existing is None:
            rating = Rating(
                id=self._next_id,
                rater_id=key.rater_id,
                subject_id=key.subject_id,
                score=data.score,
                review_text=data.review_text,
                service_details=data.service_details,
                created_at=now,
                updated_at=now,
            )
            if not rating.is_valid():
                raise ValueError("Invalid rating")
            self._next_id += 1
            self._ratings[key] = rating
            return rating.copy()

        existing.score = data.score
        existing.review_text = data.review_text
        existing.service_details = data.service_details
        existing.updated_at = now
        return existing.copy()

    async def get_by_key(self, key: RatingKey) -> Optional[Rating]:
        """Get rating by compound key."""
        rating = self._ratings.get(key)
        return rating.copy() if rating else None

    async def find(
        self,
        rating_filter: RatingFilter,
        sort: SortSpec,
        skip: int = 0,
        limit: int = 10,
    ) -> List[Rating]:
        """List matching ratings, ordered by the sort field then by id."""
        ordered = sorted(
            self._matching(rating_filter),
            key=lambda r: (getattr(r, sort.field), r.id),
            reverse=sort.descending,
        )
        return [r.copy() for r in ordered[skip:skip + limit]]

    async def count(self, rating_filter: RatingFilter) -> int:
        """Count matching ratings."""
        return len(self._matching(rating_filter))

    async def aggregate(self, rating_filter: RatingFilter) -> RatingAggregate:
        """Average, count and scores of matching ratings."""
        scores = [r.score for r in self._matching(rating_filter)]
        return RatingAggregate(
            average=sum(scores) / len(scores) if scores else None,
            count=len(scores),
            scores=scores,
        )

    async def update_by_key(self, key: RatingKey, changes: RatingChanges) -> Optional[Rating]:
        """Apply supplied fields and refresh ``updated_at``."""
        rating = self._ratings.get(key)
        if rating is None:
            return None
        changes.apply_to(rating)
        rating.updated_at = self._clock()
        return rating.copy()

    async def delete_by_key(self, key: RatingKey) -> Optional[Rating]:
        """Remove and return the rating stored under ``key``."""
        rating = self._ratings.pop(key, None)
        return rating.copy() if rating else None
