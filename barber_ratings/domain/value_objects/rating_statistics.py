"""Rating statistics value objects - aggregate results over a filter."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from barber_ratings.constants import SCORE_BUCKETS


@dataclass(frozen=True)
class RatingAggregate:
    """Raw aggregate returned by a rating store.

    ``scores`` lists every matching score so the histogram can be built
    without a second round-trip.
    """
    average: Optional[float]
    count: int
    scores: List[int] = field(default_factory=list)


@dataclass(frozen=True)
class RatingStatistics:
    """Immutable average/count/histogram for a set of ratings."""
    average_rating: float
    total_ratings: int
    rating_distribution: Dict[int, int]

    def __post_init__(self):
        """Validate statistics."""
        if self.total_ratings < 0:
            raise ValueError(f"Total ratings cannot be negative, got {self.total_ratings}")
        if set(self.rating_distribution) != set(SCORE_BUCKETS):
            raise ValueError("Rating distribution must have one bucket per score")

    @classmethod
    def from_scores(cls, scores: Iterable[int]) -> "RatingStatistics":
        """Compute statistics from the individual scores."""
        distribution = {bucket: 0 for bucket in SCORE_BUCKETS}
        total = 0
        for score in scores:
            distribution[int(score)] += 1
            total += int(score)
        count = sum(distribution.values())
        return cls(
            average_rating=total / count if count else 0.0,
            total_ratings=count,
            rating_distribution=distribution,
        )

    @classmethod
    def from_aggregate(cls, aggregate: RatingAggregate) -> "RatingStatistics":
        """Build statistics from a store aggregate.

        The store's own average is kept when it reports one; the histogram
        always comes from the score list.
        """
        stats = cls.from_scores(aggregate.scores)
        if aggregate.count and aggregate.average is not None:
            return cls(
                average_rating=float(aggregate.average),
                total_ratings=stats.total_ratings,
                rating_distribution=stats.rating_distribution,
            )
        return stats

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "average_rating": self.average_rating,
            "total_ratings": self.total_ratings,
            "rating_distribution": dict(self.rating_distribution),
        }
