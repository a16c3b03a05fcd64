"""Data Transfer Objects returned by the rating service."""
from dataclasses import dataclass, field
from typing import List, Optional

from barber_ratings.domain.entities.rating import Rating
from barber_ratings.domain.value_objects.pagination import Pagination
from barber_ratings.domain.value_objects.rating_statistics import RatingStatistics


@dataclass
class RatingPageDTO:
    """One page of ratings plus its pagination block.

    ``statistics`` is only filled for per-barber listings.
    """
    pagination: Pagination
    ratings: List[Rating] = field(default_factory=list)
    statistics: Optional[RatingStatistics] = None
