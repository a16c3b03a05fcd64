"""Value objects."""
from barber_ratings.domain.value_objects.pagination import Pagination
from barber_ratings.domain.value_objects.rating_query import RatingFilter, RatingListQuery, SortSpec
from barber_ratings.domain.value_objects.rating_statistics import RatingAggregate, RatingStatistics

__all__ = [
    "Pagination",
    "RatingAggregate",
    "RatingFilter",
    "RatingListQuery",
    "RatingStatistics",
    "SortSpec",
]
