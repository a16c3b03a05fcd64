"""Query value objects: filter, sort and the normalized list request."""
from dataclasses import dataclass
from typing import Any, Optional

from barber_ratings.constants import (
    SORT_FIELD_ALIASES,
    SORT_FIELDS,
    SORT_ORDER_ASC,
    SORT_ORDER_DESC,
    SORT_ORDERS,
)
from barber_ratings.domain.entities.rating import Rating
from barber_ratings.domain.value_objects.pagination import Pagination
from barber_ratings.utils.parsing import parse_int


def resolve_sort_field(sort_field: Any) -> Any:
    """Map a camelCase sort field onto its column name; other values pass through."""
    if isinstance(sort_field, str):
        return SORT_FIELD_ALIASES.get(sort_field, sort_field)
    return sort_field


@dataclass(frozen=True)
class RatingFilter:
    """Conjunction of equality and score-range conditions."""
    subject_id: Optional[str] = None
    rater_id: Optional[str] = None
    min_score: Optional[int] = None
    max_score: Optional[int] = None

    def matches(self, rating: Rating) -> bool:
        """Evaluate the filter against a single rating."""
        if self.subject_id is not None and rating.subject_id != self.subject_id:
            return False
        if self.rater_id is not None and rating.rater_id != self.rater_id:
            return False
        if self.min_score is not None and rating.score < self.min_score:
            return False
        if self.max_score is not None and rating.score > self.max_score:
            return False
        return True


@dataclass(frozen=True)
class SortSpec:
    """Single-field ordering."""
    field: str
    order: str = SORT_ORDER_DESC

    def __post_init__(self):
        """Validate sort spec."""
        if self.field not in SORT_FIELDS:
            raise ValueError(f"Unsupported sort field: {self.field}")
        if self.order not in SORT_ORDERS:
            raise ValueError(f"Unsupported sort order: {self.order}")

    @property
    def descending(self) -> bool:
        return self.order == SORT_ORDER_DESC


@dataclass(frozen=True)
class RatingListQuery:
    """A validated list request with defaults filled in."""
    page: int
    limit: int
    sort: SortSpec
    min_score: Optional[int] = None
    max_score: Optional[int] = None

    @property
    def skip(self) -> int:
        return Pagination.offset(self.page, self.limit)

    @classmethod
    def from_params(
        cls,
        page: Any = None,
        limit: Any = None,
        min_score: Any = None,
        max_score: Any = None,
        sort_field: Optional[str] = None,
        sort_order: Optional[str] = None,
        *,
        default_page: int = 1,
        default_limit: int = 10,
        default_sort_field: str = "created_at",
        default_sort_order: str = SORT_ORDER_DESC,
    ) -> "RatingListQuery":
        """Build a query from raw parameters that already passed validation."""
        order = (sort_order if sort_order is not None else default_sort_order).lower()
        return cls(
            page=parse_int(page) if page is not None else default_page,
            limit=parse_int(limit) if limit is not None else default_limit,
            sort=SortSpec(
                field=resolve_sort_field(
                    sort_field if sort_field is not None else default_sort_field
                ),
                order=SORT_ORDER_ASC if order == SORT_ORDER_ASC else SORT_ORDER_DESC,
            ),
            min_score=parse_int(min_score) if min_score is not None else None,
            max_score=parse_int(max_score) if max_score is not None else None,
        )

    def to_filter(self, subject_id: Optional[str] = None, rater_id: Optional[str] = None) -> RatingFilter:
        """Filter for this query scoped to a barber or a rater."""
        return RatingFilter(
            subject_id=subject_id,
            rater_id=rater_id,
            min_score=self.min_score,
            max_score=self.max_score,
        )
