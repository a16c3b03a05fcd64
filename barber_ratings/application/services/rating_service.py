"""Rating query/mutation service.

Orchestrates validation, existence checks against the barber and user
repositories, and the rating store. Validation and not-found checks always
complete before any write is attempted.
"""
import logging
from typing import Any, Optional

from barber_ratings.application.dto.rating_dto import RatingPageDTO
from barber_ratings.application.validation.rating_validation import (
    DEFAULT_RULES,
    ValidationResult,
    ValidationRules,
    validate_create,
    validate_list_query,
    validate_update,
)
from barber_ratings.constants import ENTITY_BARBER, ENTITY_RATING, ENTITY_USER
from barber_ratings.domain.entities.rating import (
    Rating,
    RatingChanges,
    RatingData,
    RatingKey,
    ServiceDetails,
)
from barber_ratings.domain.exceptions import (
    ConstraintViolation,
    RatingConflictError,
    RatingNotFoundError,
    RatingValidationError,
)
from barber_ratings.domain.repositories.barber_repository import BarberRepository
from barber_ratings.domain.repositories.rating_repository import RatingRepository
from barber_ratings.domain.repositories.user_repository import UserRepository
from barber_ratings.domain.value_objects.pagination import Pagination
from barber_ratings.domain.value_objects.rating_query import RatingFilter, RatingListQuery
from barber_ratings.domain.value_objects.rating_statistics import RatingStatistics
from barber_ratings.utils.parsing import parse_date

logger = logging.getLogger(__name__)


def normalize_review_text(review_text: Optional[str]) -> Optional[str]:
    """Trim review text; blank text becomes None."""
    if review_text is None:
        return None
    return review_text.strip() or None


def normalize_service_details(service_details: Any) -> Optional[ServiceDetails]:
    """Turn a validated mapping into ``ServiceDetails``; empty details become None."""
    if service_details is None:
        return None
    if isinstance(service_details, ServiceDetails):
        details = service_details
    else:
        price = service_details.get("service_price")
        service_date = service_details.get("service_date")
        details = ServiceDetails(
            service_name=service_details.get("service_name"),
            service_date=parse_date(service_date) if service_date is not None else None,
            service_price=float(price) if price is not None else None,
        )
    return None if details.is_empty() else details


class RatingService:
    """Create, read, update and delete ratings for barbers.

    The service is stateless: every call goes straight to the repositories,
    and uniqueness of (rater, barber) is left to the rating store.
    """

    def __init__(
        self,
        rating_repository: RatingRepository,
        barber_repository: BarberRepository,
        user_repository: UserRepository,
        rules: ValidationRules = DEFAULT_RULES,
        default_page: int = 1,
        default_limit: int = 10,
        default_sort_field: str = "created_at",
        default_sort_order: str = "desc",
    ):
        self._ratings = rating_repository
        self._barbers = barber_repository
        self._users = user_repository
        self._rules = rules
        self._defaults = {
            "default_page": default_page,
            "default_limit": default_limit,
            "default_sort_field": default_sort_field,
            "default_sort_order": default_sort_order,
        }

    @staticmethod
    def _raise_if_invalid(result: ValidationResult, message: str = "Validation failed") -> None:
        if not result.valid:
            raise RatingValidationError(result.errors, message=message)

    async def _require_barber(self, barber_id: str) -> None:
        if await self._barbers.get_by_id(barber_id) is None:
            raise RatingNotFoundError(ENTITY_BARBER)

    def _list_query(
        self,
        page: Any,
        limit: Any,
        min_score: Any,
        max_score: Any,
        sort_field: Any,
        sort_order: Any,
    ) -> RatingListQuery:
        self._raise_if_invalid(
            validate_list_query(
                page, limit, min_score, max_score, sort_field, sort_order, rules=self._rules
            ),
            message="Invalid query parameters",
        )
        return RatingListQuery.from_params(
            page, limit, min_score, max_score, sort_field, sort_order, **self._defaults
        )

    async def _page(self, query: RatingListQuery, rating_filter: RatingFilter) -> RatingPageDTO:
        total = await self._ratings.count(rating_filter)
        ratings = []
        # Pages past the end return no ratings without querying the store
        if query.skip < total:
            ratings = await self._ratings.find(
                rating_filter, query.sort, skip=query.skip, limit=query.limit
            )
        return RatingPageDTO(
            ratings=ratings,
            pagination=Pagination.build(query.page, query.limit, total),
        )

    async def submit_rating(
        self,
        rater_id: Any,
        subject_id: Any,
        score: Any,
        review_text: Any = None,
        service_details: Any = None,
    ) -> Rating:
        """Create the rater's rating for a barber, or replace the existing one.

        Raises:
            RatingValidationError: payload is malformed
            RatingNotFoundError: barber or user does not exist
            RatingConflictError: a concurrent submission won the unique key
        """
        self._raise_if_invalid(
            validate_create(
                rater_id, subject_id, score, review_text, service_details, rules=self._rules
            )
        )

        await self._require_barber(subject_id)
        if await self._users.get_by_id(rater_id) is None:
            raise RatingNotFoundError(ENTITY_USER)

        key = RatingKey(rater_id=rater_id, subject_id=subject_id)
        data = RatingData(
            score=int(score),
            review_text=normalize_review_text(review_text),
            service_details=normalize_service_details(service_details),
        )
        try:
            rating = await self._ratings.upsert_by_key(key, data)
        except ConstraintViolation as e:
            logger.warning(f"Rating upsert conflict for {key}: {e}")
            raise RatingConflictError() from e

        logger.info(f"Stored rating {rating.score} from {rater_id} for barber {subject_id}")
        return rating

    async def list_by_subject(
        self,
        subject_id: str,
        page: Any = None,
        limit: Any = None,
        min_score: Any = None,
        max_score: Any = None,
        sort_field: Any = None,
        sort_order: Any = None,
    ) -> RatingPageDTO:
        """Page through a barber's ratings with statistics over the same filter."""
        query = self._list_query(page, limit, min_score, max_score, sort_field, sort_order)
        await self._require_barber(subject_id)

        rating_filter = query.to_filter(subject_id=subject_id)
        result = await self._page(query, rating_filter)
        aggregate = await self._ratings.aggregate(rating_filter)
        result.statistics = RatingStatistics.from_aggregate(aggregate)
        return result

    async def get_statistics(self, subject_id: str) -> RatingStatistics:
        """Statistics over all of a barber's ratings."""
        await self._require_barber(subject_id)
        aggregate = await self._ratings.aggregate(RatingFilter(subject_id=subject_id))
        return RatingStatistics.from_aggregate(aggregate)

    async def get_single_rating(self, subject_id: str, rater_id: str) -> Rating:
        """Look up one rating by its (rater, barber) key."""
        rating = await self._ratings.get_by_key(
            RatingKey(rater_id=rater_id, subject_id=subject_id)
        )
        if rating is None:
            raise RatingNotFoundError(ENTITY_RATING)
        return rating

    async def list_by_rater(
        self,
        rater_id: str,
        page: Any = None,
        limit: Any = None,
        sort_field: Any = None,
        sort_order: Any = None,
    ) -> RatingPageDTO:
        """Page through the ratings a user has given.

        The rater is not looked up: a user without ratings gets an empty page.
        """
        query = self._list_query(page, limit, None, None, sort_field, sort_order)
        return await self._page(query, RatingFilter(rater_id=rater_id))

    async def update_rating(
        self,
        rater_id: str,
        subject_id: str,
        score: Any = None,
        review_text: Any = None,
        service_details: Any = None,
    ) -> Rating:
        """Apply the supplied fields to an existing rating; never creates one."""
        self._raise_if_invalid(
            validate_update(score, review_text, service_details, rules=self._rules)
        )

        key = RatingKey(rater_id=rater_id, subject_id=subject_id)
        if await self._ratings.get_by_key(key) is None:
            raise RatingNotFoundError(ENTITY_RATING)

        fields = set()
        changes = RatingChanges()
        if score is not None:
            changes.score = int(score)
            fields.add("score")
        if review_text is not None:
            changes.review_text = normalize_review_text(review_text)
            fields.add("review_text")
        if service_details is not None:
            changes.service_details = normalize_service_details(service_details)
            fields.add("service_details")
        changes.fields = frozenset(fields)

        rating = await self._ratings.update_by_key(key, changes)
        if rating is None:
            raise RatingNotFoundError(ENTITY_RATING)

        logger.info(f"Updated {sorted(fields)} on rating from {rater_id} for barber {subject_id}")
        return rating

    async def delete_rating(self, rater_id: str, subject_id: str) -> Rating:
        """Remove the rater's rating for a barber and return it."""
        rating = await self._ratings.delete_by_key(
            RatingKey(rater_id=rater_id, subject_id=subject_id)
        )
        if rating is None:
            raise RatingNotFoundError(ENTITY_RATING)

        logger.info(f"Deleted rating from {rater_id} for barber {subject_id}")
        return rating
