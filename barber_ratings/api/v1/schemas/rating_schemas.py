"""Pydantic schemas for the ratings API.

Request bodies accept loosely typed values on purpose: the validation engine
reports every problem at once, which pydantic's per-field coercion would
pre-empt with a 422.
"""
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from barber_ratings.application.dto.rating_dto import RatingPageDTO
from barber_ratings.domain.entities.rating import Rating
from barber_ratings.domain.value_objects.pagination import Pagination
from barber_ratings.domain.value_objects.rating_statistics import RatingStatistics


# Request Schemas
class RatingCreateRequest(BaseModel):
    """Body of a new rating submission."""
    barber_id: Any = None
    score: Any = None
    review_text: Any = None
    service_details: Any = None


class RatingUpdateRequest(BaseModel):
    """Body of a partial rating update."""
    score: Any = None
    review_text: Any = None
    service_details: Any = None


# Response Schemas
class ServiceDetailsSchema(BaseModel):
    """Service details schema."""
    service_name: Optional[str] = None
    service_date: Optional[date] = None
    service_price: Optional[float] = None


class RatingSchema(BaseModel):
    """Rating schema."""
    id: Optional[int] = None
    user_id: str
    barber_id: str
    score: int
    review_text: Optional[str] = None
    service_details: Optional[ServiceDetailsSchema] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, rating: Rating) -> "RatingSchema":
        details = rating.service_details
        return cls(
            id=rating.id,
            user_id=rating.rater_id,
            barber_id=rating.subject_id,
            score=rating.score,
            review_text=rating.review_text,
            service_details=ServiceDetailsSchema(
                service_name=details.service_name,
                service_date=details.service_date,
                service_price=details.service_price,
            ) if details else None,
            created_at=rating.created_at,
            updated_at=rating.updated_at,
        )


class PaginationSchema(BaseModel):
    """Pagination schema."""
    current_page: int
    total_pages: int
    total_ratings: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_value(cls, pagination: Pagination) -> "PaginationSchema":
        return cls(**pagination.to_dict())


class StatisticsSchema(BaseModel):
    """Rating statistics schema."""
    average_rating: float
    total_ratings: int
    rating_distribution: Dict[int, int]

    @classmethod
    def from_value(cls, statistics: RatingStatistics) -> "StatisticsSchema":
        return cls(**statistics.to_dict())


class RatingData(BaseModel):
    rating: RatingSchema


class DeletedRatingData(BaseModel):
    deleted_rating: RatingSchema


class RatingListData(BaseModel):
    ratings: List[RatingSchema]
    pagination: PaginationSchema
    statistics: Optional[StatisticsSchema] = None

    @classmethod
    def from_dto(cls, page: RatingPageDTO) -> "RatingListData":
        return cls(
            ratings=[RatingSchema.from_entity(r) for r in page.ratings],
            pagination=PaginationSchema.from_value(page.pagination),
            statistics=StatisticsSchema.from_value(page.statistics) if page.statistics else None,
        )


class StatisticsData(BaseModel):
    statistics: StatisticsSchema


class RatingResponse(BaseModel):
    """Envelope for a single rating."""
    success: bool = True
    message: str
    data: RatingData


class DeletedRatingResponse(BaseModel):
    """Envelope for a deleted rating."""
    success: bool = True
    message: str
    data: DeletedRatingData


class RatingListResponse(BaseModel):
    """Envelope for a page of ratings."""
    success: bool = True
    message: str
    data: RatingListData


class StatisticsResponse(BaseModel):
    """Envelope for barber statistics."""
    success: bool = True
    message: str
    data: StatisticsData


class ErrorResponse(BaseModel):
    """Envelope for failures."""
    success: bool = False
    message: str
    errors: Optional[List[str]] = None
