"""Rating API routes - thin layer delegating to the rating service.
Follows Single Responsibility Principle - only handles HTTP concerns.

Domain errors raised by the service are turned into responses by the
exception handlers registered in ``barber_ratings.main``.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from barber_ratings.api.dependencies import get_current_principal
from barber_ratings.api.v1.schemas.rating_schemas import (
    DeletedRatingData,
    DeletedRatingResponse,
    ErrorResponse,
    RatingCreateRequest,
    RatingData,
    RatingListData,
    RatingListResponse,
    RatingResponse,
    RatingSchema,
    RatingUpdateRequest,
    StatisticsData,
    StatisticsResponse,
    StatisticsSchema,
)
from barber_ratings.application.ports.identity import Principal
from barber_ratings.application.services.rating_service import RatingService
from barber_ratings.core.dependencies import get_rating_service

router = APIRouter(
    prefix="/ratings",
    tags=["ratings"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post(
    "",
    response_model=RatingResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def create_rating(
    body: RatingCreateRequest,
    principal: Principal = Depends(get_current_principal),
    service: RatingService = Depends(get_rating_service),
):
    """
    Rate a barber as the authenticated user.

    A second submission for the same barber replaces the earlier rating.
    """
    rating = await service.submit_rating(
        rater_id=principal.uid,
        subject_id=body.barber_id,
        score=body.score,
        review_text=body.review_text,
        service_details=body.service_details,
    )
    return RatingResponse(
        message="Rating created successfully",
        data=RatingData(rating=RatingSchema.from_entity(rating)),
    )


@router.get("/my-ratings", response_model=RatingListResponse)
async def get_my_ratings(
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    principal: Principal = Depends(get_current_principal),
    service: RatingService = Depends(get_rating_service),
):
    """List the ratings the authenticated user has given."""
    result = await service.list_by_rater(
        principal.uid,
        page=page,
        limit=limit,
        sort_field=sort_by,
        sort_order=sort_order,
    )
    return RatingListResponse(
        message="User ratings retrieved successfully",
        data=RatingListData.from_dto(result),
    )


@router.put("/barber/{barber_id}", response_model=RatingResponse)
async def update_rating(
    barber_id: str,
    body: RatingUpdateRequest,
    principal: Principal = Depends(get_current_principal),
    service: RatingService = Depends(get_rating_service),
):
    """Update the authenticated user's rating for a barber."""
    rating = await service.update_rating(
        rater_id=principal.uid,
        subject_id=barber_id,
        score=body.score,
        review_text=body.review_text,
        service_details=body.service_details,
    )
    return RatingResponse(
        message="Rating updated successfully",
        data=RatingData(rating=RatingSchema.from_entity(rating)),
    )


@router.delete("/barber/{barber_id}", response_model=DeletedRatingResponse)
async def delete_rating(
    barber_id: str,
    principal: Principal = Depends(get_current_principal),
    service: RatingService = Depends(get_rating_service),
):
    """Delete the authenticated user's rating for a barber."""
    rating = await service.delete_rating(rater_id=principal.uid, subject_id=barber_id)
    return DeletedRatingResponse(
        message="Rating deleted successfully",
        data=DeletedRatingData(deleted_rating=RatingSchema.from_entity(rating)),
    )


@router.get("/barber/{barber_id}", response_model=RatingListResponse)
async def get_barber_ratings(
    barber_id: str,
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    min_score: Optional[str] = Query(None),
    max_score: Optional[str] = Query(None),
    sort_by: Optional[str] = Query(None),
    sort_order: Optional[str] = Query(None),
    service: RatingService = Depends(get_rating_service),
):
    """
    List a barber's ratings.

    Statistics cover every rating matching the score filter, not just the
    returned page.
    """
    result = await service.list_by_subject(
        barber_id,
        page=page,
        limit=limit,
        min_score=min_score,
        max_score=max_score,
        sort_field=sort_by,
        sort_order=sort_order,
    )
    return RatingListResponse(
        message="Ratings retrieved successfully",
        data=RatingListData.from_dto(result),
    )


@router.get("/barber/{barber_id}/summary", response_model=StatisticsResponse)
async def get_barber_rating_summary(
    barber_id: str,
    service: RatingService = Depends(get_rating_service),
):
    """Average and distribution over all of a barber's ratings."""
    statistics = await service.get_statistics(barber_id)
    return StatisticsResponse(
        message="Rating statistics retrieved successfully",
        data=StatisticsData(statistics=StatisticsSchema.from_value(statistics)),
    )


@router.get("/barber/{barber_id}/user/{user_id}", response_model=RatingResponse)
async def get_rating(
    barber_id: str,
    user_id: str,
    service: RatingService = Depends(get_rating_service),
):
    """Get one user's rating for a barber."""
    rating = await service.get_single_rating(subject_id=barber_id, rater_id=user_id)
    return RatingResponse(
        message="Rating retrieved successfully",
        data=RatingData(rating=RatingSchema.from_entity(rating)),
    )
