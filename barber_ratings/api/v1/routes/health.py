"""Health check endpoints."""
from typing import Any, Dict

from fastapi import APIRouter, Response, status

from barber_ratings.services.health_service import HealthStatus, health_service

router = APIRouter()


@router.get("/health", tags=["health"])
async def simple_health_check() -> Dict[str, str]:
    """
    Simple health check for load balancer - no dependency checks.

    Returns HTTP 200 OK if the application is running.
    """
    return {"status": "ok"}


@router.get("/health/detailed", tags=["health"])
async def detailed_health_check(response: Response) -> Dict[str, Any]:
    """
    Detailed health check including the rating store.

    Returns HTTP 200 if all components are healthy.
    Returns HTTP 503 if any component is unhealthy.
    """
    health_data = health_service.get_overall_health()

    if health_data["status"] == HealthStatus.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    else:
        response.status_code = status.HTTP_200_OK

    return health_data
