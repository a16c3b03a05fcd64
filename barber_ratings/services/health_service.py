"""Health check service for monitoring system components."""
import logging
from enum import Enum
from typing import Any, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from barber_ratings.config import settings
from barber_ratings.infrastructure.persistence.db import SessionLocal

logger = logging.getLogger(__name__)


class HealthStatus(str, Enum):
    """Health status values."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


class HealthCheckService:
    """Service for checking health of system components."""

    def __init__(self, session_factory=SessionLocal):
        self.session_factory = session_factory

    def check_database(self) -> Dict[str, Any]:
        """Check database connectivity and health.

        Returns:
            Dictionary with status and details
        """
        if not settings.USE_DB_REPOS:
            return {
                "status": HealthStatus.HEALTHY,
                "message": "In-memory repositories in use",
                "details": {"backend": "memory"},
            }

        session = self.session_factory()
        try:
            session.execute(text("SELECT 1"))
            return {
                "status": HealthStatus.HEALTHY,
                "message": "Database connection successful",
                "details": {"backend": session.get_bind().dialect.name},
            }
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return {
                "status": HealthStatus.UNHEALTHY,
                "message": "Database connection failed",
                "details": {"error": str(e)},
            }
        finally:
            session.close()

    def get_overall_health(self) -> Dict[str, Any]:
        """Get overall system health status.

        Returns:
            Dictionary with overall status and component details
        """
        database = self.check_database()
        return {
            "status": database["status"],
            "components": {"database": database},
        }


health_service = HealthCheckService()
