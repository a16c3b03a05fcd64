import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from barber_ratings.api.v1.routes.health import router as health_router
from barber_ratings.api.v1.routes.ratings import router as ratings_router
from barber_ratings.config import settings
from barber_ratings.core.database_init import initialize_database
from barber_ratings.domain.exceptions import (
    RatingConflictError,
    RatingNotFoundError,
    RatingStoreError,
    RatingValidationError,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    logger.info("Starting up application...")

    if settings.USE_DB_REPOS and not initialize_database():
        # Continue anyway - requests will report store failures
        logger.error("Database initialization failed")

    yield

    logger.info("Shutting down application...")


def _error(status_code: int, message: str, errors=None) -> JSONResponse:
    content = {"success": False, "message": message}
    if errors is not None:
        content["errors"] = errors
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Map the rating error taxonomy onto HTTP responses."""

    @app.exception_handler(RatingValidationError)
    async def validation_error_handler(request: Request, exc: RatingValidationError):
        return _error(status.HTTP_400_BAD_REQUEST, exc.message, exc.errors)

    @app.exception_handler(RatingNotFoundError)
    async def not_found_handler(request: Request, exc: RatingNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(RatingConflictError)
    async def conflict_handler(request: Request, exc: RatingConflictError):
        return _error(status.HTTP_409_CONFLICT, exc.message)

    @app.exception_handler(RatingStoreError)
    async def store_error_handler(request: Request, exc: RatingStoreError):
        logger.error(
            f"Store failure on {request.method} {request.url.path}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal server error while processing ratings",
        )


def create_app() -> FastAPI:
    """Create FastAPI application and include routers."""
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(ratings_router, prefix="/api/v1")
    app.include_router(health_router, prefix="/api/v1")
    return app


app = create_app()


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}
