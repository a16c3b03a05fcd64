"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- Database sessions (in-memory SQLite for fast tests)
- Rating services over in-memory and SQLAlchemy repositories
- FastAPI test client with dependency overrides
- Test data factories
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Generator

# Must be set before barber_ratings.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from barber_ratings.api.dependencies import get_token_verifier
from barber_ratings.application.ports.identity import Principal
from barber_ratings.core.dependencies import build_rating_service, get_rating_service
from barber_ratings.domain.entities.barber import Barber
from barber_ratings.domain.entities.user import User
from barber_ratings.infrastructure.identity.static_token_verifier import StaticTokenVerifier
from barber_ratings.infrastructure.persistence import models
from barber_ratings.infrastructure.persistence.db import Base
from barber_ratings.infrastructure.persistence.repositories.in_memory_barber_repository import (
    InMemoryBarberRepository,
)
from barber_ratings.infrastructure.persistence.repositories.in_memory_rating_repository import (
    InMemoryRatingRepository,
)
from barber_ratings.infrastructure.persistence.repositories.in_memory_user_repository import (
    InMemoryUserRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_barber_repository import (
    SQLAlchemyBarberRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_rating_repository import (
    SQLAlchemyRatingRepository,
)
from barber_ratings.infrastructure.persistence.repositories.sqlalchemy_user_repository import (
    SQLAlchemyUserRepository,
)
from barber_ratings.main import app


BARBER_ID = "barber_uid_1"
OTHER_BARBER_ID = "barber_uid_2"
USER_ID = "test_user_uid_12345"
USER_2_ID = "test_user_uid_67890"
USER_3_ID = "test_user_uid_11111"


# ==============================================================================
# TEST DATA FACTORIES
# ==============================================================================

@pytest.fixture
def sample_barbers():
    """Barbers known to the collaborator stores."""
    return [
        Barber(id=BARBER_ID, name="Fade Masters"),
        Barber(id=OTHER_BARBER_ID, name="Sharp Cuts"),
    ]


@pytest.fixture
def sample_users():
    """Users known to the collaborator stores."""
    return [
        User(id=USER_ID, phone_number="+911234567891"),
        User(id=USER_2_ID, phone_number="+911234567892"),
        User(id=USER_3_ID, phone_number="+911234567893"),
    ]


@pytest.fixture
def sample_service_details():
    """Service details payload as it arrives in a request body."""
    return {
        "service_name": "Haircut",
        "service_date": "2024-01-15",
        "service_price": 25.5,
    }


@pytest.fixture
def clock():
    """Deterministic clock advancing one second per reading."""
    state = {"now": datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)}

    def tick() -> datetime:
        state["now"] += timedelta(seconds=1)
        return state["now"]

    return tick


# ==============================================================================
# IN-MEMORY FIXTURES
# ==============================================================================

@pytest.fixture
def rating_repository(clock):
    return InMemoryRatingRepository(clock=clock)


@pytest.fixture
def rating_service(rating_repository, sample_barbers, sample_users):
    """Rating service over in-memory repositories seeded with sample data."""
    return build_rating_service(
        rating_repository,
        InMemoryBarberRepository(sample_barbers),
        InMemoryUserRepository(sample_users),
    )


# ==============================================================================
# DATABASE FIXTURES
# ==============================================================================

@pytest.fixture(scope="function")
def test_db_engine():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Enable foreign key support for SQLite
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db_session(test_db_engine, sample_barbers, sample_users) -> Generator[Session, None, None]:
    """Create a database session seeded with barbers and users."""
    TestingSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=test_db_engine
    )

    session = TestingSessionLocal()
    session.add_all([models.Barber(id=b.id, name=b.name) for b in sample_barbers])
    session.add_all([
        models.User(id=u.id, phone_number=u.phone_number) for u in sample_users
    ])
    session.commit()

    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def sql_rating_repository(test_db_session):
    return SQLAlchemyRatingRepository(test_db_session)


@pytest.fixture
def sql_rating_service(test_db_session, sql_rating_repository):
    """Rating service over SQLAlchemy repositories on the test database."""
    return build_rating_service(
        sql_rating_repository,
        SQLAlchemyBarberRepository(test_db_session),
        SQLAlchemyUserRepository(test_db_session),
    )


# ==============================================================================
# AUTHENTICATION FIXTURES
# ==============================================================================

@pytest.fixture
def token_verifier():
    """Verifier knowing one bearer token per sample user."""
    return StaticTokenVerifier({
        "test-user-token": Principal(uid=USER_ID, phone_number="+911234567891"),
        "test-user-token-2": Principal(uid=USER_2_ID, phone_number="+911234567892"),
        "test-stranger-token": Principal(uid="unknown_uid", phone_number=None),
    })


@pytest.fixture
def user_headers():
    return {"Authorization": "Bearer test-user-token"}


@pytest.fixture
def user_2_headers():
    return {"Authorization": "Bearer test-user-token-2"}


# ==============================================================================
# API CLIENT FIXTURES
# ==============================================================================

def _client_for(service, token_verifier) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_rating_service] = lambda: service
    app.dependency_overrides[get_token_verifier] = lambda: token_verifier

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def client(rating_service, token_verifier) -> Generator[TestClient, None, None]:
    """FastAPI test client backed by in-memory repositories."""
    yield from _client_for(rating_service, token_verifier)


@pytest.fixture(scope="function")
def db_client(sql_rating_service, token_verifier) -> Generator[TestClient, None, None]:
    """FastAPI test client backed by the SQLite test database."""
    yield from _client_for(sql_rating_service, token_verifier)


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
