"""SQLAlchemy implementation of UserRepository."""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from barber_ratings.domain.entities.user import User as UserEntity
from barber_ratings.domain.repositories.user_repository import UserRepository
from barber_ratings.infrastructure.persistence import models
from barber_ratings.infrastructure.persistence.errors import translate_store_errors


def _to_entity(row: models.User) -> UserEntity:
    """Map ORM model to domain entity."""
    return UserEntity(id=row.id, phone_number=row.phone_number, name=row.name)


class SQLAlchemyUserRepository(UserRepository):
    """User repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[UserEntity]:
        with translate_store_errors(self.session, "get user"):
            row = self.session.get(models.User, user_id)
        return _to_entity(row) if row else None

    async def create(self, user: UserEntity) -> UserEntity:
        row = models.User(
            id=user.id,
            phone_number=user.phone_number,
            name=user.name,
            created_at=datetime.now(timezone.utc),
        )
        with translate_store_errors(self.session, "create user"):
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return _to_entity(row)
