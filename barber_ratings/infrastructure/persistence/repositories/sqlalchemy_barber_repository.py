"""SQLAlchemy implementation of BarberRepository."""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from barber_ratings.domain.entities.barber import Barber as BarberEntity
from barber_ratings.domain.repositories.barber_repository import BarberRepository
from barber_ratings.infrastructure.persistence import models
from barber_ratings.infrastructure.persistence.errors import translate_store_errors


def _to_entity(row: models.Barber) -> BarberEntity:
    """Map ORM model to domain entity."""
    return BarberEntity(id=row.id, name=row.name)


class SQLAlchemyBarberRepository(BarberRepository):
    """Barber repository using SQLAlchemy."""

    def __init__(self, session: Session):
        self.session = session

    async def get_by_id(self, barber_id: str) -> Optional[BarberEntity]:
        with translate_store_errors(self.session, "get barber"):
            row = self.session.get(models.Barber, barber_id)
        return _to_entity(row) if row else None

    async def create(self, barber: BarberEntity) -> BarberEntity:
        row = models.Barber(
            id=barber.id,
            name=barber.name,
            created_at=datetime.now(timezone.utc),
        )
        with translate_store_errors(self.session, "create barber"):
            self.session.add(row)
            self.session.commit()
            self.session.refresh(row)
        return _to_entity(row)
